"""Builders para mensagens interativas (genérica, endereço, catálogo, produtos, pedido)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp.models import InteractiveContent, ProductSection
from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.domain.enums import InteractiveType, MessageType

DEFAULT_ADDRESS_COUNTRY = "IN"


def _interactive_payload(
    to: str,
    interactive: InteractiveContent | Mapping[str, Any],
) -> dict[str, Any]:
    payload = build_base_payload(to, MessageType.INTERACTIVE)
    payload["interactive"] = to_json_value(interactive)
    return payload


def _footer(text: str | None) -> dict[str, str] | None:
    return {"text": text} if text else None


def build_interactive_payload(
    to: str,
    interactive: InteractiveContent | Mapping[str, Any],
) -> dict[str, Any]:
    """Envia o objeto ``interactive`` como recebido (button, list, flow, cta_url...)."""
    return _interactive_payload(to, interactive)


def build_request_address_payload(
    to: str,
    body_text: str,
    country: str = DEFAULT_ADDRESS_COUNTRY,
    values: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Pede o endereço de entrega ao usuário (address_message)."""
    return _interactive_payload(
        to,
        {
            "type": InteractiveType.ADDRESS_MESSAGE.value,
            "body": {"text": body_text},
            "action": {
                "name": InteractiveType.ADDRESS_MESSAGE.value,
                "parameters": {"country": country, "values": values},
            },
        },
    )


def build_catalog_payload(
    to: str,
    body_text: str,
    thumbnail_product_id: str | None = None,
    footer_text: str | None = None,
) -> dict[str, Any]:
    return _interactive_payload(
        to,
        {
            "type": InteractiveType.CATALOG_MESSAGE.value,
            "body": {"text": body_text},
            "action": {
                "name": InteractiveType.CATALOG_MESSAGE.value,
                "parameters": {"thumbnail_product_retailer_id": thumbnail_product_id},
            },
            "footer": _footer(footer_text),
        },
    )


def build_product_list_payload(
    to: str,
    header_text: str,
    body_text: str,
    catalog_id: str,
    sections: Sequence[ProductSection | Mapping[str, Any]],
    footer_text: str | None = None,
) -> dict[str, Any]:
    """Lista multi-produto; header de texto é obrigatório neste tipo."""
    return _interactive_payload(
        to,
        {
            "type": InteractiveType.PRODUCT_LIST.value,
            "header": {"type": "text", "text": header_text},
            "body": {"text": body_text},
            "footer": _footer(footer_text),
            "action": {"catalog_id": catalog_id, "sections": list(sections)},
        },
    )


def build_order_details_payload(to: str, details: Mapping[str, Any]) -> dict[str, Any]:
    """Review and pay: ``details`` traz header/body/footer/action do pedido."""
    interactive = {"type": InteractiveType.ORDER_DETAILS.value}
    interactive.update(details)
    return _interactive_payload(to, interactive)
