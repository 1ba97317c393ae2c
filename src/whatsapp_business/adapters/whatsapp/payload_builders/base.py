"""Utilidades base para builders de payload."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from whatsapp_business.domain.enums import MessageType

MESSAGING_PRODUCT = "whatsapp"


def to_json_value(value: Any) -> Any:
    """Converte modelos/dicts em JSON puro, omitindo chaves None em qualquer nível."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, Mapping):
        return {k: to_json_value(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def build_base_payload(to: str, message_type: MessageType | str) -> dict[str, Any]:
    """Constrói payload base comum a todas as mensagens.

    Args:
        to: Destinatário (E.164 sem "+")
        message_type: Valor do campo ``type``

    Returns:
        Payload com campos obrigatórios
    """
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": "individual",
        "to": to,
        "type": str(message_type),
    }
