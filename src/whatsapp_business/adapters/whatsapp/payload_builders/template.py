"""Builder para mensagens de template."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp.models import TemplateComponent
from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.domain.enums import MessageType

DEFAULT_TEMPLATE_LANGUAGE = "en_US"


def build_template_payload(
    to: str,
    template_name: str,
    language_code: str = DEFAULT_TEMPLATE_LANGUAGE,
    components: Sequence[TemplateComponent | Mapping[str, Any]] | None = None,
) -> dict[str, Any]:
    """Constrói payload para mensagem de template.

    Args:
        to: Destinatário
        template_name: Nome do template aprovado
        language_code: Código de idioma da tradução (ex.: pt_BR)
        components: Parâmetros de header/body/botões; omitido se None

    Returns:
        Payload template conforme API Meta
    """
    template_obj: dict[str, Any] = {
        "name": template_name,
        "language": {"code": language_code},
    }
    if components is not None:
        template_obj["components"] = to_json_value(list(components))

    payload = build_base_payload(to, MessageType.TEMPLATE)
    payload["template"] = template_obj
    return payload
