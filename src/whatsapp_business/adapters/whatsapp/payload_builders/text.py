"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import Any

from whatsapp_business.adapters.whatsapp.payload_builders.base import build_base_payload
from whatsapp_business.domain.enums import MessageType


def build_text_payload(to: str, body: str, preview_url: bool = False) -> dict[str, Any]:
    """Payload de texto; ``preview_url`` controla a prévia de links."""
    payload = build_base_payload(to, MessageType.TEXT)
    payload["text"] = {"preview_url": preview_url, "body": body}
    return payload
