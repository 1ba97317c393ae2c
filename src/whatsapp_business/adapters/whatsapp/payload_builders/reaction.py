"""Builder para reações (emoji sobre uma mensagem recebida)."""

from __future__ import annotations

from typing import Any

from whatsapp_business.adapters.whatsapp.payload_builders.base import build_base_payload
from whatsapp_business.domain.enums import MessageType


def build_reaction_payload(to: str, message_id: str, emoji: str) -> dict[str, Any]:
    """Emoji vazio remove a reação anterior."""
    payload = build_base_payload(to, MessageType.REACTION)
    payload["reaction"] = {"message_id": message_id, "emoji": emoji}
    return payload


def build_read_receipt_payload(message_id: str) -> dict[str, Any]:
    """Marca mensagem recebida como lida (não usa o payload base)."""
    return {"messaging_product": "whatsapp", "status": "read", "message_id": message_id}
