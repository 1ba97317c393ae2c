"""Builder para mensagens de contatos."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp.models import ContactObject
from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.domain.enums import MessageType


def build_contacts_payload(
    to: str,
    contacts: Sequence[ContactObject | Mapping[str, Any]],
) -> dict[str, Any]:
    payload = build_base_payload(to, MessageType.CONTACTS)
    payload["contacts"] = to_json_value(list(contacts))
    return payload
