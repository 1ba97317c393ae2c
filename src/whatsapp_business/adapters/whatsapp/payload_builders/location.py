"""Builder para mensagens de localização."""

from __future__ import annotations

from typing import Any

from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.domain.enums import MessageType


def build_location_payload(
    to: str,
    longitude: float,
    latitude: float,
    name: str | None = None,
    address: str | None = None,
) -> dict[str, Any]:
    payload = build_base_payload(to, MessageType.LOCATION)
    payload["location"] = to_json_value(
        {"longitude": longitude, "latitude": latitude, "name": name, "address": address}
    )
    return payload
