"""Builders para mensagens de mídia (imagem, vídeo, áudio, documento, sticker)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_business.adapters.whatsapp.models import MediaObject
from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.domain.enums import MediaType


def build_media_payload(
    to: str,
    media_type: MediaType | str,
    media: MediaObject | Mapping[str, Any],
) -> dict[str, Any]:
    """Constrói payload de mídia.

    O objeto de mídia vai sob a chave do próprio tipo (``image``, ``video``...).
    ``id`` referencia mídia já hospedada na Meta; ``link`` uma URL pública.
    """
    media_type = MediaType(media_type)
    payload = build_base_payload(to, media_type)
    payload[media_type.value] = to_json_value(media)
    return payload
