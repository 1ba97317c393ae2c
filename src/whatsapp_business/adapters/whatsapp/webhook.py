"""Configuração explícita e fachada do webhook inbound.

Nenhuma função do núcleo lê secret ou verify token de variáveis globais:
cada endpoint recebe seu próprio ``WebhookConfig`` (multi-tenant).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from whatsapp_business.adapters.whatsapp import extractor, handshake, signature
from whatsapp_business.adapters.whatsapp.webhook_models import InboundMessage, MessageStatus

if TYPE_CHECKING:
    from whatsapp_business.config.settings import Settings


@dataclass(frozen=True)
class WebhookConfig:
    """App secret (HMAC) e verify token (handshake) de um endpoint."""

    app_secret: str = field(repr=False)
    verify_token: str = field(repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> WebhookConfig:
        errors = settings.validate_webhook_config()
        if errors:
            raise ValueError("; ".join(errors))
        return cls(
            app_secret=settings.whatsapp_webhook_secret or "",
            verify_token=settings.whatsapp_verify_token or "",
        )


class WebhookHandler:
    """Valida e extrai eventos com a configuração de um único endpoint."""

    def __init__(self, config: WebhookConfig) -> None:
        self.config = config

    def validate_signature(self, raw_payload: bytes, signature_header: str | None) -> bool:
        return signature.validate_signature(raw_payload, signature_header, self.config.app_secret)

    def verify_signature_headers(
        self, raw_body: bytes, headers: Mapping[str, str]
    ) -> signature.SignatureResult:
        return signature.verify_meta_signature(raw_body, headers, self.config.app_secret)

    def verify_handshake(self, query_params: Mapping[str, str]) -> str | None:
        return handshake.verify_handshake(query_params, self.config.verify_token)

    @staticmethod
    def get_first_message(envelope: Any) -> InboundMessage | None:
        return extractor.get_first_message(envelope)

    @staticmethod
    def get_first_status(envelope: Any) -> MessageStatus | None:
        return extractor.get_first_status(envelope)

    @staticmethod
    def iter_events(envelope: Any) -> extractor.WebhookEvents:
        return extractor.iter_events(envelope)
