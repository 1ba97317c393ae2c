"""Fachada única para a Graph API do WhatsApp Business.

Uso típico:
    async with create_whatsapp_client(get_settings()) as wa:
        result = await wa.messages.send_text("5511999999999", "Olá")
        if result.ok:
            print(result.data.message_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from whatsapp_business.adapters.whatsapp.account import AccountApi
from whatsapp_business.adapters.whatsapp.automation import AutomationApi
from whatsapp_business.adapters.whatsapp.catalog import CatalogApi
from whatsapp_business.adapters.whatsapp.flow_manager import FlowsApi
from whatsapp_business.adapters.whatsapp.http_client import (
    WhatsAppHttpClient,
    create_whatsapp_http_client,
)
from whatsapp_business.adapters.whatsapp.media_uploader import MediaApi
from whatsapp_business.adapters.whatsapp.outbound import MessagesApi
from whatsapp_business.adapters.whatsapp.partner import PartnerApi
from whatsapp_business.adapters.whatsapp.template_manager import TemplatesApi
from whatsapp_business.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_business.config.settings import Settings

logger: logging.Logger = get_logger(__name__)


class WhatsAppBusinessClient:
    """Agrupa os recursos sobre um único WhatsAppHttpClient (um token, um número)."""

    def __init__(
        self,
        http: WhatsAppHttpClient,
        phone_number_id: str,
        waba_id: str | None = None,
        app_id: str | None = None,
    ) -> None:
        self.http = http
        self.phone_number_id = phone_number_id
        self.waba_id = waba_id

        self.messages = MessagesApi(http, phone_number_id)
        self.media = MediaApi(http, phone_number_id, app_id=app_id)
        self.templates = TemplatesApi(http, waba_id)
        self.flows = FlowsApi(http, waba_id)
        self.catalog = CatalogApi(http)
        self.account = AccountApi(http, phone_number_id, waba_id)
        self.automation = AutomationApi(http, phone_number_id)
        self.partner = PartnerApi(http)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> WhatsAppBusinessClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def create_whatsapp_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppBusinessClient:
    """Factory a partir de Settings.

    Raises:
        ValueError: token ou phone_number_id ausentes
    """
    errors = settings.validate_whatsapp_config()
    if errors:
        raise ValueError("; ".join(errors))

    http = create_whatsapp_http_client(settings, transport=transport)
    logger.info(
        "Cliente WhatsApp Business criado",
        extra={"has_waba_id": bool(settings.whatsapp_business_account_id)},
    )
    return WhatsAppBusinessClient(
        http,
        phone_number_id=settings.whatsapp_phone_number_id or "",
        waba_id=settings.whatsapp_business_account_id,
        app_id=settings.whatsapp_app_id,
    )
