"""Conta e credenciais: tokens, números da WABA, registro e perfil comercial.

``exchange_token`` e ``debug_token`` autenticam por parâmetros de query
(app secret / token de app), não pelo Bearer do cliente.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import BusinessProfile
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource, require_id
from whatsapp_business.adapters.whatsapp.results import ApiResult
from whatsapp_business.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

BUSINESS_PROFILE_FIELDS = (
    "about",
    "address",
    "description",
    "email",
    "profile_picture_url",
    "websites",
    "vertical",
)


class AccountApi(ApiResource):
    def __init__(
        self,
        http: WhatsAppHttpClient,
        phone_number_id: str,
        waba_id: str | None = None,
    ) -> None:
        super().__init__(http)
        self.phone_number_id = phone_number_id
        self.waba_id = waba_id

    async def exchange_token(
        self,
        app_id: str,
        app_secret: str,
        short_lived_token: str,
    ) -> ApiResult[dict[str, Any]]:
        """Troca token de curta duração por um de longa duração (~60 dias)."""
        return await self._call(
            "exchange_token",
            "GET",
            "oauth/access_token",
            authenticated=False,
            params={
                "grant_type": "fb_exchange_token",
                "client_id": app_id,
                "client_secret": app_secret,
                "fb_exchange_token": short_lived_token,
            },
        )

    async def debug_token(
        self,
        input_token: str,
        access_token: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        """Inspeciona validade, escopos e expiração de ``input_token``.

        ``access_token`` é o token de app (ou de sistema) que autoriza a consulta;
        sem ele usa o token do próprio cliente.
        """
        return await self._call(
            "debug_token",
            "GET",
            "debug_token",
            authenticated=False,
            params={
                "input_token": input_token,
                "access_token": access_token or self._http.access_token,
            },
        )

    async def get_phone_numbers(self, waba_id: str | None = None) -> ApiResult[dict[str, Any]]:
        waba = require_id("waba_id", waba_id or self.waba_id)
        return await self._call("get_phone_numbers", "GET", f"{waba}/phone_numbers")

    async def register_phone_number(self, phone_number_id: str, pin: str) -> ApiResult[dict[str, Any]]:
        """Registra o número na Cloud API com o PIN de verificação em duas etapas."""
        return await self._call(
            "register_phone_number",
            "POST",
            f"{phone_number_id}/register",
            json={"messaging_product": "whatsapp", "pin": pin},
        )

    async def get_business_profile(self) -> ApiResult[dict[str, Any]]:
        return await self._call(
            "get_business_profile",
            "GET",
            f"{self.phone_number_id}/whatsapp_business_profile",
            params={"fields": ",".join(BUSINESS_PROFILE_FIELDS)},
        )

    async def update_business_profile(
        self,
        profile: BusinessProfile | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Atualização parcial: só os campos informados são enviados."""
        body: dict[str, Any] = {"messaging_product": "whatsapp"}
        body.update(to_json_value(profile))
        return await self._call(
            "update_business_profile",
            "POST",
            f"{self.phone_number_id}/whatsapp_business_profile",
            json=body,
        )
