"""Automação conversacional (ice breakers, comandos) e QR codes de mensagem."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import Command, IceBreaker
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource
from whatsapp_business.adapters.whatsapp.results import ApiResult
from whatsapp_business.domain.enums import QRImageFormat


class AutomationApi(ApiResource):
    """Recursos de automação de um número; ``phone_number_id`` pode ser sobrescrito por chamada."""

    def __init__(self, http: WhatsAppHttpClient, phone_number_id: str) -> None:
        super().__init__(http)
        self.phone_number_id = phone_number_id

    def _automation_path(self, phone_number_id: str | None) -> str:
        return f"{phone_number_id or self.phone_number_id}/conversational_automation"

    def _qr_path(self, phone_number_id: str | None) -> str:
        return f"{phone_number_id or self.phone_number_id}/message_qrdls"

    async def set_ice_breakers(
        self,
        ice_breakers: Sequence[IceBreaker | Mapping[str, Any]],
        phone_number_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        # Mensagem de boas-vindas fica desligada ao configurar prompts
        return await self._call(
            "set_ice_breakers",
            "POST",
            self._automation_path(phone_number_id),
            json={"prompts": to_json_value(list(ice_breakers)), "enable_welcome_message": False},
        )

    async def get_ice_breakers(self, phone_number_id: str | None = None) -> ApiResult[dict[str, Any]]:
        return await self._call("get_ice_breakers", "GET", self._automation_path(phone_number_id))

    async def set_commands(
        self,
        commands: Sequence[Command | Mapping[str, Any]],
        phone_number_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        return await self._call(
            "set_commands",
            "POST",
            self._automation_path(phone_number_id),
            json={"commands": to_json_value(list(commands))},
        )

    async def get_commands(self, phone_number_id: str | None = None) -> ApiResult[dict[str, Any]]:
        return await self._call("get_commands", "GET", self._automation_path(phone_number_id))

    async def create_qr_code(
        self,
        prefilled_message: str,
        image_format: QRImageFormat | str = QRImageFormat.SVG,
        phone_number_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        """QR code que abre a conversa com ``prefilled_message`` já digitada."""
        return await self._call(
            "create_qr_code",
            "POST",
            self._qr_path(phone_number_id),
            json={
                "prefilled_message": prefilled_message,
                "generate_qr_image": QRImageFormat(image_format).value,
            },
        )

    async def list_qr_codes(self, phone_number_id: str | None = None) -> ApiResult[dict[str, Any]]:
        return await self._call("list_qr_codes", "GET", self._qr_path(phone_number_id))

    async def delete_qr_code(
        self,
        qr_code_id: str,
        phone_number_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        return await self._call(
            "delete_qr_code",
            "DELETE",
            self._qr_path(phone_number_id),
            params={"qr_code_id": qr_code_id},
        )
