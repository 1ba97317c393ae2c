"""Envio de mensagens via Meta/WhatsApp (POST /{phone_number_id}/messages).

Responsabilidade:
- Montar o payload com os builders
- Executar exatamente uma requisição por envio
- Devolver ApiResult[SendMessageResponse] sem expor tokens ou conteúdo em logs
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp import payload_builders as pb
from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import (
    ContactObject,
    InteractiveContent,
    MediaObject,
    ProductSection,
    SendMessageResponse,
    TemplateComponent,
)
from whatsapp_business.adapters.whatsapp.payload_builders.interactive import DEFAULT_ADDRESS_COUNTRY
from whatsapp_business.adapters.whatsapp.payload_builders.template import DEFAULT_TEMPLATE_LANGUAGE
from whatsapp_business.adapters.whatsapp.resource import ApiResource
from whatsapp_business.adapters.whatsapp.results import ApiResult
from whatsapp_business.domain.enums import MediaType

MediaInput = MediaObject | Mapping[str, Any]


class MessagesApi(ApiResource):
    """Cliente de envio de mensagens de um número remetente."""

    def __init__(self, http: WhatsAppHttpClient, phone_number_id: str) -> None:
        super().__init__(http)
        self.phone_number_id = phone_number_id

    async def _send(self, operation: str, payload: dict[str, Any]) -> ApiResult[SendMessageResponse]:
        return await self._call(
            operation,
            "POST",
            f"{self.phone_number_id}/messages",
            parse=SendMessageResponse.model_validate,
            json=payload,
        )

    async def send_text(
        self, to: str, body: str, preview_url: bool = False
    ) -> ApiResult[SendMessageResponse]:
        return await self._send("send_text", pb.build_text_payload(to, body, preview_url))

    async def send_template(
        self,
        to: str,
        template_name: str,
        language_code: str = DEFAULT_TEMPLATE_LANGUAGE,
        components: Sequence[TemplateComponent | Mapping[str, Any]] | None = None,
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_template_payload(to, template_name, language_code, components)
        return await self._send("send_template", payload)

    async def send_media(
        self, to: str, media_type: MediaType | str, media: MediaInput
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_media_payload(to, media_type, media)
        return await self._send(f"send_{MediaType(media_type).value}", payload)

    async def send_image(self, to: str, image: MediaInput) -> ApiResult[SendMessageResponse]:
        return await self.send_media(to, MediaType.IMAGE, image)

    async def send_video(self, to: str, video: MediaInput) -> ApiResult[SendMessageResponse]:
        return await self.send_media(to, MediaType.VIDEO, video)

    async def send_audio(self, to: str, audio: MediaInput) -> ApiResult[SendMessageResponse]:
        return await self.send_media(to, MediaType.AUDIO, audio)

    async def send_document(self, to: str, document: MediaInput) -> ApiResult[SendMessageResponse]:
        return await self.send_media(to, MediaType.DOCUMENT, document)

    async def send_sticker(self, to: str, sticker: MediaInput) -> ApiResult[SendMessageResponse]:
        return await self.send_media(to, MediaType.STICKER, sticker)

    async def send_location(
        self,
        to: str,
        longitude: float,
        latitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_location_payload(to, longitude, latitude, name, address)
        return await self._send("send_location", payload)

    async def send_contacts(
        self, to: str, contacts: Sequence[ContactObject | Mapping[str, Any]]
    ) -> ApiResult[SendMessageResponse]:
        return await self._send("send_contacts", pb.build_contacts_payload(to, contacts))

    async def send_interactive(
        self, to: str, interactive: InteractiveContent | Mapping[str, Any]
    ) -> ApiResult[SendMessageResponse]:
        return await self._send("send_interactive", pb.build_interactive_payload(to, interactive))

    async def send_reaction(
        self, to: str, message_id: str, emoji: str
    ) -> ApiResult[SendMessageResponse]:
        return await self._send("send_reaction", pb.build_reaction_payload(to, message_id, emoji))

    async def mark_as_read(self, message_id: str) -> ApiResult[bool]:
        """Marca a mensagem recebida como lida (tiques azuis)."""
        return await self._call(
            "mark_as_read",
            "POST",
            f"{self.phone_number_id}/messages",
            parse=lambda data: bool(data.get("success", True)),
            json=pb.build_read_receipt_payload(message_id),
        )

    async def send_request_address(
        self,
        to: str,
        body_text: str,
        country: str = DEFAULT_ADDRESS_COUNTRY,
        values: Mapping[str, Any] | None = None,
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_request_address_payload(to, body_text, country, values)
        return await self._send("send_request_address", payload)

    async def send_catalog(
        self,
        to: str,
        body_text: str,
        thumbnail_product_id: str | None = None,
        footer_text: str | None = None,
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_catalog_payload(to, body_text, thumbnail_product_id, footer_text)
        return await self._send("send_catalog", payload)

    async def send_product_list(
        self,
        to: str,
        header_text: str,
        body_text: str,
        catalog_id: str,
        sections: Sequence[ProductSection | Mapping[str, Any]],
        footer_text: str | None = None,
    ) -> ApiResult[SendMessageResponse]:
        payload = pb.build_product_list_payload(
            to, header_text, body_text, catalog_id, sections, footer_text
        )
        return await self._send("send_product_list", payload)

    async def send_order_details(
        self, to: str, details: Mapping[str, Any]
    ) -> ApiResult[SendMessageResponse]:
        return await self._send("send_order_details", pb.build_order_details_payload(to, details))
