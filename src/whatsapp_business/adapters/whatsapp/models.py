"""Modelos de requisição e resposta da Graph API (outbound).

Responsabilidade:
- Tipar os objetos que compõem os payloads de envio e gestão
- Tipar as respostas mais usadas (envio, upload)

Os modelos aceitam campos extras: a Meta evolui os objetos com frequência
e o SDK não deve bloquear campos novos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from whatsapp_business.domain.enums import Granularity, TemplateCategory


class _GraphModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serializa omitindo campos None."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Envio de mensagens
# ---------------------------------------------------------------------------


class MediaObject(_GraphModel):
    """Referência de mídia: ``id`` (já hospedada) ou ``link`` (URL pública)."""

    id: str | None = None
    link: str | None = None
    caption: str | None = None
    filename: str | None = None  # document
    provider: str | None = None  # sticker


class ContactName(_GraphModel):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(_GraphModel):
    phone: str
    type: str | None = None  # CELL, MAIN, IPHONE, HOME, WORK
    wa_id: str | None = None


class ContactObject(_GraphModel):
    """Cartão de contato; emails, urls etc. entram como extras."""

    name: ContactName
    phones: list[ContactPhone] | None = None


class TemplateParameter(_GraphModel):
    type: str  # text, currency, date_time, image, document, video, payload
    text: str | None = None
    currency: dict[str, Any] | None = None
    date_time: dict[str, Any] | None = None
    image: MediaObject | None = None
    document: MediaObject | None = None
    video: MediaObject | None = None
    payload: str | None = None


class TemplateComponent(_GraphModel):
    type: str  # header, body, footer, button
    sub_type: str | None = None  # url, quick_reply
    index: str | None = None
    parameters: list[TemplateParameter] = Field(default_factory=list)


class InteractiveHeader(_GraphModel):
    type: str  # text, image, video, document
    text: str | None = None
    image: MediaObject | None = None
    video: MediaObject | None = None
    document: MediaObject | None = None


class InteractiveContent(_GraphModel):
    """Objeto ``interactive`` completo (button, list, flow, cta_url...)."""

    type: str
    header: InteractiveHeader | None = None
    body: dict[str, Any] | None = None
    footer: dict[str, Any] | None = None
    action: dict[str, Any]


class ProductItem(_GraphModel):
    product_retailer_id: str


class ProductSection(_GraphModel):
    title: str | None = None
    product_items: list[ProductItem]


class SendMessageResponse(_GraphModel):
    messaging_product: str | None = None
    contacts: list[dict[str, Any]] = Field(default_factory=list)
    messages: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def message_id(self) -> str | None:
        """wamid da mensagem enviada (primeiro elemento de ``messages``)."""
        if not self.messages:
            return None
        return self.messages[0].get("id")


class UploadMediaResponse(_GraphModel):
    id: str


# ---------------------------------------------------------------------------
# Gestão (templates, catálogo, analytics, automação, partner)
# ---------------------------------------------------------------------------


class CreateTemplateComponent(_GraphModel):
    type: str  # HEADER, BODY, FOOTER, BUTTONS
    format: str | None = None
    text: str | None = None
    buttons: list[dict[str, Any]] | None = None
    example: dict[str, Any] | None = None


class CreateTemplateRequest(_GraphModel):
    name: str
    category: TemplateCategory
    language: str
    components: list[CreateTemplateComponent]
    allow_category_change: bool | None = None


class ProductRequest(_GraphModel):
    retailer_id: str
    name: str
    description: str
    availability: str  # "in stock" | "out of stock"
    condition: str  # new, refurbished, used
    price: int  # centavos
    currency: str
    image_url: str
    brand: str | None = None
    category: str | None = None
    url: str | None = None


class AnalyticsParams(_GraphModel):
    start: int  # unix timestamp
    end: int
    granularity: Granularity
    metric_types: list[str] | None = None  # COST, CONVERSATION, PHONE_CALL
    phone_numbers: list[str] | None = None


class IceBreaker(_GraphModel):
    question: str


class Command(_GraphModel):
    command_name: str
    description: str


class AllocationConfig(_GraphModel):
    waba_id: str
    amount: str
    currency: str


class OBARequest(_GraphModel):
    """Pedido de conta comercial oficial (selo verde)."""

    phone_number_id: str
    website_url1: str
    website_url2: str | None = None


class BusinessProfile(_GraphModel):
    about: str | None = None
    address: str | None = None
    description: str | None = None
    email: str | None = None
    profile_picture_url: str | None = None
    websites: list[str] | None = None
    vertical: str | None = None


class FlowJSON(_GraphModel):
    version: str
    screens: list[Any]
