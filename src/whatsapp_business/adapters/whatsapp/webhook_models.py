"""Modelos tipados dos registros recebidos no webhook da Meta.

Todos os modelos aceitam campos extras e nenhum campo é obrigatório: um
registro presente no envelope nunca é descartado. ``raw`` guarda o dict
exatamente como chegou (os campos tipados podem normalizar valores).
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from whatsapp_business.observability.logging import get_logger

logger = get_logger(__name__)


class _WebhookRecord(BaseModel):
    # Meta alterna entre número e string em ids e timestamps
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)


class _TopLevelRecord(_WebhookRecord):
    """Elemento de ``value.messages`` ou ``value.statuses``."""

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @property
    def raw(self) -> dict[str, Any]:
        """O registro exatamente como veio no envelope."""
        return self._raw

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Self:
        """Valida o registro; se o formato fugir do modelo, preserva-o sem validação."""
        try:
            record = cls.model_validate(raw)
        except ValidationError as exc:
            # Nunca logar o registro: contém telefone e conteúdo
            logger.warning(
                "webhook_record_unvalidated",
                extra={"model": cls.__name__, "error_count": exc.error_count()},
            )
            record = cls.model_construct(**raw)
        record._raw = raw
        return record


class TextContent(_WebhookRecord):
    body: str | None = None


class MediaContent(_WebhookRecord):
    """Bloco de mídia (image, video, audio, document, sticker)."""

    id: str | None = None
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None
    filename: str | None = None
    animated: bool | None = None
    voice: bool | None = None


class LocationContent(_WebhookRecord):
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None
    address: str | None = None
    url: str | None = None


class ReactionContent(_WebhookRecord):
    message_id: str | None = None
    emoji: str | None = None


class ButtonContent(_WebhookRecord):
    """Clique em quick reply de template."""

    payload: str | None = None
    text: str | None = None


class InteractiveReply(_WebhookRecord):
    """Resposta interativa (button_reply, list_reply, nfm_reply)."""

    type: str | None = None
    button_reply: dict[str, Any] | None = None
    list_reply: dict[str, Any] | None = None
    nfm_reply: dict[str, Any] | None = None


class OrderContent(_WebhookRecord):
    catalog_id: str | None = None
    text: str | None = None
    product_items: list[dict[str, Any]] | None = None


class MessageContext(_WebhookRecord):
    """Contexto de resposta/encaminhamento."""

    message_id: str | None = Field(default=None, alias="id")
    sender: str | None = Field(default=None, alias="from")
    forwarded: bool | None = None
    frequently_forwarded: bool | None = None
    referred_product: dict[str, Any] | None = None


class InboundMessage(_TopLevelRecord):
    """Mensagem recebida (elemento de ``value.messages``)."""

    id: str | None = None
    type: str | None = None
    sender: str | None = Field(default=None, alias="from")
    timestamp: str | None = None
    text: TextContent | None = None
    image: MediaContent | None = None
    video: MediaContent | None = None
    audio: MediaContent | None = None
    document: MediaContent | None = None
    sticker: MediaContent | None = None
    location: LocationContent | None = None
    contacts: list[dict[str, Any]] | None = None
    interactive: InteractiveReply | None = None
    button: ButtonContent | None = None
    reaction: ReactionContent | None = None
    order: OrderContent | None = None
    referral: dict[str, Any] | None = None
    system: dict[str, Any] | None = None
    context: MessageContext | None = None
    errors: list[dict[str, Any]] | None = None

    @property
    def text_body(self) -> str | None:
        text = self.text
        if isinstance(text, TextContent):
            return text.body
        # registro preservado sem validação
        if isinstance(text, dict):
            return text.get("body")
        return None


class MessageStatus(_TopLevelRecord):
    """Atualização de entrega (elemento de ``value.statuses``)."""

    id: str | None = None
    status: str | None = None
    timestamp: str | None = None
    recipient_id: str | None = None
    conversation: dict[str, Any] | None = None
    pricing: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None


class WebhookProcessingSummary(BaseModel):
    """Resumo do processamento de uma entrega (sem PII).

    Devolvido à Meta no 200 do POST; não expõe conteúdo dos eventos.
    """

    total_received: int = 0
    total_messages: int = 0
    total_statuses: int = 0
    signature_validated: bool = False
    correlation_id: str | None = None
