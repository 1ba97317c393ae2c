"""Enums de domínio para tipos de mensagem, eventos e parâmetros da API Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de conteúdo aceitos no envio (campo ``type`` do payload)."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"
    REACTION = "reaction"


class MediaType(StrEnum):
    """Subconjunto de MessageType que referencia mídia."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas."""

    BUTTON = "button"
    LIST = "list"
    PRODUCT = "product"
    PRODUCT_LIST = "product_list"
    CATALOG_MESSAGE = "catalog_message"
    ADDRESS_MESSAGE = "address_message"
    ORDER_DETAILS = "order_details"
    FLOW = "flow"
    CTA_URL = "cta_url"


class TemplateCategory(StrEnum):
    """Categorias de template conforme Meta."""

    MARKETING = "MARKETING"
    UTILITY = "UTILITY"
    AUTHENTICATION = "AUTHENTICATION"


class Granularity(StrEnum):
    """Granularidade de analytics."""

    HALF_HOUR = "HALF_HOUR"
    DAILY = "DAILY"
    MONTHLY = "MONTHLY"


class QRImageFormat(StrEnum):
    SVG = "SVG"
    PNG = "PNG"


class DeliveryStatus(StrEnum):
    """Status de entrega reportados em ``value.statuses``."""

    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
    DELETED = "deleted"


class EventKind(StrEnum):
    MESSAGE = "message"
    STATUS = "status"
