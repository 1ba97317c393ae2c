"""SDK da WhatsApp Business Cloud API com verificação de webhook.

Uso típico:
    from whatsapp_business import WebhookConfig, WebhookHandler, create_whatsapp_client
"""

from whatsapp_business.adapters.whatsapp.client import (
    WhatsAppBusinessClient,
    create_whatsapp_client,
)
from whatsapp_business.adapters.whatsapp.extractor import (
    WebhookEvent,
    WebhookEvents,
    get_first_message,
    get_first_status,
    iter_events,
)
from whatsapp_business.adapters.whatsapp.handshake import verify_handshake
from whatsapp_business.adapters.whatsapp.http_client import WhatsAppApiError
from whatsapp_business.adapters.whatsapp.results import ApiFailure, ApiResult, ApiSuccess
from whatsapp_business.adapters.whatsapp.signature import compute_signature, validate_signature
from whatsapp_business.adapters.whatsapp.webhook import WebhookConfig, WebhookHandler
from whatsapp_business.adapters.whatsapp.webhook_models import InboundMessage, MessageStatus
from whatsapp_business.infra.http import HttpError

__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "HttpError",
    "InboundMessage",
    "MessageStatus",
    "WebhookConfig",
    "WebhookEvent",
    "WebhookEvents",
    "WebhookHandler",
    "WhatsAppApiError",
    "WhatsAppBusinessClient",
    "compute_signature",
    "create_whatsapp_client",
    "get_first_message",
    "get_first_status",
    "iter_events",
    "validate_signature",
    "verify_handshake",
]
