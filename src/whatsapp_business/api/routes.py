"""Rotas HTTP: healthcheck e webhook do WhatsApp (handshake GET + entregas POST)."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from whatsapp_business.adapters.whatsapp.webhook import WebhookHandler
from whatsapp_business.adapters.whatsapp.webhook_models import WebhookProcessingSummary
from whatsapp_business.api.dependencies import get_event_sink, get_settings, get_webhook_handler
from whatsapp_business.api.event_sink import WebhookEventSink
from whatsapp_business.config.settings import Settings
from whatsapp_business.domain.enums import EventKind
from whatsapp_business.observability.logging import get_logger
from whatsapp_business.observability.middleware import get_correlation_id

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Healthcheck simples."""
    return {"status": "ok", "service": settings.service_name, "version": settings.version}


@router.get("/webhooks/whatsapp")
def whatsapp_verify(
    request: Request,
    handler: WebhookHandler = Depends(get_webhook_handler),
) -> Response:
    """Handshake de assinatura exigido pela Meta; devolve o challenge em text/plain."""
    if not handler.config.verify_token:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="missing_verify_token",
        )

    challenge = handler.verify_handshake(request.query_params)
    if challenge is None:
        logger.warning("webhook_verification_failed")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="verification_failed",
        )

    return Response(content=challenge, media_type="text/plain")


@router.post("/webhooks/whatsapp")
async def whatsapp_webhook(
    request: Request,
    handler: WebhookHandler = Depends(get_webhook_handler),
    event_sink: WebhookEventSink = Depends(get_event_sink),
) -> WebhookProcessingSummary:
    """Autentica a entrega pelo corpo bruto e repassa cada evento ao sink."""
    if not handler.config.app_secret:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="missing_webhook_secret",
        )

    raw_body = await request.body()
    signature_result = handler.verify_signature_headers(raw_body, request.headers)
    if not signature_result.valid:
        logger.warning("webhook_signature_rejected", extra={"reason": signature_result.error})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except ValueError as exc:
        # JSONDecodeError ou UnicodeDecodeError (corpo assinado mas não UTF-8)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid_json") from exc

    summary = WebhookProcessingSummary(
        signature_validated=True,
        correlation_id=get_correlation_id() or None,
    )
    for event in handler.iter_events(payload):
        summary.total_received += 1
        if event.kind is EventKind.MESSAGE:
            summary.total_messages += 1
        else:
            summary.total_statuses += 1
        try:
            await event_sink.handle(event)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "webhook_event_sink_failed",
                extra={"kind": event.kind.value, "error": type(exc).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="event_sink_failed",
            ) from exc

    logger.info(
        "webhook_processed",
        extra={
            "total_received": summary.total_received,
            "total_messages": summary.total_messages,
            "total_statuses": summary.total_statuses,
        },
    )
    return summary
