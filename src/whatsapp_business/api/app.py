"""Fábrica da aplicação FastAPI."""

from __future__ import annotations

from fastapi import FastAPI

from whatsapp_business.adapters.whatsapp.webhook import WebhookConfig, WebhookHandler
from whatsapp_business.api.event_sink import LoggingEventSink, WebhookEventSink
from whatsapp_business.api.routes import router
from whatsapp_business.config.settings import Settings, get_settings
from whatsapp_business.observability.logging import configure_logging, get_logger
from whatsapp_business.observability.middleware import CorrelationIdMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    event_sink: WebhookEventSink | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI.

    Secret ou verify token ausentes não impedem o boot: a rota afetada
    responde 500 com o código do item faltante.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name, settings.log_format)

    missing = settings.validate_webhook_config()
    if missing:
        logger.warning("webhook_config_incomplete", extra={"errors": missing})

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(router)

    app.state.settings = settings
    app.state.webhook_handler = WebhookHandler(
        WebhookConfig(
            app_secret=settings.whatsapp_webhook_secret or "",
            verify_token=settings.whatsapp_verify_token or "",
        )
    )
    app.state.event_sink = event_sink or LoggingEventSink()

    return app


app = create_app()
