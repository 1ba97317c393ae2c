"""Dependências injetadas nas rotas."""

from __future__ import annotations

from fastapi import Request

from whatsapp_business.adapters.whatsapp.webhook import WebhookHandler
from whatsapp_business.api.event_sink import WebhookEventSink
from whatsapp_business.config.settings import Settings


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_webhook_handler(request: Request) -> WebhookHandler:
    """Handler do webhook com a configuração deste endpoint."""

    return request.app.state.webhook_handler


def get_event_sink(request: Request) -> WebhookEventSink:
    """Retorna o sink de eventos ativo."""

    return request.app.state.event_sink
