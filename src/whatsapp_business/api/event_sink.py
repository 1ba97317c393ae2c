"""Destino dos eventos extraídos do webhook.

A aplicação integradora injeta seu próprio sink em ``create_app``; o padrão
apenas registra metadados de cada evento.
"""

from __future__ import annotations

from typing import Protocol

from whatsapp_business.adapters.whatsapp.extractor import WebhookEvent
from whatsapp_business.observability.logging import get_logger

logger = get_logger(__name__)


class WebhookEventSink(Protocol):
    """Contrato para consumir eventos de uma entrega autenticada."""

    async def handle(self, event: WebhookEvent) -> None:
        """Processa um evento. Exceções abortam a entrega (Meta reenviará)."""
        ...


class LoggingEventSink:
    """Sink padrão: loga kind, id e tipo; nunca telefone ou conteúdo."""

    async def handle(self, event: WebhookEvent) -> None:
        record = event.record
        logger.info(
            "webhook_event_received",
            extra={
                "kind": event.kind.value,
                "record_id": record.id,
                "record_type": getattr(record, "type", None) or getattr(record, "status", None),
                "field": event.field,
                "phone_number_id": event.phone_number_id,
            },
        )
