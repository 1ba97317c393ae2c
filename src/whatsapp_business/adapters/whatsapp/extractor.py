"""Extração de eventos do envelope de notificação do webhook.

``get_first_message``/``get_first_status`` olham apenas
``entry[0].changes[0].value.messages[0]`` (ou ``statuses[0]``); entregas
com vários registros perdem os demais. ``iter_events`` percorre tudo.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from whatsapp_business.adapters.whatsapp.webhook_models import InboundMessage, MessageStatus
from whatsapp_business.domain.enums import EventKind
_RECORD_MODELS: dict[EventKind, type[InboundMessage] | type[MessageStatus]] = {
    EventKind.MESSAGE: InboundMessage,
    EventKind.STATUS: MessageStatus,
}
_RECORD_KEYS = {EventKind.MESSAGE: "messages", EventKind.STATUS: "statuses"}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _parse_record(kind: EventKind, raw: Any) -> InboundMessage | MessageStatus | None:
    # Só o tipo errado conta como ausência; um dict presente sempre vira registro
    if not isinstance(raw, dict):
        return None
    return _RECORD_MODELS[kind].from_raw(raw)


def _first_value(envelope: Any) -> dict[str, Any]:
    entries = _as_list(_as_dict(envelope).get("entry"))
    if not entries:
        return {}
    changes = _as_list(_as_dict(entries[0]).get("changes"))
    if not changes:
        return {}
    return _as_dict(_as_dict(changes[0]).get("value"))


def _first_record(envelope: Any, kind: EventKind) -> Any:
    records = _as_list(_first_value(envelope).get(_RECORD_KEYS[kind]))
    if not records:
        return None
    return _parse_record(kind, records[0])


def get_first_message(envelope: Any) -> InboundMessage | None:
    """Primeira mensagem da primeira change da primeira entry, ou None."""
    return _first_record(envelope, EventKind.MESSAGE)


def get_first_status(envelope: Any) -> MessageStatus | None:
    """Primeiro status da primeira change da primeira entry, ou None."""
    return _first_record(envelope, EventKind.STATUS)


@dataclass(frozen=True, slots=True)
class WebhookEvent:
    """Um registro do envelope com a origem (entry/change) preservada."""

    kind: EventKind
    record: InboundMessage | MessageStatus
    entry_id: str | None
    field: str | None
    phone_number_id: str | None


class WebhookEvents:
    """Sequência preguiçosa, finita e reiniciável de eventos do envelope.

    Cada ``iter()`` recomeça do início; nós que não são dict/list são ignorados.
    """

    def __init__(self, envelope: Any) -> None:
        self._envelope = envelope

    def __iter__(self) -> Iterator[WebhookEvent]:
        return self._walk(None)

    def messages(self) -> Iterator[InboundMessage]:
        for event in self._walk(EventKind.MESSAGE):
            yield event.record  # type: ignore[misc]

    def statuses(self) -> Iterator[MessageStatus]:
        for event in self._walk(EventKind.STATUS):
            yield event.record  # type: ignore[misc]

    def _walk(self, only: EventKind | None) -> Iterator[WebhookEvent]:
        kinds = [only] if only else [EventKind.MESSAGE, EventKind.STATUS]
        for entry in _as_list(_as_dict(self._envelope).get("entry")):
            entry = _as_dict(entry)
            for change in _as_list(entry.get("changes")):
                change = _as_dict(change)
                value = _as_dict(change.get("value"))
                phone_number_id = _as_dict(value.get("metadata")).get("phone_number_id")
                for kind in kinds:
                    for raw in _as_list(value.get(_RECORD_KEYS[kind])):
                        record = _parse_record(kind, raw)
                        if record is None:
                            continue
                        yield WebhookEvent(
                            kind=kind,
                            record=record,
                            entry_id=entry.get("id"),
                            field=change.get("field"),
                            phone_number_id=phone_number_id,
                        )


def iter_events(envelope: Any) -> WebhookEvents:
    """Todos os eventos (mensagens e depois status, por change) do envelope."""
    return WebhookEvents(envelope)
