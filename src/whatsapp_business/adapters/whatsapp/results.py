"""Resultado explícito das chamadas outbound.

Cada método de recurso devolve ``ApiSuccess`` ou ``ApiFailure`` em vez de
lançar exceção; quem preferir exceções usa ``unwrap()``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from whatsapp_business.infra.http import HttpError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    """Chamada concluída; ``data`` é a resposta (já convertida)."""

    data: T
    ok: Literal[True] = True

    def unwrap(self) -> T:
        return self.data

    def map(self, fn: Callable[[T], U]) -> ApiSuccess[U]:
        return ApiSuccess(fn(self.data))


@dataclass(frozen=True)
class ApiFailure:
    """Chamada falhou; ``error`` carrega o corpo de erro do provedor intacto."""

    error: HttpError
    ok: Literal[False] = False

    @property
    def body(self) -> Any:
        return self.error.body

    @property
    def status_code(self) -> int | None:
        return self.error.status_code

    def unwrap(self) -> Any:
        raise self.error

    def map(self, fn: Callable[[Any], Any]) -> ApiFailure:
        return self


ApiResult = ApiSuccess[T] | ApiFailure
