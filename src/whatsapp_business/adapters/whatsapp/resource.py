"""Base comum dos grupos de recursos da Graph API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.results import ApiFailure, ApiResult, ApiSuccess
from whatsapp_business.infra.http import HttpError
from whatsapp_business.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

T = TypeVar("T")


class ApiResource:
    """Executa uma chamada e embrulha o desfecho em ApiSuccess/ApiFailure."""

    def __init__(self, http: WhatsAppHttpClient) -> None:
        self._http = http

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        parse: Callable[[Any], T] | None = None,
        **kwargs: Any,
    ) -> ApiResult[T]:
        """Uma requisição; ``parse`` converte o JSON de sucesso.

        Erros HTTP/Meta viram ApiFailure. Resposta sem o formato esperado por
        ``parse`` (chave ausente, tipo errado) também vira ApiFailure, com o
        corpo recebido em ``body``.
        """
        try:
            data = await self._http.call(method, path, **kwargs)
        except HttpError as exc:
            logger.warning(
                "whatsapp_api_call_failed",
                extra={
                    "operation": operation,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
            return ApiFailure(exc)

        if parse is None:
            logger.info("whatsapp_api_call_ok", extra={"operation": operation})
            return ApiSuccess(data)

        try:
            parsed = parse(data)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "whatsapp_api_unexpected_response",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            error = HttpError("Resposta inesperada da API", body=data)
            error.__cause__ = exc
            return ApiFailure(error)

        logger.info("whatsapp_api_call_ok", extra={"operation": operation})
        return ApiSuccess(parsed)


def query_params(**params: Any) -> dict[str, Any]:
    """Parâmetros de query sem os valores None."""
    return {key: value for key, value in params.items() if value is not None}


def require_id(name: str, value: str | None) -> str:
    """Falha cedo quando um id de nó (waba, app...) não foi informado nem configurado."""
    if not value:
        raise ValueError(f"{name} é obrigatório")
    return value
