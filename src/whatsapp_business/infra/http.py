"""Cliente HTTP centralizado com timeout e logging.

Este módulo fornece um cliente HTTP configurável para chamadas
externas (Graph API da Meta), com:
- Timeouts configuráveis
- Logging estruturado (sem PII)
- Injeção de headers padrão
- Transporte injetável (httpx.MockTransport em testes)

Não há retry, backoff nem circuit breaker: cada chamada executa
exatamente uma requisição e devolve ao chamador o erro do provedor.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx

from whatsapp_business.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

# Regex pré-compilado para sanitização de URL
_SECRET_PARAM_PATTERN = re.compile(
    r"(access_token|input_token|client_secret|fb_exchange_token)=[^&]+"
)


def _sanitize_url(url: str) -> str:
    """Remove tokens e credenciais da URL para logging seguro."""
    return _SECRET_PARAM_PATTERN.sub(r"\1=***", url)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP.

    ``body`` guarda o corpo de erro do provedor já decodificado (dict quando
    JSON, texto caso contrário) para que o chamador o inspecione sem perdas.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpClient:
    """Cliente HTTP assíncrono com logging.

    Uso típico:
        async with HttpClient(config) as client:
            response = await client.post(url, json=payload)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def _get_client(self) -> httpx.AsyncClient:
        """Retorna cliente httpx (lazy loading)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_seconds),
                headers=self._config.default_headers,
                verify=self._config.verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Fecha o cliente e libera recursos."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Executa uma única requisição.

        Raises:
            HttpError: status fora de 2xx (com ``body`` do provedor),
                timeout ou falha de conexão (sem ``status_code``)
        """
        client = await self._get_client()
        safe_url = _sanitize_url(url)
        logger.debug("Executando requisição HTTP", extra={"method": method, "url": safe_url})

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("Timeout em requisição HTTP", extra={"method": method, "url": safe_url})
            raise HttpError("Timeout") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "Erro de conexão HTTP",
                extra={"method": method, "url": safe_url, "error_type": type(exc).__name__},
            )
            raise HttpError("Erro de conexão") from exc

        if not response.is_success:
            logger.warning(
                "Requisição HTTP falhou",
                extra={"method": method, "url": safe_url, "status_code": response.status_code},
            )
            raise HttpError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                body=_decode_body(response),
            )

        logger.debug(
            "Requisição HTTP bem-sucedida",
            extra={"method": method, "url": safe_url, "status_code": response.status_code},
        )
        return response

    # Métodos de conveniência

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)
