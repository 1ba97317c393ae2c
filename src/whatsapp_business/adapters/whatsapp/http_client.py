"""Cliente HTTP especializado para a Graph API (Meta/WhatsApp).

Estende o HttpClient genérico com comportamentos específicos:
- Montagem de URL versionada ({base_url}/{api_version}/{path})
- Autenticação Bearer por requisição
- Corpos JSON, multipart e binários
- Tratamento de erros Meta (error.type, error.code, error.message)
- Logging estruturado sem tokens, números ou conteúdo de mensagens
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from whatsapp_business.infra.http import HttpClient, HttpClientConfig, HttpError
from whatsapp_business.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_business.config.settings import Settings

logger: logging.Logger = get_logger(__name__)

# Erros permanentes: 400, 401, 403, 404, 413. Transitórios: 429 e 5xx
_PERMANENT_CODES = {400, 401, 403, 404, 413}
_PERMANENT_ERROR_TYPES = {"OAuthException", "InvalidRequest"}


class WhatsAppApiError(HttpError):
    """Erro retornado pela API Meta/WhatsApp.

    ``body`` mantém o corpo de erro exatamente como o provedor enviou.
    """

    def __init__(
        self,
        error_type: str,
        error_code: int,
        error_message: str,
        status_code: int | None = None,
        fbtrace_id: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(error_message, status_code=status_code, body=body)
        self.error_type = error_type
        self.error_code = error_code
        self.error_message = error_message
        self.fbtrace_id = fbtrace_id

    @property
    def is_permanent(self) -> bool:
        """Classifica erro como permanente (não adianta reenviar igual)."""
        if self.error_type in _PERMANENT_ERROR_TYPES:
            return True
        return bool({self.error_code, self.status_code} & _PERMANENT_CODES)


def _parse_meta_error(
    response_data: Any,
    status_code: int | None = None,
) -> WhatsAppApiError | None:
    """Extrai o objeto ``error`` do response da Meta.

    Returns:
        WhatsAppApiError se houver erro, None caso contrário
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    return WhatsAppApiError(
        error_type=error_obj.get("type", "unknown"),
        error_code=error_obj.get("code", 0),
        error_message=error_obj.get("message", "Erro desconhecido"),
        status_code=status_code,
        fbtrace_id=error_obj.get("fbtrace_id"),
        body=response_data,
    )


def _log_meta_error(meta_error: WhatsAppApiError, method: str, path: str) -> None:
    logger.warning(
        "Erro da API Meta/WhatsApp",
        extra={
            "method": method,
            "path": path,
            "status_code": meta_error.status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "fbtrace_id": meta_error.fbtrace_id,
        },
    )


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP para a Graph API.

    Uma instância por conjunto de credenciais; o token nunca aparece em logs.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://graph.facebook.com",
        api_version: str = "v24.0",
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version

    @property
    def access_token(self) -> str:
        return self._access_token

    def graph_url(self, path: str) -> str:
        """URL completa: {base_url}/{api_version}/{path}."""
        return f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"

    def _auth_headers(self, headers: dict[str, str] | None, authenticated: bool) -> dict[str, str]:
        merged = dict(headers or {})
        if authenticated and "Authorization" not in merged:
            merged["Authorization"] = f"Bearer {self._access_token}"
        return merged

    async def call(
        self,
        method: str,
        path: str,
        *,
        authenticated: bool = True,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Executa uma chamada à Graph API e devolve o JSON de resposta.

        Args:
            method: Método HTTP
            path: Caminho relativo à versão (ex.: "123/messages")
            authenticated: Envia Authorization Bearer (False para token exchange/debug)
            headers: Headers adicionais (têm precedência sobre o Bearer)
            **kwargs: json, params, data, files ou content, repassados ao httpx

        Raises:
            WhatsAppApiError: Meta respondeu com objeto ``error``
            HttpError: falha de transporte ou erro sem formato Meta
        """
        try:
            response = await self.request(
                method,
                self.graph_url(path),
                headers=self._auth_headers(headers, authenticated),
                **kwargs,
            )
        except HttpError as exc:
            meta_error = _parse_meta_error(exc.body, exc.status_code)
            if meta_error is None:
                raise
            _log_meta_error(meta_error, method, path)
            raise meta_error from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Response JSON inválido", extra={"method": method, "path": path})
            raise HttpError(
                "Response JSON inválido",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        # Meta ocasionalmente devolve 200 com objeto error
        meta_error = _parse_meta_error(data, response.status_code)
        if meta_error is not None:
            _log_meta_error(meta_error, method, path)
            raise meta_error
        return data

    async def download(self, url: str) -> bytes:
        """Baixa um binário de URL absoluta (ex.: lookaside de mídia) com Bearer."""
        try:
            response = await self.get(url, headers=self._auth_headers(None, True))
        except HttpError as exc:
            meta_error = _parse_meta_error(exc.body, exc.status_code)
            if meta_error is None:
                raise
            _log_meta_error(meta_error, "GET", "media_download")
            raise meta_error from exc
        return response.content


def create_whatsapp_http_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp configurado a partir de Settings."""
    if not settings.whatsapp_access_token:
        raise ValueError("WHATSAPP_ACCESS_TOKEN não configurado")

    config = HttpClientConfig(
        timeout_seconds=float(settings.whatsapp_request_timeout_seconds),
        default_headers={
            "User-Agent": f"{settings.service_name}/{settings.version}",
        },
    )

    logger.info(
        "Cliente WhatsApp HTTP criado",
        extra={"timeout": config.timeout_seconds, "api_version": settings.whatsapp_api_version},
    )

    return WhatsAppHttpClient(
        access_token=settings.whatsapp_access_token,
        base_url=settings.whatsapp_api_base_url,
        api_version=settings.whatsapp_api_version,
        config=config,
        transport=transport,
    )
