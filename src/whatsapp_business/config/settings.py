"""Configurações do SDK e do front end de webhook via variáveis de ambiente.

Todas as credenciais vêm de env vars (development) ou do Secret Manager
(staging/production). Nunca hardcode tokens, app secret ou verify token.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from whatsapp_business.infra.secrets import create_secret_provider, load_whatsapp_secrets
from whatsapp_business.observability.logging import get_logger

# -----------------------------------------------------------------------------
# Constantes da Graph API Meta/WhatsApp
# Referência: https://developers.facebook.com/docs/graph-api/changelog
# -----------------------------------------------------------------------------
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

# Nome no Secret Manager → atributo em Settings
SECRET_MAPPINGS: dict[str, str] = {
    "WHATSAPP_ACCESS_TOKEN": "whatsapp_access_token",
    "WHATSAPP_WEBHOOK_SECRET": "whatsapp_webhook_secret",
    "WHATSAPP_VERIFY_TOKEN": "whatsapp_verify_token",
}


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Aplicação
    service_name: str = "whatsapp_business"
    version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Credenciais e identificadores Meta
    whatsapp_access_token: str | None = None  # Bearer token (Secret Manager em prod)
    whatsapp_phone_number_id: str | None = None  # Número remetente
    whatsapp_business_account_id: str | None = None  # WABA
    whatsapp_app_id: str | None = None  # App Meta (upload resumable)
    whatsapp_api_version: str = GRAPH_API_VERSION
    whatsapp_api_base_url: str = GRAPH_API_BASE_URL
    whatsapp_request_timeout_seconds: float = 30.0

    # Webhook inbound
    whatsapp_webhook_secret: str | None = None  # App secret para HMAC SHA-256
    whatsapp_verify_token: str | None = None  # Token do handshake GET

    @property
    def whatsapp_api_endpoint(self) -> str:
        """URL base versionada da Graph API."""
        return f"{self.whatsapp_api_base_url.rstrip('/')}/{self.whatsapp_api_version}"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment.lower() in ("staging", "stage")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")

    def get_messages_endpoint(self, phone_number_id: str | None = None) -> str:
        """Retorna URL completa de envio de mensagens.

        Formato: https://graph.facebook.com/v24.0/{phone_number_id}/messages
        """
        pid = phone_number_id or self.whatsapp_phone_number_id
        if not pid:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.whatsapp_api_endpoint}/{pid}/messages"

    def validate_whatsapp_config(self) -> list[str]:
        """Valida o mínimo para chamadas outbound. Lista vazia = OK."""
        errors: list[str] = []
        if not self.whatsapp_phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")
        if not self.whatsapp_access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")
        if self.whatsapp_request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors

    def validate_webhook_config(self) -> list[str]:
        """Valida o mínimo para receber webhooks. Lista vazia = OK."""
        errors: list[str] = []
        if not self.whatsapp_webhook_secret:
            errors.append("WHATSAPP_WEBHOOK_SECRET não configurado")
        if not self.whatsapp_verify_token:
            errors.append("WHATSAPP_VERIFY_TOKEN não configurado")
        return errors

    def model_post_init(self, __context: Any) -> None:
        """Carrega secrets do Secret Manager em staging/production.

        Fail-closed: em staging/production qualquer falha de carregamento
        interrompe a inicialização. Valores de secrets nunca são logados.
        """
        logger: logging.Logger = get_logger(__name__)

        if not (self.is_staging or self.is_production):
            logger.debug(
                "Secrets via variáveis de ambiente",
                extra={"environment": self.environment},
            )
            return

        # Em testes com environment=staging/prod, evitamos chamada real ao Secret Manager.
        if os.getenv("PYTEST_CURRENT_TEST"):
            logger.info(
                "Pulando Secret Manager em ambiente de teste controlado",
                extra={"environment": self.environment},
            )
            return

        project_id = os.getenv("GOOGLE_CLOUD_PROJECT")
        if not project_id:
            raise RuntimeError("GOOGLE_CLOUD_PROJECT obrigatório em staging/production")

        provider = create_secret_provider(backend="secret_manager", project_id=project_id)
        loaded = load_whatsapp_secrets(provider, SECRET_MAPPINGS)
        for attr_name, value in loaded.items():
            setattr(self, attr_name, value)

        validation_errors = self.validate_whatsapp_config() + self.validate_webhook_config()
        if validation_errors:
            logger.error(
                "Configuração WhatsApp inválida após carregar secrets",
                extra={"errors": validation_errors, "environment": self.environment},
            )
            raise RuntimeError(f"Configuração WhatsApp inválida: {'; '.join(validation_errors)}")

        logger.info(
            "Secrets carregados e validados",
            extra={"environment": self.environment, "count": len(loaded)},
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings."""
    return Settings()
