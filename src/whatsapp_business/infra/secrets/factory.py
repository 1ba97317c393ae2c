from __future__ import annotations

import logging
from collections.abc import Mapping

from whatsapp_business.observability.logging import get_logger

from .env_provider import EnvSecretProvider
from .gcp_provider import SecretManagerProvider
from .protocol import SecretProvider

logger: logging.Logger = get_logger(__name__)


def create_secret_provider(backend: str = "env", project_id: str | None = None) -> SecretProvider:
    """Factory para o provider de secrets (env | secret_manager)."""
    if backend == "env":
        return EnvSecretProvider()

    if backend == "secret_manager":
        logger.info("Usando SecretManagerProvider", extra={"project_id": project_id})
        return SecretManagerProvider(project_id=project_id)

    raise ValueError(f"Backend de secrets não reconhecido: {backend}")


def load_whatsapp_secrets(
    provider: SecretProvider,
    mappings: Mapping[str, str],
) -> dict[str, str]:
    """Carrega os secrets existentes e devolve ``{atributo: valor}``.

    Secrets ausentes são apenas registrados; a validação de obrigatoriedade
    fica com Settings. Erros de acesso propagam (fail-closed).
    """
    loaded: dict[str, str] = {}
    for secret_name, attr_name in mappings.items():
        if not provider.secret_exists(secret_name):
            logger.warning("Secret não encontrado", extra={"secret_name": secret_name})
            continue
        loaded[attr_name] = provider.get_secret(secret_name)
    return loaded
