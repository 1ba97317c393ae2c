from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from whatsapp_business.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class EnvSecretProvider:
    """Lê credenciais de variáveis de ambiente (desenvolvimento e CI).

    Aceita um mapping alternativo ao ``os.environ`` para testes isolados.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get_secret(self, name: str, version: str = "latest") -> str:
        """Lê secret do ambiente; ``version`` é ignorado."""
        value = self._environ.get(name)
        if not value:
            logger.warning(
                "Secret ausente no ambiente",
                extra={"secret_name": name, "provider": "env"},
            )
            raise RuntimeError(f"Secret {name} não encontrado no ambiente")
        return value

    def secret_exists(self, name: str) -> bool:
        return bool(self._environ.get(name))
