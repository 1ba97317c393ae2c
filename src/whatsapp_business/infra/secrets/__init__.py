from __future__ import annotations

from .env_provider import EnvSecretProvider
from .factory import create_secret_provider, load_whatsapp_secrets
from .gcp_provider import SecretManagerProvider
from .protocol import SecretProvider

__all__ = [
    "SecretProvider",
    "EnvSecretProvider",
    "SecretManagerProvider",
    "create_secret_provider",
    "load_whatsapp_secrets",
]
