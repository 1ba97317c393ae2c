"""Camada de infraestrutura: transporte HTTP e leitura de secrets.

- HTTP: HttpClient, HttpClientConfig, HttpError
- Secrets: EnvSecretProvider, SecretManagerProvider, create_secret_provider

Infraestrutura não conhece payloads Meta nem regras de webhook.
"""

from whatsapp_business.infra.http import HttpClient, HttpClientConfig, HttpError
from whatsapp_business.infra.secrets import (
    EnvSecretProvider,
    SecretManagerProvider,
    SecretProvider,
    create_secret_provider,
    load_whatsapp_secrets,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SecretProvider",
    "EnvSecretProvider",
    "SecretManagerProvider",
    "create_secret_provider",
    "load_whatsapp_secrets",
]
