"""Providers de secrets (env e Secret Manager) e carregamento."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from whatsapp_business.config.settings import SECRET_MAPPINGS
from whatsapp_business.infra.secrets import (
    EnvSecretProvider,
    SecretManagerProvider,
    create_secret_provider,
    load_whatsapp_secrets,
)


class FakeSecretManagerClient:
    """Imita SecretManagerServiceClient com um dict em memória."""

    def __init__(self, secrets: dict[str, str]) -> None:
        self.secrets = secrets
        self.accessed: list[str] = []

    def access_secret_version(self, name: str):
        self.accessed.append(name)
        secret_name = name.split("/")[3]
        if secret_name not in self.secrets:
            raise LookupError(name)
        data = self.secrets[secret_name].encode("utf-8")
        return SimpleNamespace(payload=SimpleNamespace(data=data))

    def get_secret(self, name: str):
        if name.split("/")[-1] not in self.secrets:
            raise LookupError(name)
        return SimpleNamespace(name=name)


class TestEnvSecretProvider:
    def test_reads_from_mapping(self):
        provider = EnvSecretProvider({"WHATSAPP_ACCESS_TOKEN": "tok"})

        assert provider.get_secret("WHATSAPP_ACCESS_TOKEN") == "tok"
        assert provider.secret_exists("WHATSAPP_ACCESS_TOKEN")

    def test_missing_secret_raises(self):
        provider = EnvSecretProvider({})

        assert not provider.secret_exists("X")
        with pytest.raises(RuntimeError, match="X"):
            provider.get_secret("X")


class TestSecretManagerProvider:
    def test_reads_latest_version(self):
        client = FakeSecretManagerClient({"WHATSAPP_WEBHOOK_SECRET": "app-secret"})
        provider = SecretManagerProvider(project_id="proj", client=client)

        assert provider.get_secret("WHATSAPP_WEBHOOK_SECRET") == "app-secret"
        assert client.accessed == [
            "projects/proj/secrets/WHATSAPP_WEBHOOK_SECRET/versions/latest"
        ]

    def test_sdk_error_is_wrapped(self):
        provider = SecretManagerProvider(project_id="proj", client=FakeSecretManagerClient({}))

        with pytest.raises(RuntimeError, match="WHATSAPP_VERIFY_TOKEN"):
            provider.get_secret("WHATSAPP_VERIFY_TOKEN")

    def test_secret_exists(self):
        provider = SecretManagerProvider(
            project_id="proj", client=FakeSecretManagerClient({"A": "1"})
        )

        assert provider.secret_exists("A") is True
        assert provider.secret_exists("B") is False

    def test_project_id_is_required(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
        provider = SecretManagerProvider(client=FakeSecretManagerClient({"A": "1"}))

        with pytest.raises(RuntimeError, match="project_id"):
            provider.get_secret("A")


class TestFactory:
    def test_env_backend(self):
        assert isinstance(create_secret_provider("env"), EnvSecretProvider)

    def test_secret_manager_backend(self):
        provider = create_secret_provider("secret_manager", project_id="proj")

        assert isinstance(provider, SecretManagerProvider)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_secret_provider("vault")

    def test_load_whatsapp_secrets_skips_missing(self):
        provider = EnvSecretProvider(
            {"WHATSAPP_ACCESS_TOKEN": "tok", "WHATSAPP_VERIFY_TOKEN": "verify"}
        )

        loaded = load_whatsapp_secrets(provider, SECRET_MAPPINGS)

        assert loaded == {"whatsapp_access_token": "tok", "whatsapp_verify_token": "verify"}
