"""Settings: defaults, validações e leitura do ambiente."""

from __future__ import annotations

import pytest

from whatsapp_business.config.settings import GRAPH_API_VERSION, Settings, get_settings


class TestSettingsDefaults:
    def test_graph_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.whatsapp_api_version == GRAPH_API_VERSION
        assert settings.whatsapp_api_endpoint == "https://graph.facebook.com/v24.0"
        assert settings.whatsapp_request_timeout_seconds == 30.0

    def test_messages_endpoint(self, settings: Settings):
        assert settings.get_messages_endpoint() == (
            "https://graph.facebook.com/v24.0/106540352242922/messages"
        )
        assert settings.get_messages_endpoint("42").endswith("/42/messages")

    def test_messages_endpoint_requires_phone_number_id(self):
        with pytest.raises(ValueError):
            Settings(whatsapp_phone_number_id=None).get_messages_endpoint()

    @pytest.mark.parametrize(
        ("environment", "prod", "staging", "dev"),
        [
            ("production", True, False, False),
            ("stage", False, True, False),
            ("local", False, False, True),
        ],
    )
    def test_environment_flags(self, environment, prod, staging, dev):
        settings = Settings(environment=environment)

        assert settings.is_production is prod
        assert settings.is_staging is staging
        assert settings.is_development is dev


class TestSettingsValidation:
    def test_complete_config_has_no_errors(self, settings: Settings):
        assert settings.validate_whatsapp_config() == []
        assert settings.validate_webhook_config() == []

    def test_missing_outbound_credentials(self):
        errors = Settings(
            whatsapp_access_token=None,
            whatsapp_phone_number_id=None,
            whatsapp_request_timeout_seconds=0,
        ).validate_whatsapp_config()

        assert len(errors) == 3
        assert any("WHATSAPP_ACCESS_TOKEN" in e for e in errors)
        assert any("WHATSAPP_PHONE_NUMBER_ID" in e for e in errors)

    def test_missing_webhook_credentials(self):
        errors = Settings(
            whatsapp_webhook_secret=None, whatsapp_verify_token=None
        ).validate_webhook_config()

        assert errors == [
            "WHATSAPP_WEBHOOK_SECRET não configurado",
            "WHATSAPP_VERIFY_TOKEN não configurado",
        ]


class TestSettingsFromEnvironment:
    def test_reads_env_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WHATSAPP_VERIFY_TOKEN", "from-env")
        monkeypatch.setenv("WHATSAPP_API_VERSION", "v23.0")
        get_settings.cache_clear()

        try:
            settings = get_settings()
            assert settings.whatsapp_verify_token == "from-env"
            assert settings.whatsapp_api_version == "v23.0"
        finally:
            get_settings.cache_clear()

    def test_production_in_tests_skips_secret_manager(self):
        """PYTEST_CURRENT_TEST impede chamada real ao Secret Manager."""
        settings = Settings(environment="production")

        assert settings.is_production
