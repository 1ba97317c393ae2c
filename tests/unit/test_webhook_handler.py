"""WebhookConfig e WebhookHandler."""

from __future__ import annotations

import pytest

from tests.helpers.fixtures import load_fixture
from whatsapp_business.adapters.whatsapp.signature import compute_signature
from whatsapp_business.adapters.whatsapp.webhook import WebhookConfig, WebhookHandler
from whatsapp_business.config.settings import Settings


class TestWebhookConfig:
    def test_repr_hides_credentials(self):
        config = WebhookConfig(app_secret="super-secret", verify_token="tok-123")

        text = repr(config)

        assert "super-secret" not in text
        assert "tok-123" not in text

    def test_from_settings(self, settings: Settings):
        config = WebhookConfig.from_settings(settings)

        assert config.app_secret == settings.whatsapp_webhook_secret
        assert config.verify_token == settings.whatsapp_verify_token

    def test_from_settings_without_secret_raises(self, settings: Settings):
        incomplete = settings.model_copy(update={"whatsapp_webhook_secret": None})

        with pytest.raises(ValueError, match="WHATSAPP_WEBHOOK_SECRET"):
            WebhookConfig.from_settings(incomplete)


class TestWebhookHandler:
    """Dois handlers com configs diferentes não interferem entre si."""

    def test_each_handler_uses_its_own_secret(self):
        body = b'{"entry":[]}'
        tenant_a = WebhookHandler(WebhookConfig(app_secret="a", verify_token="ta"))
        tenant_b = WebhookHandler(WebhookConfig(app_secret="b", verify_token="tb"))
        header = compute_signature(body, "a")

        assert tenant_a.validate_signature(body, header) is True
        assert tenant_b.validate_signature(body, header) is False

    def test_each_handler_uses_its_own_verify_token(self):
        handler = WebhookHandler(WebhookConfig(app_secret="a", verify_token="ta"))
        query = {"hub.mode": "subscribe", "hub.verify_token": "ta", "hub.challenge": "42"}

        assert handler.verify_handshake(query) == "42"
        assert handler.verify_handshake({**query, "hub.verify_token": "tb"}) is None

    def test_verify_signature_headers(self):
        body = b"{}"
        handler = WebhookHandler(WebhookConfig(app_secret="a", verify_token="t"))

        result = handler.verify_signature_headers(
            body, {"x-hub-signature-256": compute_signature(body, "a")}
        )

        assert result.valid

    def test_extraction_helpers(self):
        envelope = load_fixture("batch.multi_entry.json")

        assert WebhookHandler.get_first_message(envelope).id == "wamid.m1"
        assert WebhookHandler.get_first_status(envelope).id == "wamid.s1"
        assert len(list(WebhookHandler.iter_events(envelope))) == 4
