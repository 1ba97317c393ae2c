from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.helpers.fixtures import VERIFY_TOKEN, WEBHOOK_SECRET
from whatsapp_business.api.app import create_app
from whatsapp_business.config.settings import Settings, get_settings


@pytest.fixture()
def settings() -> Settings:
    """Settings isolado do ambiente do host."""
    return Settings(
        environment="development",
        whatsapp_access_token="test-access-token",
        whatsapp_phone_number_id="106540352242922",
        whatsapp_business_account_id="102290129340398",
        whatsapp_app_id="998877",
        whatsapp_webhook_secret=WEBHOOK_SECRET,
        whatsapp_verify_token=VERIFY_TOKEN,
    )


@pytest.fixture()
def client(settings: Settings):
    get_settings.cache_clear()
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
