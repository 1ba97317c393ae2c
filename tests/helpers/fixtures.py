"""Carregamento das fixtures de webhook (payloads sintéticos, sem PII real)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "whatsapp" / "webhook"

WEBHOOK_SECRET = "test-webhook-secret-for-signature"
VERIFY_TOKEN = "test-verify-token"


def load_fixture_bytes(name: str) -> bytes:
    """Bytes crus, exatamente como seriam assinados pela Meta."""
    return (FIXTURES_DIR / name).read_bytes()


def load_fixture(name: str) -> dict[str, Any]:
    return json.loads(load_fixture_bytes(name))
