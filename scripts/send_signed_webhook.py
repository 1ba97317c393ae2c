#!/usr/bin/env python
"""Envia um payload de webhook assinado para uma instância local.

Simula a Meta: assina o corpo com o app secret (X-Hub-Signature-256)
e faz o POST em /webhooks/whatsapp.

Uso:
    WHATSAPP_WEBHOOK_SECRET=... python scripts/send_signed_webhook.py \
        tests/fixtures/whatsapp/webhook/text.single.json [http://localhost:8080]
"""

import os
import sys
from pathlib import Path

import httpx

from whatsapp_business.adapters.whatsapp.signature import SIGNATURE_HEADER, compute_signature

DEFAULT_URL = "http://localhost:8080"


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    secret = os.getenv("WHATSAPP_WEBHOOK_SECRET")
    if not secret:
        print("WHATSAPP_WEBHOOK_SECRET não configurado")
        return 2

    body = Path(sys.argv[1]).read_bytes()
    base_url = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_URL

    response = httpx.post(
        f"{base_url.rstrip('/')}/webhooks/whatsapp",
        content=body,
        headers={
            "Content-Type": "application/json",
            SIGNATURE_HEADER: compute_signature(body, secret),
        },
        timeout=10.0,
    )
    print(f"HTTP {response.status_code}")
    print(response.text)
    return 0 if response.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
