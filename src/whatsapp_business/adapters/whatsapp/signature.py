"""Validação de assinatura do webhook Meta (HMAC SHA-256)."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass

SIGNATURE_HEADER = "x-hub-signature-256"
SIGNATURE_ALGORITHM = "sha256"


@dataclass(slots=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def _secret_bytes(secret: str | bytes) -> bytes:
    return secret if isinstance(secret, bytes) else secret.encode("utf-8")


def compute_signature(raw_payload: bytes, secret: str | bytes) -> str:
    """Assina o corpo como a Meta faz: ``sha256=<hex minúsculo>``."""
    digest = hmac.new(_secret_bytes(secret), raw_payload, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_ALGORITHM}={digest}"


def validate_signature(
    raw_payload: bytes,
    signature_header: str | None,
    secret: str | bytes | None,
) -> bool:
    """Confere o header ``X-Hub-Signature-256`` contra o corpo bruto.

    Nunca lança: qualquer entrada inválida resulta em False. O corpo precisa
    ser exatamente os bytes recebidos (re-serializar o JSON invalida o HMAC).
    """
    if not signature_header or not isinstance(signature_header, str):
        return False
    if not secret:
        return False
    if not isinstance(raw_payload, (bytes, bytearray, memoryview)):
        return False

    parts = signature_header.split("=")
    if len(parts) != 2:
        return False

    algorithm, supplied = parts
    if algorithm.lower() != SIGNATURE_ALGORITHM:
        return False

    expected = hmac.new(_secret_bytes(secret), bytes(raw_payload), hashlib.sha256).hexdigest()
    if len(supplied) != len(expected):
        return False

    # compare_digest com str não-ASCII lança TypeError; bytes nunca lança
    return hmac.compare_digest(
        expected.encode("ascii"),
        supplied.encode("utf-8", errors="replace"),
    )


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida a assinatura do webhook a partir dos headers HTTP.

    Fail-closed: sem secret configurado a entrega é rejeitada.
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    signature = headers.get(SIGNATURE_HEADER)
    if signature is None:
        # Mapping comum (dict) não é case-insensitive como os headers do starlette
        signature = next(
            (v for k, v in headers.items() if k.lower() == SIGNATURE_HEADER),
            None,
        )
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    algorithm, sep, _ = signature.partition("=")
    if not sep or algorithm.lower() != SIGNATURE_ALGORITHM:
        return SignatureResult(valid=False, error="invalid_signature_format")

    if not validate_signature(raw_body, signature, secret):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
