"""Handshake de assinatura do webhook (GET com hub.mode/hub.verify_token)."""

from __future__ import annotations

from collections.abc import Mapping

HUB_MODE = "hub.mode"
HUB_VERIFY_TOKEN = "hub.verify_token"
HUB_CHALLENGE = "hub.challenge"
SUBSCRIBE_MODE = "subscribe"


def verify_handshake(
    query_params: Mapping[str, str],
    expected_token: str | None,
) -> str | None:
    """Retorna o ``hub.challenge`` intacto se o handshake confere, senão None.

    Token vazio configurado nunca confere, mesmo com token vazio na query.
    """
    if not expected_token:
        return None

    mode = query_params.get(HUB_MODE)
    token = query_params.get(HUB_VERIFY_TOKEN)
    challenge = query_params.get(HUB_CHALLENGE)

    if mode == SUBSCRIBE_MODE and token == expected_token and challenge is not None:
        return challenge
    return None
