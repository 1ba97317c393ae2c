"""Handshake GET de assinatura do webhook."""

from __future__ import annotations

import pytest

from whatsapp_business.adapters.whatsapp.handshake import verify_handshake


def _query(**overrides: str | None) -> dict[str, str]:
    params = {"hub.mode": "subscribe", "hub.verify_token": "T", "hub.challenge": "C123"}
    params.update(overrides)
    return {k: v for k, v in params.items() if v is not None}


class TestVerifyHandshake:
    def test_matching_token_returns_challenge_verbatim(self):
        assert verify_handshake(_query(), "T") == "C123"

    def test_challenge_is_not_transformed(self):
        challenge = " 00042 é "
        assert verify_handshake(_query(**{"hub.challenge": challenge}), "T") == challenge

    def test_wrong_token_returns_none(self):
        assert verify_handshake(_query(**{"hub.verify_token": "WRONG"}), "T") is None

    @pytest.mark.parametrize("mode", [None, "unsubscribe", "SUBSCRIBE", ""])
    def test_mode_other_than_subscribe_returns_none(self, mode):
        assert verify_handshake(_query(**{"hub.mode": mode}), "T") is None

    def test_missing_token_returns_none(self):
        assert verify_handshake(_query(**{"hub.verify_token": None}), "T") is None

    def test_missing_challenge_returns_none(self):
        assert verify_handshake(_query(**{"hub.challenge": None}), "T") is None

    @pytest.mark.parametrize("expected", ["", None])
    def test_unconfigured_expected_token_never_matches(self, expected):
        assert verify_handshake(_query(**{"hub.verify_token": ""}), expected) is None
