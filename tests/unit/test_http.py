"""HttpClient genérico sobre httpx."""

from __future__ import annotations

import httpx
import pytest

from whatsapp_business.infra.http import HttpClient, HttpClientConfig, HttpError, _sanitize_url


def test_sanitize_url_masks_credentials():
    url = (
        "https://graph.facebook.com/v24.0/oauth/access_token"
        "?client_id=1&client_secret=abc&fb_exchange_token=xyz&access_token=t0k"
    )

    safe = _sanitize_url(url)

    assert "abc" not in safe
    assert "xyz" not in safe
    assert "t0k" not in safe
    assert "client_id=1" in safe


class TestHttpClient:
    @pytest.mark.asyncio
    async def test_success_returns_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["User-Agent"] == "tests/1.0"
            return httpx.Response(200, json={"ok": True})

        config = HttpClientConfig(default_headers={"User-Agent": "tests/1.0"})
        async with HttpClient(config, transport=httpx.MockTransport(handler)) as client:
            response = await client.get("https://example.test/ping")

        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_error_status_keeps_json_body(self):
        body = {"error": {"message": "bad", "code": 100}}
        transport = httpx.MockTransport(lambda request: httpx.Response(400, json=body))

        async with HttpClient(transport=transport) as client:
            with pytest.raises(HttpError) as exc_info:
                await client.post("https://example.test/x", json={})

        assert exc_info.value.status_code == 400
        assert exc_info.value.body == body

    @pytest.mark.asyncio
    async def test_error_status_keeps_text_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="gateway"))

        async with HttpClient(transport=transport) as client:
            with pytest.raises(HttpError) as exc_info:
                await client.delete("https://example.test/x")

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "gateway"

    @pytest.mark.asyncio
    async def test_single_request_per_call(self):
        """Sem retry: uma falha 503 resulta em exatamente uma requisição."""
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, json={})

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(HttpError):
                await client.get("https://example.test/x")

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_timeout_becomes_http_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(HttpError, match="Timeout") as exc_info:
                await client.get("https://example.test/x")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_connection_error_becomes_http_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(HttpError, match="conexão"):
                await client.get("https://example.test/x")

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        client = HttpClient(transport=httpx.MockTransport(lambda r: httpx.Response(204)))
        await client.get("https://example.test/x")

        await client.close()
        await client.close()
