"""MediaApi: upload multipart, URL, download e upload resumable."""

from __future__ import annotations

import pytest

from tests.helpers.graph import GRAPH
from whatsapp_business.adapters.whatsapp.media_uploader import MediaApi, MediaFile
from whatsapp_business.adapters.whatsapp.results import ApiFailure
from whatsapp_business.domain.enums import MediaType
from whatsapp_business.infra.http import HttpError

PHONE_ID = "106540352242922"


@pytest.fixture()
def media(http) -> MediaApi:
    return MediaApi(http, PHONE_ID, app_id="998877")


class TestMediaFile:
    def test_bytes_source_uses_default_mime(self):
        media = MediaFile.load(b"abc", MediaType.AUDIO)

        assert media.filename == "upload.audio"
        assert media.mime_type == "audio/ogg"

    def test_mime_guessed_from_filename(self):
        media = MediaFile.load(b"%PDF", MediaType.DOCUMENT, filename="boleto.pdf")

        assert media.mime_type == "application/pdf"

    def test_path_source(self, tmp_path):
        path = tmp_path / "foto.png"
        path.write_bytes(b"\x89PNG")

        media = MediaFile.load(path, MediaType.IMAGE)

        assert media.content == b"\x89PNG"
        assert media.filename == "foto.png"
        assert media.mime_type == "image/png"


class TestMediaApi:
    @pytest.mark.asyncio
    async def test_upload_is_multipart(self, media, graph):
        graph.respond(200, json={"id": "media-123"})

        result = await media.upload(b"\xff\xd8jpeg", "image", filename="a.jpg")

        assert result.unwrap().id == "media-123"
        request = graph.last
        assert str(request.url) == f"{GRAPH}/{PHONE_ID}/media"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="messaging_product"' in request.content
        assert b"image/jpeg" in request.content
        assert b"\xff\xd8jpeg" in request.content

    @pytest.mark.asyncio
    async def test_get_url_uses_media_id_node(self, media, graph):
        graph.respond(200, json={"url": "https://lookaside.test/m?id=1", "mime_type": "image/jpeg"})

        result = await media.get_url("media-123")

        assert result.unwrap() == "https://lookaside.test/m?id=1"
        assert str(graph.last.url) == f"{GRAPH}/media-123"

    @pytest.mark.asyncio
    async def test_get_url_without_url_key_is_failure(self, media, graph):
        graph.respond(200, json={"id": "media-123"})

        result = await media.get_url("media-123")

        assert isinstance(result, ApiFailure)
        assert result.body == {"id": "media-123"}
        with pytest.raises(HttpError):
            result.unwrap()

    @pytest.mark.asyncio
    async def test_download(self, media, graph):
        graph.respond(200, content=b"binary")

        result = await media.download("https://lookaside.test/m?id=1")

        assert result.unwrap() == b"binary"
        assert graph.last.headers["Authorization"] == "Bearer test-access-token"

    @pytest.mark.asyncio
    async def test_download_failure(self, media, graph):
        graph.respond(404, json={"error": {"message": "gone", "type": "GraphMethodException", "code": 100}})

        result = await media.download("https://lookaside.test/m?id=1")

        assert not result.ok
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_upload_for_template_two_steps(self, media, graph):
        graph.respond(200, json={"id": "upload:SESSION"})
        graph.respond(200, json={"h": "4::aW1hZ2U="})

        result = await media.upload_for_template(b"\x89PNG", "image", filename="h.png")

        assert result.unwrap() == "4::aW1hZ2U="
        session, upload = graph.requests
        assert session.url.path == "/v24.0/998877/uploads"
        assert session.url.params["file_name"] == "h.png"
        assert session.url.params["file_length"] == "4"
        assert session.url.params["file_type"] == "image/png"
        assert "Authorization" not in session.headers
        assert upload.url.path == "/v24.0/upload:SESSION"
        assert upload.headers["Authorization"] == "OAuth test-access-token"
        assert upload.headers["file_offset"] == "0"
        assert upload.content == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_upload_for_template_stops_on_session_failure(self, media, graph):
        graph.respond(400, json={"error": {"message": "bad app", "type": "OAuthException", "code": 100}})

        result = await media.upload_for_template(b"x", "image")

        assert not result.ok
        assert len(graph.requests) == 1

    @pytest.mark.asyncio
    async def test_upload_for_template_session_without_id_is_failure(self, media, graph):
        graph.respond(200, json={"success": True})

        result = await media.upload_for_template(b"x", "image")

        assert isinstance(result, ApiFailure)
        assert result.body == {"success": True}
        assert len(graph.requests) == 1

    @pytest.mark.asyncio
    async def test_upload_for_template_without_handle_is_failure(self, media, graph):
        graph.respond(200, json={"id": "upload:SESSION"})
        graph.respond(200, json={"file_offset": 0})

        result = await media.upload_for_template(b"x", "image")

        assert isinstance(result, ApiFailure)
        assert result.body == {"file_offset": 0}

    @pytest.mark.asyncio
    async def test_upload_for_template_requires_app_id(self, http):
        with pytest.raises(ValueError, match="app_id"):
            await MediaApi(http, PHONE_ID).upload_for_template(b"x", "image")
