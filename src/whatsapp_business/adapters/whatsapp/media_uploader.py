"""Mídia na Graph API: upload, URL, download e upload resumable para templates.

Responsabilidades:
- Upload multipart para /{phone_number_id}/media (devolve media id)
- Resolver a URL temporária de um media id e baixar o binário
- Sessão de upload resumable (/{app_id}/uploads) para header de template
"""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import UploadMediaResponse
from whatsapp_business.adapters.whatsapp.resource import ApiResource
from whatsapp_business.adapters.whatsapp.results import ApiFailure, ApiResult, ApiSuccess
from whatsapp_business.domain.enums import MediaType
from whatsapp_business.infra.http import HttpError
from whatsapp_business.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

# MIME padrão por tipo quando o nome do arquivo não permite inferir
_DEFAULT_MIME_TYPES: dict[MediaType, str] = {
    MediaType.IMAGE: "image/jpeg",
    MediaType.VIDEO: "video/mp4",
    MediaType.AUDIO: "audio/ogg",
    MediaType.DOCUMENT: "application/pdf",
    MediaType.STICKER: "image/webp",
}


@dataclass(frozen=True)
class MediaFile:
    """Conteúdo binário pronto para upload."""

    content: bytes
    filename: str
    mime_type: str

    @classmethod
    def load(
        cls,
        source: bytes | str | Path,
        media_type: MediaType,
        filename: str | None = None,
        mime_type: str | None = None,
    ) -> MediaFile:
        if isinstance(source, bytes):
            content = source
            name = filename or f"upload.{media_type.value}"
        else:
            path = Path(source)
            content = path.read_bytes()
            name = filename or path.name
        guessed, _ = mimetypes.guess_type(name)
        return cls(
            content=content,
            filename=name,
            mime_type=mime_type or guessed or _DEFAULT_MIME_TYPES[media_type],
        )


class MediaApi(ApiResource):
    """Operações de mídia de um número remetente."""

    def __init__(
        self,
        http: WhatsAppHttpClient,
        phone_number_id: str,
        app_id: str | None = None,
    ) -> None:
        super().__init__(http)
        self.phone_number_id = phone_number_id
        self.app_id = app_id

    async def upload(
        self,
        source: bytes | str | Path,
        media_type: MediaType | str,
        filename: str | None = None,
        mime_type: str | None = None,
    ) -> ApiResult[UploadMediaResponse]:
        """Upload multipart; o id devolvido vale para envios por ``MediaObject(id=...)``."""
        media = MediaFile.load(source, MediaType(media_type), filename, mime_type)
        return await self._call(
            "upload_media",
            "POST",
            f"{self.phone_number_id}/media",
            parse=UploadMediaResponse.model_validate,
            data={"messaging_product": "whatsapp", "type": media.mime_type},
            files={"file": (media.filename, media.content, media.mime_type)},
        )

    async def get_url(self, media_id: str) -> ApiResult[str]:
        """URL temporária (expira em minutos) do media id."""
        return await self._call("get_media_url", "GET", media_id, parse=lambda data: data["url"])

    async def download(self, url: str) -> ApiResult[bytes]:
        """Baixa o binário de uma URL obtida com ``get_url`` (exige Bearer)."""
        try:
            content = await self._http.download(url)
        except HttpError as exc:
            logger.warning(
                "whatsapp_api_call_failed",
                extra={"operation": "download_media", "status_code": exc.status_code},
            )
            return ApiFailure(exc)
        logger.info(
            "whatsapp_api_call_ok",
            extra={"operation": "download_media", "size_bytes": len(content)},
        )
        return ApiSuccess(content)

    async def upload_for_template(
        self,
        source: bytes | str | Path,
        media_type: MediaType | str,
        filename: str | None = None,
        mime_type: str | None = None,
    ) -> ApiResult[str]:
        """Upload resumable em duas etapas; devolve o handle ``h`` para ``example.header_handle``.

        Raises:
            ValueError: app_id não configurado
        """
        if not self.app_id:
            raise ValueError("app_id é obrigatório para upload resumable (WHATSAPP_APP_ID)")

        media = MediaFile.load(source, MediaType(media_type), filename, mime_type)

        # 1. Sessão de upload (token vai na query, como a Meta exige neste nó)
        session = await self._call(
            "create_upload_session",
            "POST",
            f"{self.app_id}/uploads",
            parse=lambda data: data["id"],
            authenticated=False,
            params={
                "file_name": media.filename,
                "file_length": len(media.content),
                "file_type": media.mime_type,
                "access_token": self._http.access_token,
            },
        )
        if isinstance(session, ApiFailure):
            return session

        # 2. Conteúdo a partir do offset 0
        return await self._call(
            "upload_session_content",
            "POST",
            session.data,
            parse=lambda data: data["h"],
            headers={
                "Authorization": f"OAuth {self._http.access_token}",
                "file_offset": "0",
                "Content-Type": "application/octet-stream",
            },
            content=media.content,
        )
