"""Gestão de templates de mensagem na WABA.

Responsabilidades:
- Criar, listar (paginado), buscar, editar e remover templates
- Uma requisição por operação, sem cache local

A aprovação é assíncrona do lado da Meta: ``create`` devolve status PENDING
e o resultado chega depois via webhook ``message_template_status_update``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import CreateTemplateRequest
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource, query_params, require_id
from whatsapp_business.adapters.whatsapp.results import ApiResult

DEFAULT_PAGE_SIZE = 25


class TemplatesApi(ApiResource):
    """Templates de uma WABA."""

    def __init__(self, http: WhatsAppHttpClient, waba_id: str | None = None) -> None:
        super().__init__(http)
        self.waba_id = waba_id

    def _waba(self, waba_id: str | None) -> str:
        return require_id("waba_id", waba_id or self.waba_id)

    async def create(
        self,
        request: CreateTemplateRequest | Mapping[str, Any],
        waba_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        """Cria template; resposta traz id, status e category."""
        return await self._call(
            "create_template",
            "POST",
            f"{self._waba(waba_id)}/message_templates",
            json=to_json_value(request),
        )

    async def list(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        after: str | None = None,
        name: str | None = None,
        waba_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        """Página de templates; use ``paging.cursors.after`` para a próxima."""
        return await self._call(
            "list_templates",
            "GET",
            f"{self._waba(waba_id)}/message_templates",
            params=query_params(limit=limit, after=after, name=name),
        )

    async def get_by_id(self, template_id: str) -> ApiResult[dict[str, Any]]:
        return await self._call("get_template", "GET", template_id)

    async def update(
        self,
        template_id: str,
        updates: Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Edita componentes/categoria de um template existente."""
        return await self._call(
            "update_template",
            "POST",
            template_id,
            json=to_json_value(updates),
        )

    async def delete(self, name: str, waba_id: str | None = None) -> ApiResult[dict[str, Any]]:
        """Remove o template pelo nome (todas as traduções)."""
        return await self._call(
            "delete_template",
            "DELETE",
            f"{self._waba(waba_id)}/message_templates",
            params={"name": name},
        )
