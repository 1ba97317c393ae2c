"""Gestão de WhatsApp Flows na WABA (criar, listar, atualizar JSON, publicar)."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_business.adapters.whatsapp.models import FlowJSON
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource, require_id
from whatsapp_business.adapters.whatsapp.results import ApiResult

FLOW_JSON_FILENAME = "flow.json"
FLOW_JSON_ASSET_TYPE = "FLOW_JSON"


class FlowsApi(ApiResource):
    def __init__(self, http: WhatsAppHttpClient, waba_id: str | None = None) -> None:
        super().__init__(http)
        self.waba_id = waba_id

    def _waba(self, waba_id: str | None) -> str:
        return require_id("waba_id", waba_id or self.waba_id)

    async def create(
        self,
        name: str,
        categories: Sequence[str],
        waba_id: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        """Cria o Flow em rascunho (DRAFT); devolve ``{"id": ...}``."""
        return await self._call(
            "create_flow",
            "POST",
            f"{self._waba(waba_id)}/flows",
            json={"name": name, "categories": list(categories)},
        )

    async def list(self, waba_id: str | None = None) -> ApiResult[dict[str, Any]]:
        return await self._call("list_flows", "GET", f"{self._waba(waba_id)}/flows")

    async def update_json(
        self,
        flow_id: str,
        flow_json: FlowJSON | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Substitui o JSON do Flow enviando-o como asset ``flow.json``.

        A resposta pode trazer ``validation_errors`` mesmo com sucesso HTTP.
        """
        content = json.dumps(to_json_value(flow_json)).encode("utf-8")
        return await self._call(
            "update_flow_json",
            "POST",
            f"{flow_id}/assets",
            data={"name": FLOW_JSON_FILENAME, "asset_type": FLOW_JSON_ASSET_TYPE},
            files={"file": (FLOW_JSON_FILENAME, content, "application/json")},
        )

    async def publish(self, flow_id: str) -> ApiResult[dict[str, Any]]:
        """Publica o Flow; depois disso o JSON não pode mais ser alterado."""
        return await self._call("publish_flow", "POST", f"{flow_id}/publish", json={})
