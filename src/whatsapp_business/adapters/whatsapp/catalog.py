"""Catálogo de produtos (Commerce) vinculado à WABA."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_business.adapters.whatsapp.models import ProductRequest
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource, query_params
from whatsapp_business.adapters.whatsapp.results import ApiResult

DEFAULT_PAGE_SIZE = 25


class CatalogApi(ApiResource):
    """Produtos de catálogos; ``catalog_id`` vem do Commerce Manager."""

    async def list_products(
        self,
        catalog_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        after: str | None = None,
    ) -> ApiResult[dict[str, Any]]:
        return await self._call(
            "list_products",
            "GET",
            f"{catalog_id}/products",
            params=query_params(limit=limit, after=after),
        )

    async def add_product(
        self,
        catalog_id: str,
        product: ProductRequest | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Cria produto; ``price`` em centavos. Devolve id e retailer_id."""
        return await self._call(
            "add_product",
            "POST",
            f"{catalog_id}/products",
            json=to_json_value(product),
        )

    async def update_product(
        self,
        catalog_id: str,
        retailer_id: str,
        updates: Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Atualiza pelo retailer_id via batch (único método que não exige o id interno)."""
        batch = {
            "requests": [
                {"method": "UPDATE", "retailer_id": retailer_id, "data": to_json_value(updates)}
            ]
        }
        return await self._call("update_product", "POST", f"{catalog_id}/batch", json=batch)

    async def delete_product(self, product_id: str) -> ApiResult[dict[str, Any]]:
        """Remove o produto pelo id interno da Meta (não o retailer_id)."""
        return await self._call("delete_product", "DELETE", product_id)
