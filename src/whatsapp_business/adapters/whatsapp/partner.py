"""Operações de parceiro/BSP: analytics, linhas de crédito e conta oficial."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_business.adapters.whatsapp.models import AllocationConfig, AnalyticsParams, OBARequest
from whatsapp_business.adapters.whatsapp.payload_builders.base import to_json_value
from whatsapp_business.adapters.whatsapp.resource import ApiResource, query_params
from whatsapp_business.adapters.whatsapp.results import ApiResult


def _analytics_query(params: AnalyticsParams) -> dict[str, Any]:
    # Listas viajam como CSV na query
    return query_params(
        start=params.start,
        end=params.end,
        granularity=params.granularity.value,
        metric_types=",".join(params.metric_types) if params.metric_types else None,
        phone_numbers=",".join(params.phone_numbers) if params.phone_numbers else None,
    )


class PartnerApi(ApiResource):
    async def get_analytics(
        self,
        waba_id: str,
        params: AnalyticsParams | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Métricas de conversas/custos da WABA no intervalo [start, end] (unix)."""
        parsed = AnalyticsParams.model_validate(params) if isinstance(params, Mapping) else params
        return await self._call(
            "get_analytics",
            "GET",
            f"{waba_id}/analytics",
            params=_analytics_query(parsed),
        )

    async def get_credit_lines(self, business_id: str) -> ApiResult[dict[str, Any]]:
        return await self._call("get_credit_lines", "GET", f"{business_id}/extended_credits")

    async def allocate_credit(
        self,
        credit_line_id: str,
        config: AllocationConfig | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        """Compartilha a linha de crédito do parceiro com a WABA do cliente."""
        return await self._call(
            "allocate_credit",
            "POST",
            f"{credit_line_id}/owes_amount",
            json=to_json_value(config),
        )

    async def request_official_business_account(
        self,
        phone_number_id: str,
        details: OBARequest | Mapping[str, Any],
    ) -> ApiResult[dict[str, Any]]:
        return await self._call(
            "request_official_business_account",
            "POST",
            f"{phone_number_id}/official_business_account",
            json=to_json_value(details),
        )
