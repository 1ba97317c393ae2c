"""Configurações centralizadas do whatsapp_business.

Uso típico:
    from whatsapp_business.config import get_settings, GRAPH_API_VERSION
"""

from whatsapp_business.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "GRAPH_API_VERSION",
    "GRAPH_API_BASE_URL",
]
