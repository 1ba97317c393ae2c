"""Builders de payload para a API Meta/WhatsApp.

Funções puras: recebem dados de envio e devolvem o corpo JSON da
requisição, omitindo campos None.
"""

from whatsapp_business.adapters.whatsapp.payload_builders.base import (
    build_base_payload,
    to_json_value,
)
from whatsapp_business.adapters.whatsapp.payload_builders.contacts import build_contacts_payload
from whatsapp_business.adapters.whatsapp.payload_builders.interactive import (
    build_catalog_payload,
    build_interactive_payload,
    build_order_details_payload,
    build_product_list_payload,
    build_request_address_payload,
)
from whatsapp_business.adapters.whatsapp.payload_builders.location import build_location_payload
from whatsapp_business.adapters.whatsapp.payload_builders.media import build_media_payload
from whatsapp_business.adapters.whatsapp.payload_builders.reaction import (
    build_reaction_payload,
    build_read_receipt_payload,
)
from whatsapp_business.adapters.whatsapp.payload_builders.template import build_template_payload
from whatsapp_business.adapters.whatsapp.payload_builders.text import build_text_payload

__all__ = [
    "build_base_payload",
    "to_json_value",
    "build_text_payload",
    "build_media_payload",
    "build_location_payload",
    "build_contacts_payload",
    "build_interactive_payload",
    "build_request_address_payload",
    "build_catalog_payload",
    "build_product_list_payload",
    "build_order_details_payload",
    "build_template_payload",
    "build_reaction_payload",
    "build_read_receipt_payload",
]
