"""Builders de payload de envio."""

from __future__ import annotations

import pytest

from whatsapp_business.adapters.whatsapp.models import (
    ContactName,
    ContactObject,
    ContactPhone,
    MediaObject,
    ProductItem,
    ProductSection,
    TemplateComponent,
    TemplateParameter,
)
from whatsapp_business.adapters.whatsapp.payload_builders import (
    build_catalog_payload,
    build_contacts_payload,
    build_interactive_payload,
    build_location_payload,
    build_media_payload,
    build_order_details_payload,
    build_product_list_payload,
    build_reaction_payload,
    build_read_receipt_payload,
    build_request_address_payload,
    build_template_payload,
    build_text_payload,
)

TO = "5511999999999"


def _base(payload: dict, message_type: str) -> None:
    assert payload["messaging_product"] == "whatsapp"
    assert payload["recipient_type"] == "individual"
    assert payload["to"] == TO
    assert payload["type"] == message_type


class TestBuilders:
    def test_text(self):
        payload = build_text_payload(TO, "Olá", preview_url=True)

        _base(payload, "text")
        assert payload["text"] == {"preview_url": True, "body": "Olá"}

    def test_media_with_model_omits_none(self):
        payload = build_media_payload(TO, "document", MediaObject(id="m1", filename="a.pdf"))

        _base(payload, "document")
        assert payload["document"] == {"id": "m1", "filename": "a.pdf"}

    def test_media_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            build_media_payload(TO, "hologram", {"id": "m1"})

    def test_location(self):
        payload = build_location_payload(TO, longitude=-46.6, latitude=-23.5, name="SP")

        _base(payload, "location")
        assert payload["location"] == {"longitude": -46.6, "latitude": -23.5, "name": "SP"}

    def test_contacts(self):
        contact = ContactObject(
            name=ContactName(formatted_name="Ana Souza", first_name="Ana"),
            phones=[ContactPhone(phone="+5511999990000", type="CELL")],
        )

        payload = build_contacts_payload(TO, [contact])

        _base(payload, "contacts")
        assert payload["contacts"] == [
            {
                "name": {"formatted_name": "Ana Souza", "first_name": "Ana"},
                "phones": [{"phone": "+5511999990000", "type": "CELL"}],
            }
        ]

    def test_template_with_components(self):
        components = [
            TemplateComponent(
                type="body", parameters=[TemplateParameter(type="text", text="Ana")]
            )
        ]

        payload = build_template_payload(TO, "hello_world", "pt_BR", components)

        _base(payload, "template")
        assert payload["template"] == {
            "name": "hello_world",
            "language": {"code": "pt_BR"},
            "components": [{"type": "body", "parameters": [{"type": "text", "text": "Ana"}]}],
        }

    def test_template_without_components(self):
        payload = build_template_payload(TO, "hello_world")

        assert payload["template"] == {"name": "hello_world", "language": {"code": "en_US"}}

    def test_interactive_passthrough(self):
        interactive = {
            "type": "button",
            "body": {"text": "Escolha"},
            "action": {"buttons": [{"type": "reply", "reply": {"id": "a", "title": "A"}}]},
        }

        payload = build_interactive_payload(TO, interactive)

        _base(payload, "interactive")
        assert payload["interactive"] == interactive

    def test_reaction(self):
        payload = build_reaction_payload(TO, "wamid.1", "👍")

        _base(payload, "reaction")
        assert payload["reaction"] == {"message_id": "wamid.1", "emoji": "👍"}

    def test_read_receipt(self):
        assert build_read_receipt_payload("wamid.1") == {
            "messaging_product": "whatsapp",
            "status": "read",
            "message_id": "wamid.1",
        }

    def test_request_address(self):
        payload = build_request_address_payload(TO, "Seu endereço?")

        interactive = payload["interactive"]
        assert interactive["type"] == "address_message"
        assert interactive["action"] == {
            "name": "address_message",
            "parameters": {"country": "IN"},
        }

    def test_catalog_without_footer(self):
        payload = build_catalog_payload(TO, "Veja", thumbnail_product_id="sku-1")

        interactive = payload["interactive"]
        assert "footer" not in interactive
        assert interactive["action"]["parameters"] == {"thumbnail_product_retailer_id": "sku-1"}

    def test_product_list(self):
        sections = [ProductSection(title="Top", product_items=[ProductItem(product_retailer_id="sku-1")])]

        payload = build_product_list_payload(TO, "Header", "Body", "cat-1", sections, "Footer")

        interactive = payload["interactive"]
        assert interactive["type"] == "product_list"
        assert interactive["header"] == {"type": "text", "text": "Header"}
        assert interactive["footer"] == {"text": "Footer"}
        assert interactive["action"] == {
            "catalog_id": "cat-1",
            "sections": [{"title": "Top", "product_items": [{"product_retailer_id": "sku-1"}]}],
        }

    def test_order_details(self):
        details = {"body": {"text": "Pedido"}, "action": {"name": "review_and_pay"}}

        payload = build_order_details_payload(TO, details)

        assert payload["interactive"] == {"type": "order_details", **details}
