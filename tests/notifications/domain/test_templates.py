from datetime import UTC, datetime

import pytest
from notifications.templates import TEMPLATE_REGISTRY, get_template
from notifications.templates.contact_message import ContactMessageTemplate
from notifications.templates.purchase_confirmation import PurchaseConfirmationTemplate


class TestPurchaseConfirmationTemplate:
    def test_subject_names_product(self):
        content = PurchaseConfirmationTemplate.render(
            {"customer_name": "Buyer", "product_name": "Premium Nothing", "order_id": "order_1"}
        )
        assert content["subject"] == "Purchase Confirmation - You've Successfully Bought Premium Nothing!"

    def test_bodies_include_order_number(self):
        content = PurchaseConfirmationTemplate.render(
            {"customer_name": "Buyer", "product_name": "Premium Nothing", "order_id": "order_1"}
        )
        assert "Order Number: order_1" in content["body"]
        assert "order_1" in content["html_body"]
        assert "absolutely nothing" in content["body"]

    def test_html_escapes_customer_input(self):
        content = PurchaseConfirmationTemplate.render(
            {"customer_name": "<script>alert(1)</script>", "product_name": "Nothing", "order_id": "order_1"}
        )
        assert "<script>" not in content["html_body"]
        assert "&lt;script&gt;" in content["html_body"]

    def test_missing_product_falls_back(self):
        content = PurchaseConfirmationTemplate.render({"customer_name": "Buyer", "order_id": "order_1"})
        assert content["subject"].endswith("Bought Nothing!")


class TestContactMessageTemplate:
    def test_render(self):
        received_at = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        content = ContactMessageTemplate.render(
            {
                "customer_name": "Curious",
                "customer_email": "curious@example.com",
                "message": "Is it really nothing?",
                "received_at": received_at,
            }
        )
        assert content["subject"] == "Contact message from Curious"
        assert "Email: curious@example.com" in content["body"]
        assert "Is it really nothing?" in content["body"]
        assert received_at.isoformat() in content["body"]


class TestTemplateRegistry:
    def test_registered_types(self):
        assert set(TEMPLATE_REGISTRY) == {"purchase_confirmation", "contact_message"}

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_template("newsletter")
