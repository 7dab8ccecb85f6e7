"""
Pytest configuration and fixtures
"""

import pytest
from paymongo_sdk import PaymongoClient, ClientConfig

BASE_URL = "https://api.paymongo.com/v1"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def test_config():
    """Create test configuration fixture"""
    return ClientConfig(
        secret_key="sk_test_123",
        public_key="pk_test_456",
        base_url=BASE_URL,
        timeout_connect=1.0,
        timeout_read=5.0,
    )


@pytest.fixture
def client(test_config):
    """Create test client fixture"""
    with PaymongoClient(config=test_config) as c:
        yield c


@pytest.fixture
def billing_attributes():
    return {
        "name": "TestName",
        "email": "test@paymongo.com",
        "phone": "9063364572",
        "address": {
            "line1": "TestAddress1",
            "line2": "TestAddress2",
            "city": "TestCity",
            "state": "TestState",
            "postal_code": "4506",
            "country": "PH",
        },
    }


@pytest.fixture
def payment_resource(billing_attributes):
    def make(payment_id="pay_123", status="paid", **attributes):
        attrs = {
            "amount": 10000,
            "currency": "PHP",
            "description": "Payment for order",
            "status": status,
            "billing": billing_attributes,
            "source": {"id": "src_123", "type": "gcash"},
            "fee": 250,
            "net_amount": 9750,
            "livemode": False,
            "paid_at": 1700000100,
            "created_at": 1700000000,
            "updated_at": 1700000100,
        }
        attrs.update(attributes)
        return {"id": payment_id, "type": "payment", "attributes": attrs}

    return make


@pytest.fixture
def checkout_resource():
    def make(checkout_id="cs_123", status="active", **attributes):
        attrs = {
            "description": "Test Checkout",
            "checkout_url": f"https://checkout.paymongo.com/{checkout_id}",
            "client_key": f"{checkout_id}_client_key",
            "line_items": [
                {"name": "item_name", "quantity": 1, "currency": "PHP", "amount": 3500}
            ],
            "payment_method_types": ["gcash", "card", "paymaya"],
            "payments": [],
            "status": status,
            "livemode": False,
            "send_email_receipt": False,
            "show_description": True,
            "show_line_items": True,
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        attrs.update(attributes)
        return {"id": checkout_id, "type": "checkout_session", "attributes": attrs}

    return make


@pytest.fixture
def link_resource():
    def make(link_id="link_123", status="unpaid", **attributes):
        attrs = {
            "amount": 10000,
            "currency": "PHP",
            "description": "Payment for",
            "archived": False,
            "checkout_url": "https://pm.link/org/abc123",
            "reference_number": "abc123",
            "status": status,
            "payments": [],
            "livemode": False,
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        attrs.update(attributes)
        return {"id": link_id, "type": "link", "attributes": attrs}

    return make


@pytest.fixture
def source_resource(billing_attributes):
    def make(source_id="src_123", status="pending", **attributes):
        attrs = {
            "amount": 10000,
            "currency": "PHP",
            "type": "gcash",
            "status": status,
            "billing": billing_attributes,
            "redirect": {
                "checkout_url": "https://test-sources.paymongo.com/sources?id=src_123",
                "success": "http://127.0.0.1/success",
                "failed": "http://127.0.0.1/failed",
            },
            "livemode": False,
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        attrs.update(attributes)
        return {"id": source_id, "type": "source", "attributes": attrs}

    return make
