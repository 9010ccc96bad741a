"""
Shared fixtures for order tests.
"""
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from influencer_orders.models.order import OrderLineItem


@pytest.fixture
def temp_output_dir():
    """Temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-03-01 14:05:00.123 UTC."""
    return lambda: datetime(2024, 3, 1, 14, 5, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def billing_address():
    return {
        "name": "Jane Doe",
        "address1": "1 Main St",
        "city": "Springfield",
        "zip": "62701",
        "province_code": "IL",
        "country_code": "US",
        "phone": "+1 (555) 123-4567",
    }


@pytest.fixture
def shipping_address():
    return {
        "first_name": "Ana",
        "last_name": "Li",
        "address1": "22 Elm St",
        "address2": "Apt 4",
        "city": "Portland",
        "zip": "97201",
        "province_code": "OR",
        "country_code": "US",
    }


@pytest.fixture
def line_item():
    return {
        "product_id": 1001,
        "merchant_sku_item": "SKU-RED-M",
        "size": "M",
        "quantity_requested": 1,
        "item_name": "Red Hoodie",
        "sell_price": 49.99,
        "product_weight": 300,
    }


@pytest.fixture
def make_order(billing_address, shipping_address, line_item):
    """Factory for valid orders; keyword arguments override fields."""

    def _make(**overrides):
        data = {
            "name": "#INabcDEF1234",
            "influencer_id": 7,
            "billing_address": dict(billing_address),
            "shipping_address": dict(shipping_address),
            "line_item": dict(line_item),
            "processed_at": datetime(2024, 3, 1, 14, 5, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return OrderLineItem(**data)

    return _make


@pytest.fixture
def influencer(billing_address, shipping_address):
    return SimpleNamespace(
        id=7,
        billing_address=billing_address,
        shipping_address=shipping_address,
    )


@pytest.fixture
def variant():
    return SimpleNamespace(
        product_id=1001,
        sku="SKU-RED-M",
        option1="M",
        price="49.99",
        weight=300.0,
        product_title="Red Hoodie",
    )
