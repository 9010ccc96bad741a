"""
Row mapping from order line items to warehouse CSV columns.
"""
from typing import Any, Dict

from influencer_orders.transform.normalizers import (
    digits_only,
    format_order_date,
    full_name,
    transliterate_ascii,
)

# Every exported row is a single unit, whatever the stored quantity
EXPORT_QUANTITY = 1
GIFT_FLAG = "FALSE"


def build_row(order: Any) -> Dict[str, Any]:
    """
    Create a dict of CSV data keyed by the CSV header names.

    Columns not listed here are left blank by the emitter.

    Args:
        order: OrderLineItem to map

    Returns:
        Order CSV row data (raw values, not yet sanitized)
    """
    billing = order.billing_address or {}
    shipping = order.shipping_address or {}
    line_item = order.line_item or {}

    return {
        "order_number": order.name,
        "order_date": format_order_date(order.processed_at),
        "customer_phone": digits_only(billing.get("phone")),
        "sell_price": line_item.get("sell_price"),
        "quantity_requested": EXPORT_QUANTITY,
        "merchant_sku_item": line_item.get("merchant_sku_item"),
        "product_weight": line_item.get("product_weight"),
        "item_name": line_item.get("item_name"),
        "billing_address_name": billing.get("name"),
        "billing_address_street": billing.get("address1"),
        "billing_address_city": billing.get("city"),
        "billing_address_postal_code": billing.get("zip"),
        "billing_address_state": billing.get("province_code"),
        "billing_address_country": billing.get("country_code"),
        "shipment_address_name": full_name(shipping.get("first_name"), shipping.get("last_name")),
        "shipment_address_street": shipping.get("address1"),
        "shipment_address_street_2": shipping.get("address2"),
        "shipment_address_city": shipping.get("city"),
        "shipment_address_postal_code": shipping.get("zip"),
        "shipment_address_state": shipping.get("province_code"),
        "shipment_address_country": shipping.get("country_code"),
        "shipment_method_requested": order.shipment_method_requested,
        "gift": GIFT_FLAG,
    }


def sanitize_row(row: Dict[str, Any]) -> Dict[str, str]:
    """Convert every value to ASCII-only text (None becomes "")."""
    return {key: transliterate_ascii(value) for key, value in row.items()}
