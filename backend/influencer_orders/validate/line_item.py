"""
Line item shape check.

line_item payloads arrive as loosely typed mappings (deserialized JSON, rows
from the order store). LINE_ITEM_SHAPE is the key → type contract they must
satisfy. Only keys that are present and carry the wrong type are reported;
absent keys are not flagged here.
"""
from typing import Any, Dict, List, Mapping

LINE_ITEM_SHAPE: Dict[str, type] = {
    "product_id": int,
    "merchant_sku_item": str,
    "size": str,
    "quantity_requested": int,
    "item_name": str,
    "sell_price": float,
    "product_weight": int,
}


def validate_line_item(value: Mapping[str, Any]) -> List[str]:
    """
    Check a line item payload against LINE_ITEM_SHAPE.

    Types must match exactly: True is not an int and 10 is not a float.
    Extra keys are ignored.

    Args:
        value: Line item payload

    Returns:
        One message per mismatched key, empty when the payload conforms
    """
    errors = []
    for key, expected in LINE_ITEM_SHAPE.items():
        if key not in value:
            continue
        actual = type(value[key])
        if actual is not expected:
            errors.append(
                f"{key} should be a {expected.__name__}, but it is a {actual.__name__}"
            )
    return errors
