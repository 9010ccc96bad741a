"""
Validation module for order line items.
"""
from influencer_orders.validate.line_item import LINE_ITEM_SHAPE, validate_line_item
from influencer_orders.validate.validator import (
    OrderValidator,
    ValidationResult,
    validate_order,
)

__all__ = [
    "LINE_ITEM_SHAPE",
    "validate_line_item",
    "OrderValidator",
    "ValidationResult",
    "validate_order",
]
