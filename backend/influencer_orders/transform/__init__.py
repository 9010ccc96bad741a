"""
Transform module for emit-time value normalization.
"""
from influencer_orders.transform.normalizers import (
    transliterate_ascii,
    digits_only,
    format_order_date,
    full_name,
)

__all__ = [
    "transliterate_ascii",
    "digits_only",
    "format_order_date",
    "full_name",
]
