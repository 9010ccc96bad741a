"""
Core settings, logging and error types.
"""
from influencer_orders.core.config import settings, Settings
from influencer_orders.core.errors import (
    ValidationIssue,
    OrderError,
    OrderValidationError,
    NormalizeError,
    EncodingError,
)

__all__ = [
    "settings",
    "Settings",
    "ValidationIssue",
    "OrderError",
    "OrderValidationError",
    "NormalizeError",
    "EncodingError",
]
