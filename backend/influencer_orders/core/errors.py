"""
Exception hierarchy for order creation and export.

Validation problems are collected as data (ValidationIssue) and only raised
as OrderValidationError when a single record must be rejected. Encoding
failures abort the whole export run.
"""
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found on an order record."""

    code: str  # REQ_MISSING, NAME_FORMAT, LINE_ITEM_NOT_MAPPING, LINE_ITEM_SHAPE
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class OrderError(Exception):
    """Base class for order errors."""

    pass


class OrderValidationError(OrderError):
    """Raised when an order record fails save-time validation."""

    def __init__(self, issues: List[ValidationIssue], name: Optional[str] = None):
        self.issues = list(issues)
        self.name = name
        label = f"Order {name}" if name else "Order"
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"{label} is invalid: {details}")


class NormalizeError(OrderError):
    """Raised when normalization fails and cannot be recovered."""

    pass


class EncodingError(NormalizeError):
    """Raised when a value cannot be transliterated to ASCII."""

    pass
