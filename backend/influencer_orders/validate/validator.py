"""
Validator - save-time validation of order line items.

Checks (all issues are collected, nothing short-circuits):
1. Required fields → REQ_MISSING
2. Order name prefix → NAME_FORMAT
3. line_item is a mapping → LINE_ITEM_NOT_MAPPING
4. line_item shape → LINE_ITEM_SHAPE (one issue per mistyped key)

Bad orders → exceptions repo; good orders → continue to export.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Iterable

from influencer_orders.core.config import settings
from influencer_orders.core.errors import ValidationIssue
from influencer_orders.core.logging_config import validation_logger
from influencer_orders.ports.repositories import ExceptionsRepo
from influencer_orders.validate.line_item import validate_line_item

REQUIRED_FIELDS = ["name", "billing_address", "shipping_address", "line_item", "influencer_id"]


def _blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set)):
        return len(value) == 0
    return False


def validate_order(order: Any) -> List[ValidationIssue]:
    """
    Validate a single order record.

    Args:
        order: OrderLineItem (or any object exposing the same attributes)

    Returns:
        List of issues, empty when the order is valid
    """
    issues: List[ValidationIssue] = []

    for field_name in REQUIRED_FIELDS:
        if _blank(getattr(order, field_name, None)):
            issues.append(
                ValidationIssue("REQ_MISSING", field_name, f"Required field '{field_name}' is missing")
            )

    name = getattr(order, "name", None)
    prefix = settings.ORDER_NUMBER_PREFIX
    if not _blank(name) and not str(name).startswith(prefix):
        issues.append(
            ValidationIssue("NAME_FORMAT", "name", f"Order name '{name}' must start with '{prefix}'")
        )

    line_item = getattr(order, "line_item", None)
    if line_item is not None:
        if not isinstance(line_item, Mapping):
            issues.append(
                ValidationIssue(
                    "LINE_ITEM_NOT_MAPPING",
                    "line_item",
                    f"line_item should be a mapping, but it is a {type(line_item).__name__}",
                )
            )
        else:
            for message in validate_line_item(line_item):
                issues.append(ValidationIssue("LINE_ITEM_SHAPE", "line_item", message))

    return issues


@dataclass
class ValidationResult:
    """Result of batch validation."""

    valid_orders: List[Any]  # Orders that passed validation
    exception_count: int  # Number of orders that failed
    exceptions_by_code: Dict[str, int] = field(default_factory=dict)  # Issue counts by code


class OrderValidator:
    """
    Validates batches of orders.

    Tracks issues in the exceptions repository and returns only valid
    orders, so one malformed order never blocks the rest of the batch.
    """

    def __init__(self, exceptions_repo: ExceptionsRepo):
        """
        Initialize validator.

        Args:
            exceptions_repo: Repository for storing exceptions
        """
        self.exceptions_repo = exceptions_repo

    def validate(self, orders: Iterable[Any]) -> ValidationResult:
        """
        Validate every order in a batch.

        Args:
            orders: Orders to validate

        Returns:
            ValidationResult with the valid orders and exception counts
        """
        valid_orders = []
        exception_count = 0
        exceptions_by_code: Dict[str, int] = {}

        for index, order in enumerate(orders):
            issues = validate_order(order)
            if not issues:
                valid_orders.append(order)
                continue

            exception_count += 1
            order_ptr = getattr(order, "name", None) or f"order_{index}"
            validation_logger.warning(
                "Order %s rejected: %s", order_ptr, "; ".join(str(i) for i in issues)
            )
            for issue in issues:
                self.exceptions_repo.add(
                    order_ptr=order_ptr,
                    error_code=issue.code,
                    hint=issue.message,
                    offending={issue.field: _offending_value(order, issue.field)},
                )
                exceptions_by_code[issue.code] = exceptions_by_code.get(issue.code, 0) + 1

        return ValidationResult(
            valid_orders=valid_orders,
            exception_count=exception_count,
            exceptions_by_code=exceptions_by_code,
        )


def _offending_value(order: Any, field_name: str) -> Any:
    value = getattr(order, field_name, None)
    if isinstance(value, Mapping):
        return dict(value)
    return value
