"""
Export service - the pending-orders batch job.

Pipeline:
1. Select orders (given, or every order without uploaded_at)
2. Validate → track exceptions, keep valid orders
3. Emit CSV → map rows, sanitize, write
4. Return: csv_path, counts, exception summary

Marking orders as uploaded is a separate call (mark_uploaded) made once the
upload pipeline confirms the file, so export and marking can be retried
independently.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from influencer_orders.adapters.repositories_memory import InMemoryExceptionsRepo
from influencer_orders.core.logging_config import export_logger
from influencer_orders.export.csv_emitter import OrderCSVEmitter
from influencer_orders.models.order import OrderLineItem
from influencer_orders.ports.repositories import ExceptionsRepo, OrderRepository
from influencer_orders.validate.validator import OrderValidator


@dataclass
class ExportResult:
    """Result of an export run."""

    csv_path: str
    orders: List[OrderLineItem]
    total_emitted: int
    total_exceptions: int
    exceptions_by_code: Dict[str, int] = field(default_factory=dict)

    @property
    def order_names(self) -> List[str]:
        """Distinct order names in the file, in first-seen order."""
        return list(dict.fromkeys(order.name for order in self.orders))


class OrderExportService:
    """
    Export service - orchestrates select → validate → emit.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        output_dir: Optional[Union[str, Path]] = None,
        exceptions_repo: Optional[ExceptionsRepo] = None,
    ):
        """
        Initialize export service.

        Args:
            order_repo: Source of pending orders and sink for upload marks
            output_dir: Directory for CSVs (default ARTIFACT_ROOT)
            exceptions_repo: Where rejected orders are recorded
        """
        self.order_repo = order_repo
        self.exceptions_repo = exceptions_repo or InMemoryExceptionsRepo()
        self.emitter = OrderCSVEmitter(output_dir=output_dir, order_repo=order_repo)

    def export_pending(self, orders: Optional[Iterable[OrderLineItem]] = None) -> ExportResult:
        """
        Export orders to a warehouse CSV.

        Args:
            orders: Orders to export; None selects every pending order

        Returns:
            ExportResult with the CSV path and exception summary

        Raises:
            EncodingError: If a value cannot be sanitized (no CSV is written)
            OSError: If the CSV cannot be written
        """
        selected = list(orders) if orders is not None else self.order_repo.pending()

        validation_result = OrderValidator(self.exceptions_repo).validate(selected)
        if validation_result.exception_count:
            export_logger.warning(
                "%d of %d orders excluded from export: %s",
                validation_result.exception_count,
                len(selected),
                validation_result.exceptions_by_code,
            )

        csv_path = self.emitter.emit(validation_result.valid_orders)

        return ExportResult(
            csv_path=str(csv_path),
            orders=validation_result.valid_orders,
            total_emitted=len(validation_result.valid_orders),
            total_exceptions=validation_result.exception_count,
            exceptions_by_code=validation_result.exceptions_by_code,
        )

    def mark_uploaded(
        self,
        orders: Iterable[OrderLineItem],
        uploaded_at: Optional[datetime] = None,
    ) -> int:
        """
        Mark orders as uploaded to the warehouse.

        Args:
            orders: Orders whose CSV upload was confirmed
            uploaded_at: Upload time (default now, UTC)

        Returns:
            Number of orders updated
        """
        uploaded_at = uploaded_at or datetime.now(timezone.utc)
        updated = self.order_repo.mark_uploaded(orders, uploaded_at)
        export_logger.info("Marked %d orders as uploaded at %s", updated, uploaded_at.isoformat())
        return updated
