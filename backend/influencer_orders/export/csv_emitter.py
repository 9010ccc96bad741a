"""
CSV emitter - warehouse order CSV generation.

Polars-based implementation:
- One row per order line item, in input order
- Every value sanitized to ASCII before anything is written
- Exact header order from CSV_HEADERS, blank for unmapped columns
- write_csv(include_header=True, separator=',', quote_style='necessary', line_terminator='\n')
- Written to a temporary file and renamed, so a failed run leaves no CSV behind
"""
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

import polars as pl

from influencer_orders.core.config import settings
from influencer_orders.core.logging_config import export_logger
from influencer_orders.export.headers import CSV_HEADERS
from influencer_orders.export.idgen import name_csv
from influencer_orders.export.rows import build_row, sanitize_row
from influencer_orders.models.order import OrderLineItem
from influencer_orders.ports.repositories import OrderRepository


class OrderCSVEmitter:
    """
    Emits order CSVs for warehouse ingestion.

    The emitter never touches uploaded_at; marking orders as uploaded is a
    separate step once the upload is confirmed.
    """

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        order_repo: Optional[OrderRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize CSV emitter.

        Args:
            output_dir: Output directory for CSVs (default ARTIFACT_ROOT)
            order_repo: Order repository, used to find pending orders when
                emit() is called without orders
            clock: Returns the current time, used for the file name
        """
        self.output_dir = Path(output_dir or settings.ARTIFACT_ROOT)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.order_repo = order_repo
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def emit(self, orders: Optional[Iterable[OrderLineItem]] = None) -> Path:
        """
        Create a CSV from the given orders or from any orders that have not
        been marked as uploaded.

        Args:
            orders: Orders to include; None selects the pending orders

        Returns:
            Path of the written CSV

        Raises:
            EncodingError: If a value cannot be sanitized (nothing is written)
            OSError: If the file cannot be written
        """
        orders = self._resolve_orders(orders)
        export_logger.debug("%d Order line items", len(orders))

        # Build and sanitize every row before touching the filesystem
        rows = [sanitize_row(build_row(order)) for order in orders]
        df = self._to_frame(rows)

        csv_path = self.output_dir / name_csv(self.clock())
        self._write_atomic(df, csv_path)

        export_logger.info("Wrote %d order rows to %s", len(rows), csv_path)
        return csv_path

    def _resolve_orders(self, orders: Optional[Iterable[OrderLineItem]]) -> List[OrderLineItem]:
        if orders is not None:
            return list(orders)
        if self.order_repo is None:
            raise ValueError("No orders given and no order repository to select pending orders from")
        return self.order_repo.pending()

    def _to_frame(self, rows: List[Dict[str, str]]) -> pl.DataFrame:
        """Lay rows out in header order; blank values become nulls (written as empty fields)."""
        columns = {
            header: [row.get(header) or None for row in rows]
            for header in CSV_HEADERS
        }
        return pl.DataFrame(columns, schema={header: pl.Utf8 for header in CSV_HEADERS})

    def _write_atomic(self, df: pl.DataFrame, csv_path: Path) -> None:
        tmp_path = csv_path.with_name(f".{csv_path.name}.tmp")
        try:
            df.write_csv(
                tmp_path,
                include_header=True,
                separator=",",
                quote_style="necessary",
                line_terminator="\n",
            )
            self._verify_headers(tmp_path)
            os.replace(tmp_path, csv_path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

    def _verify_headers(self, csv_path: Path) -> None:
        """Verify that CSV headers match CSV_HEADERS exactly."""
        with open(csv_path, "r", encoding="ascii") as f:
            header_line = f.readline().strip()

        expected_headers = ",".join(CSV_HEADERS)

        if header_line != expected_headers:
            raise ValueError(
                f"Order CSV headers mismatch.\n"
                f"Expected: {expected_headers}\n"
                f"Got: {header_line}"
            )


def export_csv(
    orders: Optional[Iterable[OrderLineItem]] = None,
    output_dir: Optional[Union[str, Path]] = None,
    order_repo: Optional[OrderRepository] = None,
) -> Path:
    """Write an order CSV with a default emitter and return its path."""
    return OrderCSVEmitter(output_dir=output_dir, order_repo=order_repo).emit(orders)
