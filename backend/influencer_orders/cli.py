"""
Command line entry point for the order export batch job.

Usage:
    influencer-orders export orders.json --output-dir ./out
    influencer-orders order-number --count 3
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from influencer_orders.adapters.repositories_memory import (
    InMemoryExceptionsRepo,
    InMemoryOrderRepository,
)
from influencer_orders.core.config import settings
from influencer_orders.core.errors import OrderError
from influencer_orders.core.logging_config import set_level, validation_logger
from influencer_orders.export.idgen import generate_order_number
from influencer_orders.models.order import OrderLineItem
from influencer_orders.ports.repositories import ExceptionsRepo
from influencer_orders.services.export_service import OrderExportService


RECORD_INVALID = "RECORD_INVALID"


def _record_pointer(record: Any, index: int) -> str:
    name = record.get("name") if isinstance(record, dict) else None
    if isinstance(name, str) and name.strip():
        return name
    return f"order_{index}"


def load_orders(path: Path, exceptions_repo: Optional[ExceptionsRepo] = None) -> List[OrderLineItem]:
    """
    Load order records from a JSON file holding a list of objects.

    A record that cannot be built into an OrderLineItem at all (a string
    where an address map belongs, a non-object entry) is recorded in
    exceptions_repo as RECORD_INVALID and skipped. Without a repository the
    first such record raises.

    Raises:
        ValueError: If the file does not hold a JSON list, or a record is
            malformed and no exceptions_repo was given
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON list of order records")

    orders = []
    for index, record in enumerate(records):
        try:
            orders.append(OrderLineItem.model_validate(record))
        except ValidationError as e:
            if exceptions_repo is None:
                raise
            pointer = _record_pointer(record, index)
            hint = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
                for err in e.errors()
            )
            validation_logger.warning("Record %s rejected on load: %s", pointer, hint)
            exceptions_repo.add(
                order_ptr=pointer,
                error_code=RECORD_INVALID,
                hint=hint,
                offending={"record": record},
            )
    return orders


def _export(args: argparse.Namespace) -> int:
    exceptions_repo = InMemoryExceptionsRepo()
    repo = InMemoryOrderRepository(load_orders(args.orders, exceptions_repo))
    rejected_on_load = exceptions_repo.count()
    service = OrderExportService(repo, output_dir=args.output_dir, exceptions_repo=exceptions_repo)

    result = service.export_pending(repo.all() if args.all else None)

    print(result.csv_path)
    print(
        f"{result.total_emitted} line items exported, "
        f"{result.total_exceptions + rejected_on_load} rejected",
        file=sys.stderr,
    )
    for exc in service.exceptions_repo.list():
        print(f"  {exc['order_ptr']}: [{exc['error_code']}] {exc['hint']}", file=sys.stderr)
    return 0


def _order_number(args: argparse.Namespace) -> int:
    for _ in range(args.count):
        print(generate_order_number(prefix=args.prefix))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="influencer-orders",
        description=f"{settings.PROJECT_NAME}: CSV export for warehouse ingestion",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override LOG_LEVEL for this run",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write pending orders to a warehouse CSV")
    export_parser.add_argument("orders", type=Path, help="JSON file with a list of order records")
    export_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(settings.ARTIFACT_ROOT),
        help="Directory the CSV is written to",
    )
    export_parser.add_argument(
        "--all",
        action="store_true",
        help="Include orders already marked as uploaded",
    )
    export_parser.set_defaults(func=_export)

    number_parser = subparsers.add_parser("order-number", help="Generate order numbers")
    number_parser.add_argument("--prefix", default=settings.ORDER_NUMBER_PREFIX)
    number_parser.add_argument("--count", type=int, default=1)
    number_parser.set_defaults(func=_order_number)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_level(args.log_level)
    try:
        return args.func(args)
    except (OrderError, OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
