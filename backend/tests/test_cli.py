"""
Tests for the command line entry point.
"""
import json
import logging
from pathlib import Path

import polars as pl
import pytest
from pydantic import ValidationError

from influencer_orders.adapters.repositories_memory import InMemoryExceptionsRepo
from influencer_orders.cli import load_orders, main
from influencer_orders.core.config import settings
from influencer_orders.core.logging_config import PACKAGE_LOGGER, export_logger


def write_orders(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def record(billing_address, shipping_address, line_item, **overrides):
    data = {
        "name": "#INcli0000001",
        "influencer_id": 7,
        "billing_address": billing_address,
        "shipping_address": shipping_address,
        "line_item": line_item,
        "processed_at": "2024-03-01T14:05:00Z",
    }
    data.update(overrides)
    return data


def test_load_orders(tmp_path, billing_address, shipping_address, line_item):
    """Test JSON records load as orders with parsed timestamps."""
    path = write_orders(
        tmp_path / "orders.json",
        [record(billing_address, shipping_address, line_item, shipment_method_requested="2DAY")],
    )

    orders = load_orders(path)

    assert len(orders) == 1
    assert orders[0].processed_at.hour == 14
    assert orders[0].shipment_method_requested == "2DAY"
    assert orders[0].line_item["sell_price"] == 49.99


def test_export_command(tmp_path, capsys, billing_address, shipping_address, line_item):
    """Test export writes the CSV and prints its path."""
    bad_line_item = dict(line_item, sell_price=50)
    path = write_orders(
        tmp_path / "orders.json",
        [
            record(billing_address, shipping_address, line_item),
            record(billing_address, shipping_address, bad_line_item, name="#INcli0000002"),
            record(
                billing_address,
                shipping_address,
                line_item,
                name="#INcli0000003",
                uploaded_at="2024-03-02T00:00:00Z",
            ),
        ],
    )
    output_dir = tmp_path / "out"

    exit_code = main(["export", str(path), "--output-dir", str(output_dir)])

    captured = capsys.readouterr()
    csv_path = Path(captured.out.strip())
    assert exit_code == 0
    assert csv_path.parent == output_dir
    assert pl.read_csv(csv_path, infer_schema_length=0)["order_number"].to_list() == ["#INcli0000001"]
    assert "1 line items exported, 1 rejected" in captured.err
    assert "#INcli0000002: [LINE_ITEM_SHAPE]" in captured.err


def test_export_all(tmp_path, capsys, billing_address, shipping_address, line_item):
    """Test --all includes uploaded orders."""
    path = write_orders(
        tmp_path / "orders.json",
        [record(billing_address, shipping_address, line_item, uploaded_at="2024-03-02T00:00:00Z")],
    )

    exit_code = main(["export", str(path), "--output-dir", str(tmp_path), "--all"])

    assert exit_code == 0
    assert "1 line items exported" in capsys.readouterr().err


def test_export_bad_file(tmp_path, capsys):
    """Test a file that is not a list fails cleanly."""
    path = tmp_path / "orders.json"
    path.write_text(json.dumps({"name": "#IN"}), encoding="utf-8")

    assert main(["export", str(path), "--output-dir", str(tmp_path)]) == 1
    assert "JSON list" in capsys.readouterr().err


def test_order_number_command(capsys):
    """Test order numbers are printed one per line."""
    assert main(["order-number", "--count", "3", "--prefix", "#T"]) == 0

    numbers = capsys.readouterr().out.split()
    assert len(numbers) == 3
    assert all(n.startswith("#T") and len(n) == 12 for n in numbers)


def test_export_skips_malformed_records(tmp_path, capsys, billing_address, shipping_address, line_item):
    """Test records pydantic cannot build are rejected without stopping the batch."""
    path = write_orders(
        tmp_path / "orders.json",
        [
            record(billing_address, shipping_address, line_item),
            record(billing_address, "not a map", line_item, name="#INcli0000002"),
            record(billing_address, shipping_address, line_item, name=123),
            "not an order",
        ],
    )

    exit_code = main(["export", str(path), "--output-dir", str(tmp_path / "out")])

    captured = capsys.readouterr()
    assert exit_code == 0
    csv_path = Path(captured.out.strip())
    assert pl.read_csv(csv_path, infer_schema_length=0)["order_number"].to_list() == ["#INcli0000001"]
    assert "1 line items exported, 3 rejected" in captured.err
    assert "#INcli0000002: [RECORD_INVALID] shipping_address" in captured.err
    assert "order_2: [RECORD_INVALID] name" in captured.err
    assert "order_3: [RECORD_INVALID]" in captured.err


def test_load_orders_records_malformed(tmp_path, billing_address, shipping_address, line_item):
    """Test load_orders tracks malformed records when given a repository."""
    path = write_orders(
        tmp_path / "orders.json",
        [record(["x"], shipping_address, line_item)],
    )
    exceptions_repo = InMemoryExceptionsRepo()

    assert load_orders(path, exceptions_repo) == []

    [exc] = exceptions_repo.list()
    assert exc["order_ptr"] == "#INcli0000001"
    assert exc["error_code"] == "RECORD_INVALID"
    assert exc["offending"]["record"]["billing_address"] == ["x"]


def test_load_orders_raises_without_repo(tmp_path, billing_address, shipping_address, line_item):
    path = write_orders(
        tmp_path / "orders.json",
        [record("x", shipping_address, line_item)],
    )

    with pytest.raises(ValidationError):
        load_orders(path)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert settings.VERSION in capsys.readouterr().out


def test_log_level_override(capsys):
    """Test --log-level changes the package logger level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous = package_logger.level
    try:
        assert main(["--log-level", "debug", "order-number"]) == 0
        assert package_logger.level == logging.DEBUG
        assert export_logger.getEffectiveLevel() == logging.DEBUG
    finally:
        package_logger.setLevel(previous)
