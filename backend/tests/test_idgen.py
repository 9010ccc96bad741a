"""
Tests for order number and CSV file name generation.
"""
import random
import string
from datetime import datetime, timedelta, timezone

import pytest

from influencer_orders.export.idgen import (
    ORDER_NUMBER_CHARACTERS,
    generate_order_number,
    name_csv,
)

ALPHANUMERIC = set(string.ascii_letters + string.digits)


class TestGenerateOrderNumber:
    """Tests for generate_order_number."""

    def test_default_prefix(self):
        """Test default prefix and suffix length."""
        number = generate_order_number()
        assert number.startswith("#IN")
        assert len(number) == len("#IN") + 10

    @pytest.mark.parametrize("prefix", ["#IN", "#TEST-", ""])
    def test_custom_prefix(self, prefix):
        """Test any prefix is kept verbatim with a 10 character suffix."""
        for _ in range(50):
            number = generate_order_number(prefix=prefix)
            assert number.startswith(prefix)
            assert len(number) == len(prefix) + 10
            assert set(number[len(prefix):]) <= ALPHANUMERIC

    def test_alphabet(self):
        """Test the alphabet is exactly [a-zA-Z0-9]."""
        assert len(ORDER_NUMBER_CHARACTERS) == 62
        assert set(ORDER_NUMBER_CHARACTERS) == ALPHANUMERIC

    def test_injected_rng_is_deterministic(self):
        """Test a seeded source gives repeatable numbers."""
        first = generate_order_number(rng=random.Random(1234))
        second = generate_order_number(rng=random.Random(1234))
        assert first == second

    def test_numbers_differ(self):
        """Test consecutive numbers are not repeated."""
        rng = random.Random(99)
        numbers = {generate_order_number(rng=rng) for _ in range(200)}
        assert len(numbers) == 200


class TestNameCsv:
    """Tests for name_csv."""

    def test_millisecond_precision(self):
        """Test file name includes milliseconds."""
        now = datetime(2024, 3, 1, 14, 5, 9, 7000, tzinfo=timezone.utc)
        assert name_csv(now) == "Orders_2024_03_01_14_05_09_007.csv"

    def test_converted_to_utc(self):
        """Test aware timestamps are rendered in UTC."""
        plus_two = timezone(timedelta(hours=2))
        now = datetime(2024, 3, 1, 16, 5, 0, tzinfo=plus_two)
        assert name_csv(now) == "Orders_2024_03_01_14_05_00_000.csv"

    def test_default_now(self):
        """Test default uses the current time."""
        name = name_csv()
        assert name.startswith("Orders_")
        assert name.endswith(".csv")
