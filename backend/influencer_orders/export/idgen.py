"""
Order number and export file name generation.

Features:
- generate_order_number(prefix): prefix + 10 random characters from [a-zA-Z0-9]
- name_csv(now): "Orders_YYYY_MM_DD_HH_MM_SS_mmm.csv" in UTC

Order numbers are not checked for collisions (62^10 possible suffixes);
enforcing uniqueness belongs to the order repository.
"""
import random
import string
from datetime import datetime, timezone
from typing import Optional

from influencer_orders.core.config import settings


ORDER_NUMBER_CHARACTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits
ORDER_NUMBER_LENGTH = 10


def generate_order_number(prefix: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """
    Generate an order number.

    Args:
        prefix: Prefix for the order number (default ORDER_NUMBER_PREFIX, "#IN")
        rng: Randomness source with a choice() method; tests pass a seeded
            random.Random for deterministic numbers

    Returns:
        Order number, e.g. "#INa8Fk20QxZp"
    """
    if prefix is None:
        prefix = settings.ORDER_NUMBER_PREFIX
    source = rng or random
    suffix = "".join(source.choice(ORDER_NUMBER_CHARACTERS) for _ in range(ORDER_NUMBER_LENGTH))
    return prefix + suffix


def name_csv(now: Optional[datetime] = None) -> str:
    """
    Generate the name for an order CSV from the current UTC time.

    Args:
        now: Timestamp to use instead of the current time

    Returns:
        File name, e.g. "Orders_2024_03_01_14_05_00_123.csv"
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    millis = now.microsecond // 1000
    return f"Orders_{now.strftime('%Y_%m_%d_%H_%M_%S')}_{millis:03d}.csv"
