"""
Emit-time normalizers for warehouse CSV values.

The warehouse ingests plain ASCII only, so every value goes through
transliterate_ascii() right before it is written. Normalizers are
idempotent: normalized(normalized(x)) == normalized(x).
"""
import re
import unicodedata
from datetime import datetime, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from influencer_orders.core.config import settings
from influencer_orders.core.errors import EncodingError


# Characters NFKD does not decompose into an ASCII base letter
_TRANSLIT_TABLE = str.maketrans({
    "ß": "ss",
    "ẞ": "SS",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ı": "i",
    "‘": "'",
    "’": "'",
    "‚": "'",
    "“": '"',
    "”": '"',
    "„": '"',
    "«": '"',
    "»": '"',
    "–": "-",
    "—": "-",
    "−": "-",
    "•": "*",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
    "©": "(C)",
    "®": "(R)",
    "™": "TM",
    "°": "",
})


def transliterate_ascii(value: Any) -> str:
    """
    Convert value to its string form and transliterate it to ASCII.

    Steps:
    1. None → "" ; bytes are decoded as strict UTF-8
    2. Table substitutions for letters without an NFKD decomposition (ß → ss)
    3. NFKD Unicode normalization (decompose accents)
    4. Drop anything still outside ASCII

    Examples:
        transliterate_ascii("Müller") → "Muller"
        transliterate_ascii("Straße") → "Strasse"
        transliterate_ascii(19.99) → "19.99"

    Raises:
        EncodingError: If the value is not valid UTF-8 or cannot be rendered
    """
    if value is None:
        return ""

    if isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"Value is not valid UTF-8: {e}") from e
    else:
        try:
            text = str(value)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot convert {type(value).__name__} to text: {e}") from e

    if text.isascii():
        return text

    text = text.translate(_TRANSLIT_TABLE)
    text = unicodedata.normalize("NFKD", text)

    return text.encode("ascii", "ignore").decode("ascii")


def digits_only(value: Optional[Any]) -> Optional[str]:
    """
    Strip every non-digit character.

    Returns None for a missing value so callers can tell "absent" from
    "present but empty".

    Examples:
        digits_only("+1 (555) 123-4567") → "15551234567"
    """
    if value is None:
        return None
    return re.sub(r"[^0-9]", "", str(value))


def format_order_date(value: Optional[datetime], fmt: Optional[str] = None) -> Optional[str]:
    """
    Format a timestamp for the warehouse CSV ("MM/DD/YYYY HH:MM", 24-hour).

    Timezone-aware values are converted to CSV_TIMEZONE first; naive values
    are formatted as given.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(_csv_timezone())
    return value.strftime(fmt or settings.CSV_DATE_FORMAT)


def _csv_timezone() -> tzinfo:
    # UTC needs no tz database
    if settings.CSV_TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.CSV_TIMEZONE)


def full_name(first_name: Optional[Any], last_name: Optional[Any]) -> str:
    """Join first and last name with a single space (missing parts are blank)."""
    first = "" if first_name is None else str(first_name)
    last = "" if last_name is None else str(last_name)
    return f"{first} {last}"
