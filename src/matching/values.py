"""
Tolerant value parsing for stored preference and listing data.

Stored JSON may predate validation, so every helper returns None
(or an empty container) instead of raising on bad input.
"""

import math
from datetime import date, datetime
from typing import Any


def to_number(value: Any) -> float | None:
    """
    Parse a numeric value.

    Args:
        value: int, float, or numeric string like "150,000"

    Returns:
        Float value or None if not numeric

    Examples:
        >>> to_number(150000)
        150000.0
        >>> to_number("150,000")
        150000.0
        >>> to_number("negotiable")
        None
        >>> to_number("NaN")
        None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def to_date(value: Any) -> date | None:
    """
    Parse a calendar date.

    Accepts date, datetime or ISO 8601 strings ("2025-03-01",
    "2025-03-01T00:00:00Z"). Times are dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def as_mapping(value: Any) -> dict:
    """Return value if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_str_list(value: Any) -> list[str]:
    """Return the string items of a list, or an empty list."""
    if not isinstance(value, (list, tuple, set)):
        return []
    return [item for item in value if isinstance(item, str)]
