"""Lenient number parsing for spreadsheet-style values."""

import math
import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_NOT_A_NUMBER = {"", "N/A", "NA", "-"}


def parse_currency(value: str | None) -> float | None:
    """Parse values like ``$12,345`` or ``12345.50``.

    Returns None for blank, ``N/A`` and anything else that is not a number.
    """
    if value is None:
        return None
    cleaned = value.replace("$", "").replace(",", "").strip()
    if cleaned.upper() in _NOT_A_NUMBER:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_leading_int(value: str | None) -> int | None:
    """Parse the integer at the start of a value, so ``"90 HP"`` gives 90."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))
