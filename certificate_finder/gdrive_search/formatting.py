"""Human-readable rendering of Drive file metadata."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

UNKNOWN = "Unknown"
SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")


def format_size(size: int | str | None) -> str:
    """Format a byte count using 1024-based units with two decimals.

    Drive reports `size` as a decimal string and omits it for Google-native
    documents; both forms are accepted. Counts past the last unit stay in it.
    """

    if not size:
        return UNKNOWN
    try:
        value = int(size)
    except (TypeError, ValueError):
        return UNKNOWN
    if value <= 0:
        return UNKNOWN

    index = 0
    while index + 1 < len(SIZE_UNITS) and value >= 1024 ** (index + 1):
        index += 1
    # Decimal keeps counts beyond float range exact
    scaled = Decimal(value) / 1024**index
    return f"{scaled:.2f} {SIZE_UNITS[index]}"


def format_created_date(value: str | None) -> str:
    """Render an ISO-8601 timestamp as day/month/year without zero padding."""

    if not value:
        return UNKNOWN
    try:
        timestamp = datetime.fromisoformat(value)
    except ValueError:
        return UNKNOWN
    return f"{timestamp.day}/{timestamp.month}/{timestamp.year}"


__all__ = ["SIZE_UNITS", "UNKNOWN", "format_created_date", "format_size"]
