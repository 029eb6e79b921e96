"""Lenient ISO date parsing shared by filters and aggregations."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Return the calendar date encoded in ``value`` or None when unparseable.

    Args:
        value: ISO date (``YYYY-MM-DD``) or ISO datetime string. A trailing ``Z``
            is accepted as UTC.

    Returns:
        Optional[date]: Parsed calendar date, or None for empty or malformed input.
    """

    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


__all__ = ["parse_iso_date"]
