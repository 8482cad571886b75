"""
Calendar date parsing for date-range filters.

Accepts ``date``/``datetime`` objects and ISO 8601 strings. Datetimes are
truncated to their calendar date so ranges compare whole days.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from blog_aggregator.exceptions import InvalidFilterError


def parse_calendar_date(value: Any) -> date:
    """
    Parse a value as a calendar date.

    Args:
        value: date, datetime or ISO formatted string

    Returns:
        The calendar date

    Raises:
        InvalidFilterError: If the value is not a parseable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidFilterError(
            f"Expected a date, got {type(value).__name__}: {value!r}"
        )

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidFilterError(f"Not a parseable date: {value!r}") from e
