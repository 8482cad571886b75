"""
Filter values: a single scalar or an inclusive range.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple, Union

from blog_aggregator.filters.dates import parse_calendar_date

ScalarType = Union[str, int, float, bool, None]

SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class Scalar:
    """A single comparison value."""

    value: ScalarType


@dataclass(frozen=True)
class Range:
    """An ordered pair of bounds, both inclusive."""

    lo: ScalarType
    hi: ScalarType

    def as_dates(self) -> Tuple[date, date]:
        """Parse both bounds as calendar dates."""
        return parse_calendar_date(self.lo), parse_calendar_date(self.hi)


FilterValue = Union[Scalar, Range]
