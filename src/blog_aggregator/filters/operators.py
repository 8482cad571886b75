"""
Filter Operators.

The closed set of comparison operators a Filter may use. Every member is
bound to its own evaluation function in ``_EVALUATORS``.

Semantics:
    - EQUALS: loose equality, numbers and numeric strings compare by value
    - BETWEEN: inclusive calendar date range
    - GT / LT / GTE / LTE: number vs number or string vs string only
"""

from __future__ import annotations

import operator as op
import re
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from blog_aggregator.exceptions import InvalidFilterError
from blog_aggregator.filters.dates import parse_calendar_date
from blog_aggregator.filters.values import FilterValue, Range, Scalar

Number = Union[int, float]

# Numeric strings as understood by loose equality ("1", " 2.5", "1e3")
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


class Operator(str, Enum):
    """Comparison operator of a filter."""

    EQUALS = "="
    BETWEEN = "between"
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="

    @classmethod
    def parse(cls, raw: Any) -> "Operator":
        """
        Resolve an operator from its tag ("=", ">=", "between") or name.

        Raises:
            InvalidFilterError: If the operator is not supported
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                member = cls.__members__.get(raw.strip().upper())
                if member is not None:
                    return member
        raise InvalidFilterError(f"Unsupported operator: {raw!r}")

    @property
    def takes_range(self) -> bool:
        return self is Operator.BETWEEN

    def evaluate(self, actual: Any, value: FilterValue) -> bool:
        """Apply this operator to a record value and the filter value."""
        return _EVALUATORS[self](actual, value)


def _as_number(value: Any) -> Optional[Number]:
    """Numeric view of a value for loose equality, None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_STRING.match(value):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _equals(actual: Any, value: FilterValue) -> bool:
    expected = _scalar(value, Operator.EQUALS)
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    left, right = _as_number(actual), _as_number(expected)
    if left is not None and right is not None:
        return left == right
    return actual == expected


def _between(actual: Any, value: FilterValue) -> bool:
    if not isinstance(value, Range):
        raise InvalidFilterError("Between operator requires a range of 2 values")
    lo, hi = value.as_dates()
    return lo <= parse_calendar_date(actual) <= hi


def _ordering(compare: Callable[[Any, Any], bool], operator: Operator):
    def evaluate(actual: Any, value: FilterValue) -> bool:
        expected = _scalar(value, operator)
        comparable = (_is_number(actual) and _is_number(expected)) or (
            isinstance(actual, str) and isinstance(expected, str)
        )
        if not comparable:
            raise InvalidFilterError(
                f"Cannot compare {type(actual).__name__} with "
                f"{type(expected).__name__} using '{operator.value}'"
            )
        return compare(actual, expected)

    return evaluate


def _scalar(value: FilterValue, operator: Operator) -> Any:
    if not isinstance(value, Scalar):
        raise InvalidFilterError(
            f"Operator '{operator.value}' requires a single value"
        )
    return value.value


_EVALUATORS: Dict[Operator, Callable[[Any, FilterValue], bool]] = {
    Operator.EQUALS: _equals,
    Operator.BETWEEN: _between,
    Operator.GT: _ordering(op.gt, Operator.GT),
    Operator.LT: _ordering(op.lt, Operator.LT),
    Operator.GTE: _ordering(op.ge, Operator.GTE),
    Operator.LTE: _ordering(op.le, Operator.LTE),
}
