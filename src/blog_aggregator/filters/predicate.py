"""
Filter Predicate.

A Filter is an immutable (key, operator, value) triple evaluated against a
composite record. Construction validates the triple so malformed filters
fail before any record is touched:

    - unknown operators
    - BETWEEN without exactly two bounds, or with bounds that are not dates
    - single-value operators given a range
    - values that are not scalars

A record that has no field named ``key`` fails the filter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence, Union

from blog_aggregator.domain.entities import CompositeRecord
from blog_aggregator.exceptions import InvalidFilterError
from blog_aggregator.filters.operators import Operator
from blog_aggregator.filters.values import SCALAR_TYPES, FilterValue, Range, Scalar

FilterSpec = Union["Filter", Sequence[Any], Mapping]


@dataclass(frozen=True)
class Filter:
    """Predicate on a single field of a composite record."""

    key: str
    operator: Operator
    value: FilterValue

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidFilterError(f"Filter key must be a non-empty string: {self.key!r}")

        operator = Operator.parse(self.operator)
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "value", self._wrap_value(operator, self.value))

        if operator.takes_range:
            # Fail fast on unparseable bounds
            self.value.as_dates()

    @staticmethod
    def _wrap_value(operator: Operator, value: Any) -> FilterValue:
        if operator.takes_range:
            if isinstance(value, Range):
                return value
            if isinstance(value, Scalar) or not isinstance(value, (list, tuple)):
                raise InvalidFilterError(
                    "Between operator requires array with 2 values"
                )
            if len(value) != 2:
                raise InvalidFilterError(
                    f"Between operator requires array with 2 values, got {len(value)}"
                )
            return Range(value[0], value[1])

        if isinstance(value, Range):
            raise InvalidFilterError(
                f"Operator '{operator.value}' requires a single value, got a range"
            )
        if isinstance(value, Scalar):
            return value
        if not isinstance(value, SCALAR_TYPES):
            raise InvalidFilterError(
                f"Operator '{operator.value}' requires a scalar value, "
                f"got {type(value).__name__}"
            )
        return Scalar(value)

    @classmethod
    def from_triple(cls, triple: Sequence[Any]) -> "Filter":
        """Build a filter from a (key, operator, value) sequence."""
        if isinstance(triple, (str, bytes)) or len(triple) != 3:
            raise InvalidFilterError(
                f"Filter must be a (key, operator, value) triple: {triple!r}"
            )
        key, operator, value = triple
        return cls(key, operator, value)

    @classmethod
    def coerce(cls, spec: FilterSpec) -> "Filter":
        """Accept a Filter, a (key, operator, value) triple or a mapping."""
        if isinstance(spec, Filter):
            return spec
        if isinstance(spec, Mapping):
            try:
                return cls(spec["key"], spec["operator"], spec["value"])
            except KeyError as e:
                raise InvalidFilterError(f"Filter mapping is missing {e}") from e
        if isinstance(spec, (list, tuple)):
            return cls.from_triple(spec)
        raise InvalidFilterError(f"Cannot build a filter from {spec!r}")

    def evaluate(self, record: Union[CompositeRecord, Mapping]) -> bool:
        """
        Evaluate the filter against a record.

        Args:
            record: Composite record (or plain mapping) to test

        Returns:
            True if the record satisfies the filter, False otherwise,
            including when the record has no field named ``key``

        Raises:
            InvalidFilterError: If the record value cannot be compared
        """
        if isinstance(record, CompositeRecord):
            if not record.has_field(self.key):
                return False
            actual = record.field_value(self.key)
        else:
            if self.key not in record:
                return False
            actual = record[self.key]

        return self.operator.evaluate(actual, self.value)

    def __str__(self) -> str:
        if isinstance(self.value, Range):
            shown = f"[{self.value.lo!r}, {self.value.hi!r}]"
        else:
            shown = repr(self.value.value)
        return f"{self.key} {self.operator.value} {shown}"
