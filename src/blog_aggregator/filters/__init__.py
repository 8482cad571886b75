"""
Filters Package - Record Predicates.

Filters:
    - Filter: (key, operator, value) predicate on a composite record
    - Operator: closed set of comparison operators
    - Scalar / Range: the two shapes a filter value can take

Design Principles:
    - Filters are immutable and validated on construction
    - Evaluation never mutates the record
    - Missing fields fail the filter instead of raising
"""

from blog_aggregator.filters.dates import parse_calendar_date
from blog_aggregator.filters.operators import Operator
from blog_aggregator.filters.predicate import Filter, FilterSpec
from blog_aggregator.filters.values import FilterValue, Range, Scalar

__all__ = [
    "Filter",
    "FilterSpec",
    "FilterValue",
    "Operator",
    "Range",
    "Scalar",
    "parse_calendar_date",
]
