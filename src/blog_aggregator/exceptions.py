"""
Exception Hierarchy for the Blog Aggregator.

Error policy:
    - TransportError: raised by record sources, downgraded to an empty
      collection at the pipeline boundary
    - InvalidRecordError: malformed upstream data, propagates from retrieve()
    - InvalidFilterError: caller/programming error, propagates from filter()
"""

from __future__ import annotations

from typing import Optional


class BlogAggregatorError(Exception):
    """Base class for all blog aggregator errors."""


class TransportError(BlogAggregatorError):
    """Raised when a record source cannot deliver a collection."""

    def __init__(
        self,
        message: str,
        locator: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locator = locator
        self.status_code = status_code


class InvalidRecordError(BlogAggregatorError):
    """Raised when a fetched record lacks the fields the join requires."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.index = index
        self.field = field


class InvalidFilterError(BlogAggregatorError):
    """Raised when a filter is malformed or cannot be evaluated."""
