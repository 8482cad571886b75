"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of an
operation but have no identity of their own.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class FetchResult(BaseModel):
    """
    Outcome of fetching one collection from a record source.

    A failed fetch keeps an empty record list so the pipeline can continue,
    while ``error`` records why the data is missing.
    """

    locator: str
    records: List[Any] = Field(default_factory=list)
    error: Optional[str] = Field(
        default=None, description="Failure reason when the fetch degraded"
    )

    model_config = {"frozen": True}

    @classmethod
    def success(cls, locator: str, records: List[Any]) -> "FetchResult":
        return cls(locator=locator, records=list(records))

    @classmethod
    def failure(cls, locator: str, reason: str) -> "FetchResult":
        return cls(locator=locator, records=[], error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def degraded(self) -> bool:
        """True when the fetch failed and ``records`` is the empty fallback."""
        return self.error is not None

    @property
    def count(self) -> int:
        return len(self.records)
