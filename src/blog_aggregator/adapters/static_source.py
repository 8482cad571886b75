"""
Static Record Source.

Serves canned collections from memory, for tests and offline runs.
"""

from __future__ import annotations

import copy
from typing import Iterable, List, Mapping, Optional

from blog_aggregator.domain.entities import RawRecord
from blog_aggregator.exceptions import TransportError


class StaticRecordSource:
    """Record source serving fixed collections by locator."""

    def __init__(
        self,
        collections: Optional[Mapping[str, List[RawRecord]]] = None,
        failing: Iterable[str] = (),
    ) -> None:
        """
        Initialize static source.

        Args:
            collections: Locator -> records
            failing: Locators that raise TransportError when fetched
        """
        self._collections = dict(collections or {})
        self._failing = set(failing)
        self.fetch_count = 0

    def fetch(self, locator: str) -> List[RawRecord]:
        """Return a copy of the collection stored under ``locator``."""
        self.fetch_count += 1
        if locator in self._failing:
            raise TransportError(f"Simulated failure for {locator}", locator=locator)
        if locator not in self._collections:
            raise TransportError(f"Unknown locator: {locator}", locator=locator)
        return copy.deepcopy(self._collections[locator])
