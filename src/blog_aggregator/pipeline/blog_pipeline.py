"""
Blog Content Pipeline - Main Orchestrator.

Fetches posts and comments, joins them, then filters, sorts and serializes
the joined dataset. Each stage replaces the current dataset and returns the
pipeline so calls can be chained:

    pipeline.retrieve().filter(filters).sort().to_json()

A pipeline instance holds mutable state; build one per request.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from blog_aggregator.domain.entities import CompositeRecord, RawRecord
from blog_aggregator.domain.value_objects import FetchResult
from blog_aggregator.exceptions import TransportError
from blog_aggregator.filters.predicate import Filter, FilterSpec
from blog_aggregator.pipeline.joiner import join_posts_and_comments

logger = logging.getLogger(__name__)


class RecordSourceProtocol(Protocol):
    """Protocol for record sources."""

    def fetch(self, locator: str) -> List[RawRecord]:
        ...


class BlogContentPipeline:
    """Join, filter, sort and serialize blog posts with their comments."""

    def __init__(
        self,
        source: RecordSourceProtocol,
        posts_locator: str,
        comments_locator: str,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            source: Record source used for both collections
            posts_locator: Where the posts collection lives
            comments_locator: Where the comments collection lives
        """
        self.source = source
        self.posts_locator = posts_locator
        self.comments_locator = comments_locator

        self._records: List[CompositeRecord] = []
        self.posts_result: Optional[FetchResult] = None
        self.comments_result: Optional[FetchResult] = None

    @property
    def records(self) -> Tuple[CompositeRecord, ...]:
        """Current dataset."""
        return tuple(self._records)

    @property
    def degraded(self) -> bool:
        """True if either collection fell back to empty after a fetch failure."""
        return any(
            result is not None and result.degraded
            for result in (self.posts_result, self.comments_result)
        )

    def __len__(self) -> int:
        return len(self._records)

    def retrieve(self) -> "BlogContentPipeline":
        """
        Fetch both collections and rebuild the dataset from the join.

        A transport failure leaves that collection empty; the reason is kept
        on ``posts_result`` / ``comments_result``.

        Raises:
            InvalidRecordError: If a fetched record cannot be joined
        """
        start = time.perf_counter()

        self.posts_result = self._fetch(self.posts_locator, "posts")
        self.comments_result = self._fetch(self.comments_locator, "comments")

        joined = join_posts_and_comments(
            self.posts_result.records, self.comments_result.records
        )
        self._records = list(joined.values())

        logger.info(
            f"Retrieved {len(self._records)} posts "
            f"({self.comments_result.count} comments) "
            f"in {time.perf_counter() - start:.3f}s"
        )
        return self

    def filter(self, filters: Iterable[FilterSpec] = ()) -> "BlogContentPipeline":
        """
        Keep records that have at least one comment and pass every filter.

        Filters are applied in order and evaluation stops at the first one
        that fails. Calling this again narrows the current dataset further.

        Args:
            filters: Filter objects or (key, operator, value) triples

        Raises:
            InvalidFilterError: If a filter is malformed or cannot be evaluated
        """
        predicates = [Filter.coerce(spec) for spec in filters]
        input_count = len(self._records)

        self._records = [
            record
            for record in self._records
            if record.comment_count > 0
            and all(predicate.evaluate(record) for predicate in predicates)
        ]

        logger.info(
            f"Filtered {input_count} -> {len(self._records)} posts "
            f"with {len(predicates)} filters"
        )
        if predicates:
            logger.debug(f"Filters: {', '.join(str(p) for p in predicates)}")
        return self

    def sort(self) -> "BlogContentPipeline":
        """Sort the dataset by post id, ascending. The sort is stable."""
        self._records = sorted(self._records, key=lambda record: record.id)
        return self

    def to_list(self) -> List[Dict[str, Any]]:
        """Dataset as plain dicts in serialization order."""
        return [record.to_dict() for record in self._records]

    def to_json(self) -> str:
        """Serialize the dataset to a compact JSON array."""
        return json.dumps(self.to_list(), separators=(",", ":"))

    serialize = to_json

    def _fetch(self, locator: str, name: str) -> FetchResult:
        """Fetch one collection, degrading to empty on transport failure."""
        try:
            records = self.source.fetch(locator)
        except TransportError as e:
            logger.warning(f"Fetching {name} failed, continuing without them: {e}")
            return FetchResult.failure(locator, str(e))

        logger.debug(f"Fetched {len(records)} {name} from {locator}")
        return FetchResult.success(locator, records)
