"""
HTTP Record Source.

Fetches a JSON array of records with ``requests``. Network errors and
non-2xx responses are retried through the ErrorHandler; whatever is still
failing afterwards is reported as a TransportError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from blog_aggregator.domain.entities import RawRecord
from blog_aggregator.exceptions import TransportError
from blog_aggregator.resilience.error_handler import (
    ErrorHandler,
    RetryConfig,
    RetryExhausted,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class HttpRecordSource:
    """Record source backed by JSON HTTP endpoints."""

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        error_handler: Optional[ErrorHandler] = None,
        session: Optional[requests.Session] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize HTTP source.

        Args:
            timeout_seconds: Per-request timeout
            error_handler: Retry policy (3 attempts, 0.1s base delay if None)
            session: requests session to reuse, created (and owned) if None
            headers: Extra headers merged over the JSON defaults
        """
        self.timeout_seconds = timeout_seconds
        self.error_handler = error_handler or ErrorHandler(
            RetryConfig(retryable_exceptions=(requests.RequestException,))
        )
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    def fetch(self, locator: str) -> List[RawRecord]:
        """
        GET ``locator`` and decode a JSON array of records.

        Raises:
            TransportError: On network failure, non-2xx status or a body
                that is not a JSON array
        """
        try:
            response = self.error_handler.retry(
                lambda: self._get(locator),
                operation_name=f"GET {locator}",
            )
        except RetryExhausted as e:
            cause = e.__cause__
            raise TransportError(
                f"HTTP request failed: {cause or e}",
                locator=locator,
                status_code=_status_code(cause),
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"Response from {locator} is not valid JSON",
                locator=locator,
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, list):
            raise TransportError(
                f"Expected a JSON array from {locator}, got {type(payload).__name__}",
                locator=locator,
                status_code=response.status_code,
            )

        logger.debug(f"GET {locator}: {len(payload)} records")
        return payload

    def _get(self, locator: str) -> requests.Response:
        response = self.session.get(
            locator, headers=self.headers, timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response

    def close(self) -> None:
        """Close the session if this source created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpRecordSource":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _status_code(error: Any) -> Optional[int]:
    response = getattr(error, "response", None)
    return getattr(response, "status_code", None)
