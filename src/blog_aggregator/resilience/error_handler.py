"""
Error Handler - Retry with Exponential Backoff.

Used by record sources to ride out transient transport failures before
reporting them.

Design Notes:
    - Only exceptions listed in ``retryable_exceptions`` are retried
    - Anything else propagates on the first attempt
    - Exhaustion raises RetryExhausted chained to the last failure
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhausted(Exception):
    """Raised when all retry attempts are exhausted."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


@dataclass
class RetryConfig:
    """Configuration for retry logic."""
    max_attempts: int = 3
    base_delay_seconds: float = 0.1
    max_delay_seconds: float = 5.0
    exponential_base: float = 2.0
    retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,)


class ErrorHandler:
    """Runs callables with bounded retries."""

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize error handler.

        Args:
            retry_config: Configuration for retry logic
            sleep: Delay function, replaceable in tests
        """
        self.retry_config = retry_config or RetryConfig()
        self._sleep = sleep

    def retry(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
    ) -> T:
        """
        Execute function with retry and exponential backoff.

        Args:
            func: Function to execute
            operation_name: Name for logging

        Returns:
            Result of successful execution

        Raises:
            RetryExhausted: When all attempts fail
        """
        max_attempts = max(1, self.retry_config.max_attempts)
        last_exception: Optional[BaseException] = None

        for attempt in range(1, max_attempts + 1):
            try:
                result = func()
                if attempt > 1:
                    logger.info(f"{operation_name} succeeded on attempt {attempt}")
                return result

            except self.retry_config.retryable_exceptions as e:
                last_exception = e
                if attempt < max_attempts:
                    delay = self._calculate_delay(attempt)
                    logger.warning(
                        f"{operation_name} failed (attempt {attempt}/{max_attempts}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    self._sleep(delay)
                else:
                    logger.error(f"{operation_name} failed after {attempt} attempts: {e}")

        raise RetryExhausted(
            f"{operation_name} failed after {max_attempts} attempts: {last_exception}",
            attempts=max_attempts,
        ) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff."""
        delay = self.retry_config.base_delay_seconds * (
            self.retry_config.exponential_base ** (attempt - 1)
        )
        return min(delay, self.retry_config.max_delay_seconds)
