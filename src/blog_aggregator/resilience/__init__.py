"""
Resilience Package - Retrying Transient Failures.

    - ErrorHandler: retry with exponential backoff
    - RetryConfig: attempts, delays and which exceptions are retried
    - RetryExhausted: raised once every attempt has failed
"""

from blog_aggregator.resilience.error_handler import (
    ErrorHandler,
    RetryConfig,
    RetryExhausted,
)

__all__ = ["ErrorHandler", "RetryConfig", "RetryExhausted"]
