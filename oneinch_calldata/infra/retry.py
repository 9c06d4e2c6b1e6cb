"""
Retry Logic Helper Module

Retries upstream calls that were throttled with HTTP 429.
Includes structured logging with correlation IDs for request tracing.
"""

import logging
import time
import uuid
import contextvars
from typing import Callable, Optional, TypeVar

from ..errors import UpstreamError, RateLimitExceeded
from ..config import config as global_config

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Context variable for correlation ID (thread-safe)
_correlation_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    'correlation_id', default=None
)


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for request tracing."""
    return uuid.uuid4().hex[:12]


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: Optional[str]) -> contextvars.Token:
    """Set the correlation ID in context. Returns token for reset."""
    return _correlation_id.set(correlation_id)


class CorrelationContext:
    """
    Context manager for correlation ID scoping.

    Usage:
        with CorrelationContext("calldata") as cid:
            logger.info(f"[{cid}] Starting conversion")
            payload = converter.run(request)
    """

    def __init__(self, prefix: Optional[str] = None):
        self.correlation_id = generate_correlation_id()
        if prefix:
            self.correlation_id = f"{prefix}_{self.correlation_id}"
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> str:
        self._token = set_correlation_id(self.correlation_id)
        return self.correlation_id

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._token is not None:
            _correlation_id.reset(self._token)


def _log_with_correlation(
    level: int,
    message: str,
    operation_name: str,
    attempt: Optional[int] = None,
    max_attempts: Optional[int] = None,
    **extra
):
    """
    Log message with correlation ID and structured context.

    Args:
        level: Logging level (logging.INFO, logging.WARNING, etc.)
        message: Log message
        operation_name: Name of the operation being executed
        attempt: Current attempt number (1-indexed)
        max_attempts: Maximum number of attempts
        **extra: Additional context fields
    """
    cid = get_correlation_id()

    parts = []
    if cid:
        parts.append(f"[{cid}]")
    parts.append(f"[{operation_name}]")
    if attempt is not None and max_attempts is not None:
        parts.append(f"[{attempt}/{max_attempts}]")
    parts.append(message)

    extra_context = {
        "correlation_id": cid,
        "operation": operation_name,
        "attempt": attempt,
        "max_attempts": max_attempts,
        **extra
    }

    logger.log(level, " ".join(parts), extra=extra_context)


def execute_with_rate_limit_retry(
    operation: Callable[[], T],
    operation_name: str,
    max_attempts: Optional[int] = None,
    retry_delay: Optional[float] = None,
) -> T:
    """
    Execute an upstream call, retrying only when it is throttled.

    An UpstreamError with status 429 waits a fixed retry_delay and tries
    again, up to max_attempts calls in total. Every other exception
    propagates on the first occurrence.

    Args:
        operation: Callable performing one attempt
        operation_name: Name for logging purposes
        max_attempts: Total attempts (defaults to config.oneinch.max_attempts)
        retry_delay: Seconds between attempts (defaults to config.oneinch.retry_delay)

    Returns:
        The operation's result

    Raises:
        RateLimitExceeded: If every attempt was throttled
    """
    max_attempts = max_attempts if max_attempts is not None else global_config.oneinch.max_attempts
    retry_delay = retry_delay if retry_delay is not None else global_config.oneinch.retry_delay
    last_error: Optional[UpstreamError] = None

    for attempt in range(1, max_attempts + 1):
        try:
            result = operation()
        except UpstreamError as e:
            if not e.is_rate_limited:
                raise
            last_error = e
            if attempt < max_attempts:
                _log_with_correlation(
                    logging.WARNING,
                    f"Rate limited, retrying in {retry_delay}s",
                    operation_name,
                    attempt,
                    max_attempts,
                    error_type="rate_limited",
                )
                time.sleep(retry_delay)
            continue

        if attempt > 1:
            _log_with_correlation(
                logging.INFO,
                f"Succeeded after {attempt} attempts",
                operation_name,
                attempt,
                max_attempts,
            )
        return result

    _log_with_correlation(
        logging.ERROR,
        f"Rate limited on all {max_attempts} attempts",
        operation_name,
        max_attempts,
        max_attempts,
        error_type="fatal",
    )
    raise RateLimitExceeded.exhausted(max_attempts, last_error)
