"""
Infrastructure layer for the calldata converter

Provides:
- execute_with_rate_limit_retry: bounded fixed-delay retry on HTTP 429
- CorrelationContext: correlation ID scoping for log lines
"""

from .retry import (
    execute_with_rate_limit_retry,
    CorrelationContext,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "execute_with_rate_limit_retry",
    "CorrelationContext",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
