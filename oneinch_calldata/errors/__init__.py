"""
Error definitions for the calldata converter
"""

from .exceptions import (
    ErrorCode,
    CalldataError,
    UpstreamError,
    RateLimitExceeded,
    MalformedResponse,
    UnknownSelector,
    MalformedInstruction,
    ConfigurationError,
)

__all__ = [
    "ErrorCode",
    "CalldataError",
    "UpstreamError",
    "RateLimitExceeded",
    "MalformedResponse",
    "UnknownSelector",
    "MalformedInstruction",
    "ConfigurationError",
]
