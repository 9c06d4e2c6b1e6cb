"""
Exception definitions for the calldata converter
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for calldata conversion

    1xxx - Upstream (1inch API) errors
    2xxx - Instruction decoding errors
    9xxx - Configuration errors
    """
    # Upstream errors
    UPSTREAM_HTTP_ERROR = "1001"
    UPSTREAM_TRANSPORT_FAILED = "1002"
    UPSTREAM_RATE_LIMITED = "1003"
    UPSTREAM_MALFORMED_RESPONSE = "1004"

    # Decoding errors
    UNKNOWN_SELECTOR = "2001"
    MALFORMED_INSTRUCTION = "2002"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class CalldataError(Exception):
    """
    Base exception for all calldata converter errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed on a later invocation
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the operation should be retried by the caller"""
        return self.recoverable


class UpstreamError(CalldataError):
    """
    1inch API call failed - not retried

    Raised when:
    - The API answers with a non-2xx status (429 is handled by the retry loop)
    - The request cannot be sent or times out
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UPSTREAM_HTTP_ERROR,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @classmethod
    def http_error(cls, status_code: int, upstream_message: str, body: Optional[str] = None) -> "UpstreamError":
        return cls(
            f"Call to 1inch swap API failed: HTTP {status_code}: {upstream_message}",
            ErrorCode.UPSTREAM_HTTP_ERROR,
            status_code=status_code,
            body=body,
        )

    @classmethod
    def transport_failed(cls, endpoint: str, error: Exception) -> "UpstreamError":
        return cls(
            f"Call to 1inch swap API failed: {endpoint}: {error}",
            ErrorCode.UPSTREAM_TRANSPORT_FAILED,
            original_error=error,
        )


class RateLimitExceeded(CalldataError):
    """
    Every attempt was throttled with HTTP 429

    Recoverable at a higher level (a later invocation may succeed);
    the client itself does not retry past its attempt cap.
    """

    def __init__(
        self,
        message: str,
        attempts: int,
        last_error: Optional[UpstreamError] = None,
    ):
        super().__init__(
            message,
            ErrorCode.UPSTREAM_RATE_LIMITED,
            recoverable=True,
            original_error=last_error,
            details={
                "attempts": attempts,
                "body": last_error.body if last_error else None,
            },
        )
        self.attempts = attempts
        self.last_error = last_error

    @property
    def status_code(self) -> int:
        return 429

    @classmethod
    def exhausted(cls, attempts: int, last_error: Optional[UpstreamError] = None) -> "RateLimitExceeded":
        return cls(
            f"Call to 1inch swap API failed: Rate-limited after {attempts} attempts",
            attempts=attempts,
            last_error=last_error,
        )


class MalformedResponse(CalldataError):
    """
    Successful HTTP response without usable transaction data

    Raised when:
    - The body is not JSON
    - The body lacks tx.data
    - tx.data is not a hex string
    """

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.UPSTREAM_MALFORMED_RESPONSE,
            recoverable=False,
            details={"body": body},
        )
        self.body = body

    @classmethod
    def missing_tx_data(cls, body: Optional[str] = None) -> "MalformedResponse":
        return cls("1inch response is missing tx.data", body=body)

    @classmethod
    def invalid_json(cls, body: Optional[str] = None) -> "MalformedResponse":
        return cls("1inch response is not valid JSON", body=body)

    @classmethod
    def invalid_hex(cls, value: str) -> "MalformedResponse":
        return cls(f"1inch tx.data is not a hex string: {value[:66]!r}")


class UnknownSelector(CalldataError):
    """
    Leading 4 bytes match none of the supported instruction shapes
    """

    def __init__(self, selector: bytes):
        super().__init__(
            f"Unknown instruction selector: 0x{selector.hex()}",
            ErrorCode.UNKNOWN_SELECTOR,
            recoverable=False,
            details={"selector": f"0x{selector.hex()}"},
        )
        self.selector = selector


class MalformedInstruction(CalldataError):
    """
    Selector is known but the argument bytes do not fit its layout
    """

    def __init__(
        self,
        message: str,
        selector: Optional[bytes] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.MALFORMED_INSTRUCTION,
            recoverable=False,
            original_error=original_error,
            details={"selector": f"0x{selector.hex()}" if selector else None},
        )
        self.selector = selector

    @classmethod
    def too_short(cls, length: int) -> "MalformedInstruction":
        return cls(f"Instruction is {length} bytes, shorter than a 4-byte selector")

    @classmethod
    def bad_arguments(cls, name: str, selector: bytes, error: Exception) -> "MalformedInstruction":
        return cls(
            f"Cannot decode {name} arguments: {error}",
            selector=selector,
            original_error=error,
        )


class ConfigurationError(CalldataError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str, hint: Optional[str] = None) -> "ConfigurationError":
        message = f"Missing required configuration: {param}"
        if hint:
            message = f"{message}. {hint}"
        return cls(message, ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)
