"""
1inch calldata converter

Fetches AggregationRouterV6 swap calldata from the 1inch API and re-encodes
it into the canonical payload consumed by the settlement contract.

Usage:
    from oneinch_calldata import QuoteRequest, convert_swap_calldata

    request = QuoteRequest(
        chain_id="1",
        from_address="0x...",
        to_address="0x...",
        from_asset="0x...",
        to_asset="0x...",
        from_amount="1000000000000000000",
    )
    payload = convert_swap_calldata(request)
"""

from .types import (
    QuoteRequest,
    InstructionKind,
    SwapInstruction,
    UnoswapToInstruction,
    UnoswapTo2Instruction,
    DecodedInstruction,
)
from .errors import (
    ErrorCode,
    CalldataError,
    UpstreamError,
    RateLimitExceeded,
    MalformedResponse,
    UnknownSelector,
    MalformedInstruction,
    ConfigurationError,
)
from .protocols.oneinch import OneInchAPI, decode, encode
from .modules import CalldataConverter, convert_swap_calldata
from .config import config, get_config, reload_config, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Types
    "QuoteRequest",
    "InstructionKind",
    "SwapInstruction",
    "UnoswapToInstruction",
    "UnoswapTo2Instruction",
    "DecodedInstruction",
    # Errors
    "ErrorCode",
    "CalldataError",
    "UpstreamError",
    "RateLimitExceeded",
    "MalformedResponse",
    "UnknownSelector",
    "MalformedInstruction",
    "ConfigurationError",
    # Pipeline
    "OneInchAPI",
    "decode",
    "encode",
    "CalldataConverter",
    "convert_swap_calldata",
    # Config
    "config",
    "get_config",
    "reload_config",
    "setup_logging",
]
