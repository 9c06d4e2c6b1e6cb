"""
1inch Protocol

Fetches AggregationRouterV6 calldata from the 1inch swap API and converts it
into the canonical payload consumed by the settlement contract.

Usage:
    from oneinch_calldata.protocols.oneinch import OneInchAPI, decode, encode

    with OneInchAPI() as api:
        raw = api.fetch_raw_instruction(request)

    payload = encode(decode(raw))
"""

from .api import OneInchAPI
from .decoder import decode, decode_hex, INSTRUCTION_LAYOUTS, InstructionLayout
from .encoder import encode
from .constants import (
    SWAP_SELECTOR,
    UNOSWAP_TO_SELECTOR,
    UNOSWAP_TO_2_SELECTOR,
    selector_from_hex,
)

__all__ = [
    "OneInchAPI",
    "decode",
    "decode_hex",
    "encode",
    "INSTRUCTION_LAYOUTS",
    "InstructionLayout",
    "SWAP_SELECTOR",
    "UNOSWAP_TO_SELECTOR",
    "UNOSWAP_TO_2_SELECTOR",
    "selector_from_hex",
]
