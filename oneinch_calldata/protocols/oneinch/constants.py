"""
1inch AggregationRouterV6 constants

Function selectors and argument layouts of the router entry points
whose calldata can be converted.
"""

from typing import Tuple

from web3 import Web3

SELECTOR_SIZE = 4

# Function selectors (first 4 bytes of keccak256 of the signature)
SWAP_SELECTOR = bytes.fromhex("07ed2379")
UNOSWAP_TO_SELECTOR = bytes.fromhex("e2c95c82")
UNOSWAP_TO_2_SELECTOR = bytes.fromhex("ea76dddf")

# swap(address executor, SwapDescription desc, bytes data)
SWAP_DESCRIPTION_TYPE = "(address,address,address,address,uint256,uint256,uint256)"
SWAP_ARG_TYPES: Tuple[str, ...] = ("address", SWAP_DESCRIPTION_TYPE, "bytes")

# Address-typed arguments are packed into uint256 in the v6 router
# unoswapTo(to, token, amount, minReturn, dex)
UNOSWAP_TO_ARG_TYPES: Tuple[str, ...] = ("uint256",) * 5
# unoswapTo2(to, token, amount, minReturn, dex, dex2)
UNOSWAP_TO_2_ARG_TYPES: Tuple[str, ...] = ("uint256",) * 6

# Canonical payload layouts (after the selector)
SWAP_CANONICAL_TYPES: Tuple[str, ...] = ("address", "bytes")
UNOSWAP_TO_CANONICAL_TYPES: Tuple[str, ...] = ("uint256",)
UNOSWAP_TO_2_CANONICAL_TYPES: Tuple[str, ...] = ("uint256", "uint256")


def selector_from_hex(value: str) -> bytes:
    """Parse a 0x-prefixed or bare selector, any letter case"""
    selector = Web3.to_bytes(hexstr=value)
    if len(selector) != SELECTOR_SIZE:
        raise ValueError(f"Selector must be {SELECTOR_SIZE} bytes, got {len(selector)}: {value!r}")
    return selector
