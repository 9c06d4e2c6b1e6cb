"""
Canonical payload encoder

Re-encodes a decoded router instruction as
selector ++ abi.encode(retained fields), the form the settlement
contract consumes.
"""

from typing import Callable, Dict, Type

from eth_abi import encode as abi_encode

from ...types import (
    SwapInstruction,
    UnoswapToInstruction,
    UnoswapTo2Instruction,
    DecodedInstruction,
)
from .constants import (
    SWAP_CANONICAL_TYPES,
    UNOSWAP_TO_CANONICAL_TYPES,
    UNOSWAP_TO_2_CANONICAL_TYPES,
)


def _encode_swap(instruction: SwapInstruction) -> bytes:
    return instruction.selector + abi_encode(
        list(SWAP_CANONICAL_TYPES),
        [instruction.executor, instruction.data],
    )


def _encode_unoswap_to(instruction: UnoswapToInstruction) -> bytes:
    return instruction.selector + abi_encode(
        list(UNOSWAP_TO_CANONICAL_TYPES),
        [instruction.dex],
    )


def _encode_unoswap_to_2(instruction: UnoswapTo2Instruction) -> bytes:
    return instruction.selector + abi_encode(
        list(UNOSWAP_TO_2_CANONICAL_TYPES),
        [instruction.dex, instruction.dex2],
    )


_ENCODERS: Dict[Type, Callable[..., bytes]] = {
    SwapInstruction: _encode_swap,
    UnoswapToInstruction: _encode_unoswap_to,
    UnoswapTo2Instruction: _encode_unoswap_to_2,
}


def encode(instruction: DecodedInstruction) -> bytes:
    """
    Encode a decoded instruction into its canonical payload

    Args:
        instruction: Output of the decoder

    Returns:
        Selector followed by the ABI encoding of the retained fields

    Raises:
        TypeError: If the instruction is not one of the supported shapes
    """
    encoder = _ENCODERS.get(type(instruction))
    if encoder is None:
        raise TypeError(f"Unsupported instruction type: {type(instruction).__name__}")
    return encoder(instruction)
