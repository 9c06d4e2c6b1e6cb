"""
1inch router calldata decoder

Static selector table: each supported entry point maps to its fixed
argument layout and a builder that keeps only the fields the settlement
contract needs. Calldata with any other selector is rejected.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Any

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from web3 import Web3

from ...types import (
    InstructionKind,
    SwapInstruction,
    UnoswapToInstruction,
    UnoswapTo2Instruction,
    DecodedInstruction,
)
from ...errors import UnknownSelector, MalformedInstruction
from .constants import (
    SELECTOR_SIZE,
    SWAP_SELECTOR,
    UNOSWAP_TO_SELECTOR,
    UNOSWAP_TO_2_SELECTOR,
    SWAP_ARG_TYPES,
    UNOSWAP_TO_ARG_TYPES,
    UNOSWAP_TO_2_ARG_TYPES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstructionLayout:
    """Argument layout and field extraction for one router entry point"""
    kind: InstructionKind
    arg_types: Tuple[str, ...]
    build: Callable[[bytes, Tuple[Any, ...]], DecodedInstruction]


def _build_swap(selector: bytes, args: Tuple[Any, ...]) -> SwapInstruction:
    # args: (executor, desc, data); desc is dropped
    executor, _desc, data = args
    return SwapInstruction(
        selector=selector,
        executor=Web3.to_checksum_address(executor),
        data=bytes(data),
    )


def _build_unoswap_to(selector: bytes, args: Tuple[Any, ...]) -> UnoswapToInstruction:
    return UnoswapToInstruction(selector=selector, dex=args[4])


def _build_unoswap_to_2(selector: bytes, args: Tuple[Any, ...]) -> UnoswapTo2Instruction:
    return UnoswapTo2Instruction(selector=selector, dex=args[4], dex2=args[5])


INSTRUCTION_LAYOUTS: Dict[bytes, InstructionLayout] = {
    SWAP_SELECTOR: InstructionLayout(InstructionKind.SWAP, SWAP_ARG_TYPES, _build_swap),
    UNOSWAP_TO_SELECTOR: InstructionLayout(InstructionKind.UNOSWAP_TO, UNOSWAP_TO_ARG_TYPES, _build_unoswap_to),
    UNOSWAP_TO_2_SELECTOR: InstructionLayout(
        InstructionKind.UNOSWAP_TO_2, UNOSWAP_TO_2_ARG_TYPES, _build_unoswap_to_2
    ),
}


def decode(raw: bytes) -> DecodedInstruction:
    """
    Decode router calldata into one of the supported instruction shapes

    Args:
        raw: Calldata as returned in the 1inch tx.data field

    Returns:
        The decoded instruction, carrying the selector it was read from

    Raises:
        UnknownSelector: If the selector is not a supported entry point
        MalformedInstruction: If the calldata is shorter than a selector, or
            the arguments do not fit the selector's layout
    """
    raw = bytes(raw)
    if len(raw) < SELECTOR_SIZE:
        raise MalformedInstruction.too_short(len(raw))

    selector = raw[:SELECTOR_SIZE]
    layout = INSTRUCTION_LAYOUTS.get(selector)
    if layout is None:
        raise UnknownSelector(selector)

    try:
        args = abi_decode(list(layout.arg_types), raw[SELECTOR_SIZE:])
    except DecodingError as e:
        raise MalformedInstruction.bad_arguments(layout.kind.value, selector, e) from e

    instruction = layout.build(selector, tuple(args))
    logger.debug(f"Decoded {layout.kind.value} instruction (selector=0x{selector.hex()})")
    return instruction


def decode_hex(raw_hex: str) -> DecodedInstruction:
    """Decode calldata given as a hex string"""
    return decode(Web3.to_bytes(hexstr=raw_hex))
