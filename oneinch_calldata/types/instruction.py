"""
Decoded 1inch router instruction types

Each decoded instruction keeps the selector it was read from, so the
canonical payload carries exactly those bytes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class InstructionKind(Enum):
    """Supported AggregationRouterV6 entry points"""
    SWAP = "swap"
    UNOSWAP_TO = "unoswapTo"
    UNOSWAP_TO_2 = "unoswapTo2"


@dataclass(frozen=True)
class SwapInstruction:
    """
    swap(executor, desc, data)

    Attributes:
        selector: Leading 4 bytes of the raw calldata
        executor: Checksummed executor address
        data: Executor call data
    """
    selector: bytes
    executor: str
    data: bytes

    kind = InstructionKind.SWAP


@dataclass(frozen=True)
class UnoswapToInstruction:
    """unoswapTo(to, token, amount, minReturn, dex); only dex is kept"""
    selector: bytes
    dex: int

    kind = InstructionKind.UNOSWAP_TO


@dataclass(frozen=True)
class UnoswapTo2Instruction:
    """unoswapTo2(to, token, amount, minReturn, dex, dex2); only dex and dex2 are kept"""
    selector: bytes
    dex: int
    dex2: int

    kind = InstructionKind.UNOSWAP_TO_2


DecodedInstruction = Union[SwapInstruction, UnoswapToInstruction, UnoswapTo2Instruction]
