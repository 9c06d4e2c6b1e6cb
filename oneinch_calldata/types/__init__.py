"""
Type definitions for the calldata converter
"""

from .request import QuoteRequest
from .instruction import (
    InstructionKind,
    SwapInstruction,
    UnoswapToInstruction,
    UnoswapTo2Instruction,
    DecodedInstruction,
)

__all__ = [
    "QuoteRequest",
    "InstructionKind",
    "SwapInstruction",
    "UnoswapToInstruction",
    "UnoswapTo2Instruction",
    "DecodedInstruction",
]
