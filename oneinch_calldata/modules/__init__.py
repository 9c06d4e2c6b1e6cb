"""
Functional modules

Provides high-level operations:
- CalldataConverter: 1inch calldata -> canonical settlement payload
"""

from .calldata import CalldataConverter, convert_swap_calldata

__all__ = [
    "CalldataConverter",
    "convert_swap_calldata",
]
