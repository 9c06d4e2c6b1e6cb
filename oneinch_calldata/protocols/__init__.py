"""
Protocol implementations
"""

from .oneinch import OneInchAPI

__all__ = [
    "OneInchAPI",
]
