"""
Calldata Module

Converts 1inch swap calldata into the canonical settlement payload:
fetch (1inch API) -> decode (router instruction) -> encode (canonical form).
"""

import logging
from typing import Optional

from ..types import QuoteRequest
from ..protocols.oneinch import OneInchAPI, decode, encode
from ..infra.retry import CorrelationContext

logger = logging.getLogger(__name__)


class CalldataConverter:
    """
    Stateless fetch/decode/encode pipeline

    The first failure of any stage propagates unchanged, so no partial
    payload is ever returned.

    Usage:
        with OneInchAPI() as api:
            payload = CalldataConverter(api).run(request)
    """

    def __init__(self, api: OneInchAPI):
        self._api = api

    def run(self, request: QuoteRequest) -> bytes:
        """
        Produce the canonical payload for a swap request

        Args:
            request: Swap parameters

        Returns:
            Selector followed by the ABI-encoded retained fields
        """
        with CorrelationContext("calldata") as cid:
            raw = self._api.fetch_raw_instruction(request)
            instruction = decode(raw)
            payload = encode(instruction)
            logger.info(
                f"[{cid}] Converted {instruction.kind.value} calldata: "
                f"{len(raw)} -> {len(payload)} bytes"
            )
            return payload


def convert_swap_calldata(request: QuoteRequest, api_key: Optional[str] = None) -> bytes:
    """One-shot conversion with a short-lived API client"""
    with OneInchAPI(chain_id=request.chain_id, api_key=api_key) as api:
        return CalldataConverter(api).run(request)
