"""
Command line entry point

Usage:
    python -m oneinch_calldata <chainId> <fromAddress> <toAddress> <fromAsset> <toAsset> <fromAmount>

Prints the canonical payload as a 0x-prefixed hex string on stdout.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from web3 import Web3

from .types import QuoteRequest
from .errors import CalldataError
from .modules import convert_swap_calldata
from .config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oneinch-calldata",
        description="Fetch 1inch swap calldata and print its canonical settlement payload",
    )
    parser.add_argument("chain_id", help="EVM chain ID, e.g. 1")
    parser.add_argument("from_address", help="Swap sender address")
    parser.add_argument("to_address", help="Receiver of the swapped tokens")
    parser.add_argument("from_asset", help="Source token address")
    parser.add_argument("to_asset", help="Destination token address")
    parser.add_argument("from_amount", help="Amount in the source token's smallest units")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        request = QuoteRequest.from_args([
            args.chain_id,
            args.from_address,
            args.to_address,
            args.from_asset,
            args.to_asset,
            args.from_amount,
        ])
        payload = convert_swap_calldata(request)
    except CalldataError as e:
        logger.error(f"Conversion failed: {e}")
        status_code = getattr(e, "status_code", None)
        body = e.details.get("body")
        if status_code is not None:
            logger.error(f"Upstream status: {status_code}")
        if body:
            logger.error(f"Upstream body  : {body}")
        return 1

    print(Web3.to_hex(payload))
    return 0


if __name__ == "__main__":
    sys.exit(main())
