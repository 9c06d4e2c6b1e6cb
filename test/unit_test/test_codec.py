"""
Unit tests for the router calldata decoder and canonical encoder

Fixtures are built with eth_abi; expected payloads are spelled out
as literal hex so the canonical layout is pinned down byte by byte.
"""

import sys
from pathlib import Path

import pytest
from eth_abi import encode as abi_encode

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from oneinch_calldata.protocols.oneinch import decode, decode_hex, encode, selector_from_hex
from oneinch_calldata.protocols.oneinch.constants import (
    SWAP_SELECTOR,
    UNOSWAP_TO_SELECTOR,
    UNOSWAP_TO_2_SELECTOR,
    SWAP_ARG_TYPES,
)
from oneinch_calldata.types import (
    InstructionKind,
    SwapInstruction,
    UnoswapToInstruction,
    UnoswapTo2Instruction,
)
from oneinch_calldata.errors import UnknownSelector, MalformedInstruction, ErrorCode

EXECUTOR = "0x" + "11" * 20
SRC_TOKEN = "0x" + "22" * 20
DST_TOKEN = "0x" + "33" * 20
RECEIVER = "0x" + "44" * 20
INNER_DATA = bytes.fromhex("deadbeef")


def _word(value: int) -> str:
    return format(value, "064x")


def _swap_calldata(executor: str = EXECUTOR, data: bytes = INNER_DATA) -> bytes:
    desc = (SRC_TOKEN, DST_TOKEN, EXECUTOR, RECEIVER, 10**18, 999 * 10**15, 4)
    return SWAP_SELECTOR + abi_encode(list(SWAP_ARG_TYPES), [executor, desc, data])


def _unoswap_to_calldata(dex: int) -> bytes:
    # to, token, amount, minReturn, dex
    args = [int(RECEIVER, 16), int(SRC_TOKEN, 16), 10**18, 10**17, dex]
    return UNOSWAP_TO_SELECTOR + abi_encode(["uint256"] * 5, args)


def _unoswap_to_2_calldata(dex: int, dex2: int) -> bytes:
    args = [int(RECEIVER, 16), int(SRC_TOKEN, 16), 10**18, 10**17, dex, dex2]
    return UNOSWAP_TO_2_SELECTOR + abi_encode(["uint256"] * 6, args)


def test_selector_constants():
    """Selectors match the AggregationRouterV6 entry points"""
    assert SWAP_SELECTOR.hex() == "07ed2379"
    assert UNOSWAP_TO_SELECTOR.hex() == "e2c95c82"
    assert UNOSWAP_TO_2_SELECTOR.hex() == "ea76dddf"


def test_selector_from_hex_is_case_insensitive():
    assert selector_from_hex("0x07ED2379") == SWAP_SELECTOR
    assert selector_from_hex("e2c95c82") == UNOSWAP_TO_SELECTOR
    assert selector_from_hex("0xEA76DDDF") == UNOSWAP_TO_2_SELECTOR

    with pytest.raises(ValueError):
        selector_from_hex("0x07ed23")


def test_decode_swap():
    instruction = decode(_swap_calldata())

    assert isinstance(instruction, SwapInstruction)
    assert instruction.kind == InstructionKind.SWAP
    assert instruction.selector == SWAP_SELECTOR
    assert instruction.executor == EXECUTOR
    assert instruction.data == INNER_DATA


def test_decode_swap_checksums_executor():
    executor = "0x5141b82f5ffda4c6fe1e372978f1c5427640a190"
    instruction = decode(_swap_calldata(executor=executor))

    assert instruction.executor.lower() == executor
    assert instruction.executor != executor  # mixed-case checksum form


def test_decode_unoswap_to_keeps_only_dex():
    instruction = decode(_unoswap_to_calldata(dex=7))

    assert instruction == UnoswapToInstruction(selector=UNOSWAP_TO_SELECTOR, dex=7)
    assert instruction.kind == InstructionKind.UNOSWAP_TO


def test_decode_unoswap_to_2_keeps_dex_pair():
    instruction = decode(_unoswap_to_2_calldata(dex=7, dex2=9))

    assert instruction == UnoswapTo2Instruction(selector=UNOSWAP_TO_2_SELECTOR, dex=7, dex2=9)
    assert instruction.kind == InstructionKind.UNOSWAP_TO_2


def test_decode_hex_accepts_prefixed_string():
    raw = _unoswap_to_calldata(dex=7)
    assert decode_hex("0x" + raw.hex()) == decode(raw)


def test_swap_canonical_payload_literal():
    payload = encode(decode(_swap_calldata()))

    expected = (
        "07ed2379"
        + "00" * 12 + "11" * 20      # executor
        + _word(0x40)                # offset of data
        + _word(len(INNER_DATA))     # data length
        + "deadbeef" + "00" * 28     # data, right-padded
    )
    assert payload.hex() == expected
    assert payload == SWAP_SELECTOR + abi_encode(["address", "bytes"], [EXECUTOR, INNER_DATA])


def test_swap_canonical_payload_with_empty_data():
    payload = encode(decode(_swap_calldata(data=b"")))

    expected = "07ed2379" + "00" * 12 + "11" * 20 + _word(0x40) + _word(0)
    assert payload.hex() == expected


def test_unoswap_to_canonical_payload_literal():
    payload = encode(decode(_unoswap_to_calldata(dex=7)))

    assert payload.hex() == "e2c95c82" + _word(7)
    assert len(payload) == 4 + 32


def test_unoswap_to_2_canonical_payload_literal():
    payload = encode(decode(_unoswap_to_2_calldata(dex=7, dex2=9)))

    assert payload.hex() == "ea76dddf" + _word(7) + _word(9)


def test_large_dex_values_pass_through():
    """dex packs pool address and flags into the high bits"""
    dex = (1 << 255) | (1 << 247) | int("55" * 20, 16)
    payload = encode(decode(_unoswap_to_calldata(dex=dex)))

    assert int.from_bytes(payload[4:], "big") == dex


def test_encode_is_idempotent():
    instructions = [
        decode(_swap_calldata()),
        decode(_unoswap_to_calldata(dex=7)),
        decode(_unoswap_to_2_calldata(dex=7, dex2=9)),
    ]
    for instruction in instructions:
        first = encode(instruction)
        assert all(encode(instruction) == first for _ in range(5))


def test_encode_uses_carried_selector():
    """The payload selector is the one stored on the instruction"""
    instruction = UnoswapToInstruction(selector=bytes.fromhex("e2c95c82"), dex=1)
    assert encode(instruction)[:4] == instruction.selector


def test_encode_rejects_unknown_type():
    with pytest.raises(TypeError):
        encode(object())


def test_unknown_selector():
    raw = bytes.fromhex("12345678") + abi_encode(["uint256"], [7])

    with pytest.raises(UnknownSelector) as exc_info:
        decode(raw)

    assert exc_info.value.selector == bytes.fromhex("12345678")
    assert exc_info.value.code == ErrorCode.UNKNOWN_SELECTOR
    assert "0x12345678" in str(exc_info.value)


def test_unknown_selector_not_guessed_from_body():
    """A body that fits unoswapTo is still rejected under a foreign selector"""
    raw = bytes.fromhex("e2c95c83") + _unoswap_to_calldata(dex=7)[4:]

    with pytest.raises(UnknownSelector):
        decode(raw)


def test_truncated_arguments_are_malformed():
    raw = _unoswap_to_2_calldata(dex=7, dex2=9)[:-32]

    with pytest.raises(MalformedInstruction) as exc_info:
        decode(raw)

    assert exc_info.value.selector == UNOSWAP_TO_2_SELECTOR
    assert exc_info.value.code == ErrorCode.MALFORMED_INSTRUCTION


def test_selector_only_is_malformed():
    with pytest.raises(MalformedInstruction):
        decode(SWAP_SELECTOR)


def test_shorter_than_selector_is_malformed():
    with pytest.raises(MalformedInstruction):
        decode(b"\x07\xed")
    with pytest.raises(MalformedInstruction):
        decode(b"")
