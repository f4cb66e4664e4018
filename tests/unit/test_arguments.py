"""Unit tests for argument block parsing and building."""

import pytest

from black76.protocol.arguments import encode_arguments, parse_arguments, parse_scaled
from black76.utils.constants import ARGUMENTS_LENGTH, U128_MAX
from black76.utils.types import ArgumentLengthError, ErrorKind, ScaledDecimal, WireFormatError


def test_block_length(args_block):
    assert len(args_block) == ARGUMENTS_LENGTH


def test_parse_standard_block(args_block):
    a = parse_arguments(args_block)
    assert a.expiry_seconds == 31_536_000.0
    assert a.discount == 1.0
    assert a.volatility == 0.2
    assert a.forward == 100.0
    assert a.strike == 100.0
    assert a.exponent == 18


def test_field_offsets_are_big_endian():
    """Hand-laid block: each field at its documented offset."""
    block = (
        bytes.fromhex("00000e10")  # expiry = 3600
        + (95).to_bytes(8, "big")  # discount
        + (25).to_bytes(16, "big")  # volatility
        + (12345).to_bytes(16, "big")  # forward
        + (12000).to_bytes(16, "big")  # strike
        + bytes([2])  # exponent
    )
    a = parse_arguments(block)
    assert a.expiry_seconds == 3600.0
    assert a.discount == 0.95
    assert a.volatility == 0.25
    assert a.forward == 123.45
    assert a.strike == 120.0
    assert a.exponent == 2


def test_exponent_is_signed():
    block = encode_arguments(0, 1, 0, 7, 0, -3)
    assert block[-1] == 0xFD
    a = parse_arguments(block)
    assert a.exponent == -3
    assert a.forward == 7000.0
    assert a.discount == 1000.0


def test_full_width_fields():
    block = encode_arguments(2**32 - 1, 2**64 - 1, U128_MAX, U128_MAX, U128_MAX, 0)
    a = parse_arguments(block)
    assert a.expiry_seconds == float(2**32 - 1)
    assert a.discount == float(2**64)
    assert a.forward == 2.0**128


@pytest.mark.parametrize("length", [0, 60, 62, 100])
def test_wrong_length_raises(length):
    with pytest.raises(ArgumentLengthError) as exc_info:
        parse_arguments(bytes(length))
    assert exc_info.value.kind == ErrorKind.WRONG_LENGTH_OF_ARGUMENTS
    assert exc_info.value.length == length
    assert isinstance(exc_info.value, WireFormatError)
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize(
    "fields",
    [
        dict(expiry_seconds=2**32),
        dict(discount=2**64),
        dict(volatility=U128_MAX + 1),
        dict(forward=-1),
        dict(exponent=128),
        dict(exponent=-129),
    ],
)
def test_encode_rejects_out_of_range(wad_request_fields, fields):
    with pytest.raises(ValueError):
        encode_arguments(**{**wad_request_fields, **fields})


def test_parse_scaled():
    block = encode_arguments(0, 0, 0, 150, 0, 2)
    scaled = parse_scaled(block, 28, 16, 2)
    assert scaled == ScaledDecimal(raw=150, exponent=2)
    assert scaled.value == 1.5


def test_scaled_decimal_validation():
    with pytest.raises(ValueError):
        ScaledDecimal(raw=-1, exponent=0)
    with pytest.raises(ValueError):
        ScaledDecimal(raw=U128_MAX + 1, exponent=0)
    with pytest.raises(ValueError):
        ScaledDecimal(raw=1, exponent=200)
