"""
Argument block layout for Black-76 requests.

The 61-byte block following the selector is laid out as:

    offset  size  field            encoding
    0       4     expiry_seconds   uint32, unscaled
    4       8     discount         uint64, scaled by exponent
    12      16    volatility       uint128, scaled by exponent
    28      16    forward          uint128, scaled by exponent
    44      16    strike           uint128, scaled by exponent
    60      1     exponent         int8

All integers are big-endian.
"""

from black76.codec.fixed_point import decode
from black76.utils.constants import (
    ARGUMENTS_LENGTH,
    DISCOUNT_OFFSET,
    DISCOUNT_SIZE,
    EXPIRY_OFFSET,
    EXPIRY_SIZE,
    EXPONENT_OFFSET,
    EXPONENT_SIZE,
    FORWARD_OFFSET,
    FORWARD_SIZE,
    STRIKE_OFFSET,
    STRIKE_SIZE,
    VOLATILITY_OFFSET,
    VOLATILITY_SIZE,
)
from black76.utils.types import ArgumentLengthError, Black76Arguments, ScaledDecimal


def _field(args: bytes, offset: int, size: int, signed: bool = False) -> int:
    return int.from_bytes(args[offset:offset + size], "big", signed=signed)


def parse_scaled(args: bytes, offset: int, size: int, exponent: int) -> ScaledDecimal:
    """Read one scaled unsigned field from the argument block."""
    return ScaledDecimal(raw=_field(args, offset, size), exponent=exponent)


def parse_arguments(args: bytes) -> Black76Arguments:
    """
    Decode a 61-byte argument block.

    Args:
        args: Argument block (request bytes after the selector)

    Returns:
        Black76Arguments with every scaled field decoded to a float

    Raises:
        ArgumentLengthError: If args is not exactly 61 bytes long
    """
    if len(args) != ARGUMENTS_LENGTH:
        raise ArgumentLengthError(len(args), ARGUMENTS_LENGTH)

    exponent = _field(args, EXPONENT_OFFSET, EXPONENT_SIZE, signed=True)

    return Black76Arguments(
        expiry_seconds=float(_field(args, EXPIRY_OFFSET, EXPIRY_SIZE)),
        discount=parse_scaled(args, DISCOUNT_OFFSET, DISCOUNT_SIZE, exponent).value,
        volatility=parse_scaled(args, VOLATILITY_OFFSET, VOLATILITY_SIZE, exponent).value,
        forward=parse_scaled(args, FORWARD_OFFSET, FORWARD_SIZE, exponent).value,
        strike=parse_scaled(args, STRIKE_OFFSET, STRIKE_SIZE, exponent).value,
        exponent=exponent,
    )


def _put(value: int, size: int, name: str, signed: bool = False) -> bytes:
    try:
        return value.to_bytes(size, "big", signed=signed)
    except OverflowError as e:
        raise ValueError(f"{name}={value} does not fit in {size} bytes") from e


def encode_arguments(
    expiry_seconds: int,
    discount: int,
    volatility: int,
    forward: int,
    strike: int,
    exponent: int,
) -> bytes:
    """
    Build an argument block from raw scaled integers.

    Args:
        expiry_seconds: Seconds to expiry (uint32)
        discount: Scaled discount factor (uint64)
        volatility: Scaled volatility (uint128)
        forward: Scaled forward price (uint128)
        strike: Scaled strike price (uint128)
        exponent: Decimal exponent shared by the scaled fields (int8)

    Returns:
        61-byte argument block

    Raises:
        ValueError: If any field does not fit its slot

    Example:
        >>> block = encode_arguments(0, 1, 0, 110, 100, 0)
        >>> parse_arguments(block).forward
        110.0
    """
    return b"".join(
        [
            _put(expiry_seconds, EXPIRY_SIZE, "expiry_seconds"),
            _put(discount, DISCOUNT_SIZE, "discount"),
            _put(volatility, VOLATILITY_SIZE, "volatility"),
            _put(forward, FORWARD_SIZE, "forward"),
            _put(strike, STRIKE_SIZE, "strike"),
            _put(exponent, EXPONENT_SIZE, "exponent", signed=True),
        ]
    )
