"""
Conversion between scaled fixed-point integers and floats.

Wire values are unsigned integers paired with a signed decimal exponent,
representing raw × 10^(-exponent). Converting a 128-bit integer straight
to a float before scaling would drop low-order bits, so both directions
scale in exact decimal arithmetic first and only then narrow.

Rounding rules:
    decode: exact product, correctly rounded to the nearest float.
    encode: exact product, truncated toward zero. NaN, infinities,
        negative values and anything that does not fit in 128 bits
        saturate to 2^128 - 1 instead of raising.
"""

import logging
from decimal import ROUND_DOWN, Context, Decimal, localcontext

from black76.utils.constants import FIXED_POINT_PRECISION, U128_MAX, WORD_SIZE

logger = logging.getLogger(__name__)

ZERO = (0).to_bytes(WORD_SIZE, "big")
MAX = U128_MAX.to_bytes(WORD_SIZE, "big")

# Large enough that scaleb() and Decimal(float) never round.
_CONTEXT = Context(prec=FIXED_POINT_PRECISION, Emax=999_999, Emin=-999_999)


def decode(raw: int, exponent: int) -> float:
    """
    Decode a scaled integer into a float.

    Args:
        raw: Unsigned magnitude (up to 128 bits)
        exponent: Signed decimal exponent

    Returns:
        raw × 10^(-exponent), rounded once to the nearest float

    Examples:
        >>> decode(1_500_000_000_000_000_000, 18)
        1.5
        >>> decode(42, -2)
        4200.0
    """
    with localcontext(_CONTEXT):
        scaled = Decimal(raw).scaleb(-exponent)
    return float(scaled)


def encode_int(value: float, exponent: int) -> int:
    """
    Scale a float into an unsigned 128-bit integer, saturating on failure.

    Args:
        value: Value to encode
        exponent: Signed decimal exponent

    Returns:
        trunc(value × 10^exponent), or U128_MAX when that is not a valid uint128
    """
    exact = Decimal(value)
    if exact.is_nan() or exact.is_infinite() or exact < 0:
        logger.debug("Saturating non-encodable value %r (exponent=%d)", value, exponent)
        return U128_MAX

    with localcontext(_CONTEXT):
        scaled = exact.scaleb(exponent).to_integral_value(rounding=ROUND_DOWN)

    if scaled > U128_MAX:
        logger.debug("Saturating overflow of %r at exponent %d", value, exponent)
        return U128_MAX
    return int(scaled)


def encode(value: float, exponent: int) -> bytes:
    """
    Encode a float as a 16-byte big-endian scaled integer.

    Never raises for numeric input: see encode_int() for the saturation rule.

    Examples:
        >>> encode(1.5, 2).hex()
        '00000000000000000000000000000096'
        >>> encode(-1.0, 0) == MAX
        True
    """
    return encode_int(value, exponent).to_bytes(WORD_SIZE, "big")


def decode_word(word: bytes, exponent: int) -> float:
    """Decode a big-endian unsigned integer of any width."""
    return decode(int.from_bytes(word, "big", signed=False), exponent)


def split_words(data: bytes) -> list[bytes]:
    """Split concatenated output words into 16-byte chunks."""
    if len(data) % WORD_SIZE:
        raise ValueError(f"Output length must be a multiple of {WORD_SIZE}, got {len(data)}")
    return [data[i:i + WORD_SIZE] for i in range(0, len(data), WORD_SIZE)]
