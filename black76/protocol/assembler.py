"""
Assemble discounted, arbitrage-clamped Black-76 outputs.

Each operation decodes the argument block, prices both legs, clamps
them against the discounted forward and strike, and
re-encodes the selected subset of (call price, put price, call delta)
as 16-byte words using the request's exponent.
"""

import logging

from black76.codec.fixed_point import ZERO, encode
from black76.core.black76 import Black76Contract
from black76.protocol.arguments import parse_arguments

logger = logging.getLogger(__name__)


def calculate_black76(args: bytes) -> tuple[bytes, bytes, bytes]:
    """
    Price a request and encode call price, put price and call delta.

    Args:
        args: 61-byte argument block

    Returns:
        Three 16-byte words: (call_price, put_price, third_slot)

    Raises:
        ArgumentLengthError: If args is not exactly 61 bytes long

    Notes:
        - Model prices stay in forward terms; only the clamp uses the
          discounted notionals, enforcing the upper bounds C ≤ D·F and
          P ≤ D·K.
        - The call delta is scaled by the discount factor.
        - With strike ≤ 0 the third slot carries the discount factor
          itself, not a delta.
        - With forward ≤ 0 the call and delta are zero and the put is
          the discounted strike.
    """
    a = parse_arguments(args)
    exponent = a.exponent

    fwd_discounted = a.forward * a.discount
    if a.strike <= 0.0:
        logger.debug("Non-positive strike %r, returning discounted forward", a.strike)
        return (
            encode(fwd_discounted, exponent),
            ZERO,
            encode(a.discount, exponent),
        )

    strike_discounted = a.strike * a.discount
    if a.forward <= 0.0:
        logger.debug("Non-positive forward %r, returning discounted strike", a.forward)
        return (
            ZERO,
            encode(strike_discounted, exponent),
            ZERO,
        )

    contract = Black76Contract(strike=a.strike, expiry_seconds=a.expiry_seconds, is_call=True)
    call_price = contract.price(a.forward, a.volatility)
    call_delta = contract.delta(a.forward, a.volatility)
    contract.is_call = False
    put_price = contract.price(a.forward, a.volatility)

    call_delta = call_delta * a.discount

    if call_price > fwd_discounted:
        call_price = fwd_discounted
    if put_price > strike_discounted:
        put_price = strike_discounted

    return (
        encode(call_price, exponent),
        encode(put_price, exponent),
        encode(call_delta, exponent),
    )


def prices_delta(args: bytes) -> bytes:
    """Call price ‖ put price ‖ discounted call delta (48 bytes)."""
    call_price, put_price, call_delta = calculate_black76(args)
    return call_price + put_price + call_delta


def prices(args: bytes) -> bytes:
    """Call price ‖ put price (32 bytes)."""
    call_price, put_price, _ = calculate_black76(args)
    return call_price + put_price


def delta(args: bytes) -> bytes:
    """Discounted call delta (16 bytes)."""
    _, _, call_delta = calculate_black76(args)
    return call_delta
