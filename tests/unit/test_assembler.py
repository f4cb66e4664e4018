"""
Unit tests for result assembly.

This module validates:
1. Degenerate strike and forward branches
2. Expired-option intrinsic value
3. Arbitrage clamping against the discounted forward and strike
4. Output shapes of the three operations
"""

import pytest

from black76.codec.fixed_point import MAX, ZERO, decode_word, encode
from black76.diagnostics.arbitrage import check_price_bounds, check_put_call_parity
from black76.protocol.arguments import encode_arguments
from black76.protocol.assembler import calculate_black76, delta, prices, prices_delta
from black76.utils.types import ArgumentLengthError

ONE_YEAR = 365 * 24 * 3600
NINETY_DAYS = 90 * 24 * 3600
WAD = 10**18


def _words(expiry, discount, vol, fwd, strike, exponent=0):
    return calculate_black76(encode_arguments(expiry, discount, vol, fwd, strike, exponent))


def _int(word):
    return int.from_bytes(word, "big")


# ===========================
# Degenerate Branches
# ===========================


def test_degenerate_strike_exponent_zero():
    """K = 0: (F·D, 0, D)."""
    call, put, third = _words(ONE_YEAR, 1, 3, 110, 0)
    assert _int(call) == 110
    assert put == ZERO
    assert _int(third) == 1


def test_degenerate_strike_third_slot_is_discount():
    """The third slot carries the discount factor itself."""
    call, put, third = _words(ONE_YEAR, 95, 20, 11000, 0, exponent=2)
    assert _int(call) == 10450  # 110 × 0.95 = 104.5
    assert put == ZERO
    assert third == encode(0.95, 2)


def test_degenerate_forward():
    """F = 0: (0, K·D, 0)."""
    call, put, third = _words(ONE_YEAR, 1, 3, 0, 100)
    assert call == ZERO
    assert _int(put) == 100
    assert third == ZERO


def test_degenerate_forward_discounted():
    call, put, third = _words(ONE_YEAR, WAD // 2, WAD // 5, 0, 100 * WAD, exponent=18)
    assert call == ZERO
    assert _int(put) == 50 * WAD
    assert third == ZERO


def test_zero_strike_and_forward_takes_strike_branch():
    call, put, third = _words(ONE_YEAR, 1, 0, 0, 0)
    assert call == ZERO
    assert put == ZERO
    assert _int(third) == 1


# ===========================
# Expired Options
# ===========================


@pytest.mark.parametrize("vol", [0, 1, 50])
def test_expired_call_is_intrinsic(vol):
    """τ = 0, F = 110, K = 100 → call 10, put 0, delta 0 for any volatility."""
    call, put, third = _words(0, 1, vol, 110, 100)
    assert _int(call) == 10
    assert put == ZERO
    assert third == ZERO


def test_expired_put_is_intrinsic():
    call, put, third = _words(0, 1, 1, 90, 100)
    assert call == ZERO
    assert _int(put) == 10
    assert third == ZERO


# ===========================
# General Branch
# ===========================


def test_atm_prices_and_delta(args_block):
    call, put, call_delta = calculate_black76(args_block)
    assert abs(decode_word(call, 18) - 7.965567455405804) < 1e-9
    assert abs(decode_word(put, 18) - 7.965567455405804) < 1e-9
    assert abs(decode_word(call_delta, 18) - 0.539827837277029) < 1e-12


def test_delta_is_discounted(wad_request_fields):
    fields = {**wad_request_fields, "discount": WAD // 2}
    _, _, call_delta = calculate_black76(encode_arguments(**fields))
    assert abs(decode_word(call_delta, 18) - 0.5 * 0.539827837277029) < 1e-12


def test_prices_are_not_discounted(wad_request_fields):
    """Model prices stay in forward terms; the discount only feeds the clamp."""
    full = calculate_black76(encode_arguments(**wad_request_fields))
    fields = {**wad_request_fields, "discount": 9 * WAD // 10}
    discounted = calculate_black76(encode_arguments(**fields))
    assert full[0] == discounted[0]
    assert full[1] == discounted[1]


def test_call_clamped_to_discounted_forward():
    """Deep ITM call worth ~99 is capped at D·F = 50."""
    call, put, call_delta = _words(ONE_YEAR, WAD // 2, WAD // 5, 100 * WAD, WAD, exponent=18)
    assert _int(call) == 50 * WAD
    assert put == ZERO
    assert _int(call_delta) == WAD // 2


def test_put_clamped_to_discounted_strike():
    """Deep ITM put worth ~99 is capped at D·K = 50."""
    call, put, call_delta = _words(ONE_YEAR, WAD // 2, WAD // 5, WAD, 100 * WAD, exponent=18)
    assert call == ZERO
    assert _int(put) == 50 * WAD
    assert call_delta == ZERO


def test_zero_volatility_itm():
    call, put, call_delta = _words(ONE_YEAR, 1, 0, 110, 100)
    assert _int(call) == 10
    assert put == ZERO
    assert _int(call_delta) == 1


def test_zero_volatility_atm_is_not_saturated():
    """σ = 0 at the money prices at zero with half a unit of delta."""
    call, put, call_delta = _words(ONE_YEAR, WAD, 0, 100 * WAD, 100 * WAD, 18)
    assert call == ZERO
    assert put == ZERO
    assert _int(call_delta) == WAD // 2


def test_overflowing_result_saturates():
    """F·D beyond 2^128 at the request exponent saturates instead of failing."""
    call, put, third = _words(ONE_YEAR, 2**64 - 1, 0, 2**127, 0)
    assert call == MAX
    assert put == ZERO
    assert _int(third) == 2**64


GRID = [
    (expiry, discount, vol, fwd, strike)
    for expiry in (NINETY_DAYS, ONE_YEAR)
    for discount in (WAD, 95 * WAD // 100)
    for vol in (WAD // 5, WAD // 2)
    for fwd in (90, 100, 110)
    for strike in (95, 100, 105)
]


@pytest.mark.parametrize("expiry,discount,vol,fwd,strike", GRID)
def test_arbitrage_bounds_hold(expiry, discount, vol, fwd, strike):
    """Post-clamp: C ≤ D·F and P ≤ D·K."""
    call, put, call_delta = _words(expiry, discount, vol, fwd * WAD, strike * WAD, exponent=18)
    D = discount / WAD
    c, p = decode_word(call, 18), decode_word(put, 18)
    assert c <= fwd * D + 1e-12
    assert p <= strike * D + 1e-12
    assert 0.0 <= decode_word(call_delta, 18) <= D

    check = check_price_bounds(c, p, fwd, strike, discount=D)
    assert check.details["call_upper_bound"]
    assert check.details["put_upper_bound"]


@pytest.mark.parametrize(
    "expiry,vol,fwd,strike",
    [(e, v, f, k) for (e, d, v, f, k) in GRID if d == WAD],
)
def test_put_call_parity_without_discounting(expiry, vol, fwd, strike):
    """With D = 1 the clamp never binds, so C - P = F - K."""
    call, put, _ = _words(expiry, WAD, vol, fwd * WAD, strike * WAD, exponent=18)
    c, p = decode_word(call, 18), decode_word(put, 18)
    assert check_put_call_parity(c, p, fwd, strike, discount=1.0).is_valid
    assert check_price_bounds(c, p, fwd, strike, discount=1.0).is_valid


# ===========================
# Output Shapes
# ===========================


def test_operation_output_shapes(args_block):
    call, put, call_delta = calculate_black76(args_block)
    assert prices_delta(args_block) == call + put + call_delta
    assert prices(args_block) == call + put
    assert delta(args_block) == call_delta


@pytest.mark.parametrize("operation", [prices_delta, prices, delta])
def test_operations_reject_wrong_length(operation):
    with pytest.raises(ArgumentLengthError):
        operation(bytes(60))


def test_deterministic(args_block):
    assert all(prices_delta(args_block) == prices_delta(args_block) for _ in range(5))
