"""
Arbitrage diagnostics for Black-76 outputs.

This module implements model-independent no-arbitrage checks on a
call/put pair written on the same forward:
- Price bounds under the forward measure
- Put-call parity on a forward
"""

from black76.utils.constants import ARBITRAGE_TOLERANCE, PARITY_TOLERANCE
from black76.utils.types import ArbitrageCheck


def check_price_bounds(
    call_price: float,
    put_price: float,
    forward: float,
    strike: float,
    discount: float,
    tolerance: float = ARBITRAGE_TOLERANCE,
) -> ArbitrageCheck:
    """
    Validate option prices against no-arbitrage bounds.

    Checks:
    1. Call lower bound: C >= max(D·(F - K), 0)
    2. Call upper bound: C <= D·F
    3. Put lower bound: P >= max(D·(K - F), 0)
    4. Put upper bound: P <= D·K

    Args:
        call_price, put_price: Option prices
        forward: Forward price
        strike: Strike price
        discount: Discount factor
        tolerance: Tolerance for floating point comparisons

    Returns:
        ArbitrageCheck with validation results
    """
    violations = []
    details = {}

    discount_fwd = forward * discount
    discount_strike = strike * discount

    # Call lower bound
    call_lower = max(discount_fwd - discount_strike, 0.0)
    call_lower_ok = call_price >= call_lower - tolerance
    details["call_lower_bound"] = call_lower_ok
    if not call_lower_ok:
        violations.append(
            f"Call price {call_price:.6f} below lower bound {call_lower:.6f}"
        )

    # Call upper bound
    call_upper_ok = call_price <= discount_fwd + tolerance
    details["call_upper_bound"] = call_upper_ok
    if not call_upper_ok:
        violations.append(
            f"Call price {call_price:.6f} above upper bound {discount_fwd:.6f}"
        )

    # Put lower bound
    put_lower = max(discount_strike - discount_fwd, 0.0)
    put_lower_ok = put_price >= put_lower - tolerance
    details["put_lower_bound"] = put_lower_ok
    if not put_lower_ok:
        violations.append(f"Put price {put_price:.6f} below lower bound {put_lower:.6f}")

    # Put upper bound
    put_upper_ok = put_price <= discount_strike + tolerance
    details["put_upper_bound"] = put_upper_ok
    if not put_upper_ok:
        violations.append(
            f"Put price {put_price:.6f} above upper bound {discount_strike:.6f}"
        )

    is_valid = len(violations) == 0
    return ArbitrageCheck(is_valid=is_valid, violations=violations, details=details)


def check_put_call_parity(
    call_price: float,
    put_price: float,
    forward: float,
    strike: float,
    discount: float,
    tolerance: float = PARITY_TOLERANCE,
) -> ArbitrageCheck:
    """
    Validate put-call parity on a forward.

    Put-call parity:
        C - P = D·(F - K)

    Args:
        call_price, put_price: Option prices
        forward, strike, discount: Contract parameters
        tolerance: Tolerance for parity check

    Returns:
        ArbitrageCheck with validation results
    """
    lhs = call_price - put_price
    rhs = discount * (forward - strike)

    diff = abs(lhs - rhs)
    is_valid = diff < tolerance

    violations = []
    if not is_valid:
        violations.append(
            f"Put-call parity violated: C - P = {lhs:.6f}, "
            f"D·(F - K) = {rhs:.6f}, diff = {diff:.6f}"
        )

    details = {"parity_lhs": lhs, "parity_rhs": rhs, "difference": diff}

    return ArbitrageCheck(is_valid=is_valid, violations=violations, details=details)
