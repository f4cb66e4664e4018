"""
Black-76 option pricing model on a forward price.

This module implements Black's 1976 formula for European options on a
forward or futures contract, the call/put delta, and the intrinsic-value
fallback used once the option has expired. Prices are undiscounted;
the caller applies the discount factor.

Mathematical Background:
    Under Black-76 the forward F is log-normal with zero drift, so
    - Call: C = F·N(d1) - K·N(d2)
    - Put:  P = K·N(-d2) - F·N(-d1)
    with d1 = [-ln(K/F) + σ²τ/2] / (σ√τ) and d2 = d1 - σ√τ.

Float semantics:
    Every expression keeps the IEEE-754 behaviour of the formulas above,
    evaluated in the order written. Python raises where IEEE arithmetic
    would return an infinity, so the two places this can happen (a zero
    σ√τ denominator and ln of an underflowed ratio) are resolved
    explicitly to the IEEE result.

References:
    Black, F. (1976). The Pricing of Commodity Contracts.
    Journal of Financial Economics, 3(1-2), 167-179.
"""

import math
from dataclasses import dataclass

from black76.core.distributions import normcdf
from black76.utils.constants import SECONDS_PER_YEAR


def time_to_expiry(expiry_seconds: float) -> float:
    """Convert seconds to expiry into years on a 365-day basis."""
    return expiry_seconds / SECONDS_PER_YEAR


def _log(x: float) -> float:
    # ln(0) is -inf in IEEE arithmetic; math.log raises instead.
    if x == 0.0:
        return -math.inf
    return math.log(x)


def d1(sigma: float, strike: float, fwd: float, tau: float) -> float:
    """
    Calculate the d1 term of the Black-76 formula.

    Args:
        sigma: Volatility (annualized)
        strike: Strike price, strictly positive
        fwd: Forward price, strictly positive
        tau: Time to expiry in years, strictly positive

    Returns:
        The d1 parameter

    Formula:
        d1 = (-ln(K/F) + (σ²/2)·τ) / (σ√τ)

    Notes:
        With σ = 0 the denominator vanishes. The result is ±inf following
        the sign of the numerator, which gives N(d1) ∈ {0, 1} and hence
        the intrinsic forward value. An at-the-money zero-volatility
        contract has numerator 0 as well; the limit of d1 as σ → 0 is
        then 0, and that is returned instead of NaN.
    """
    numerator = -_log(strike / fwd) + (0.5 * (sigma * sigma)) * tau
    denominator = sigma * math.sqrt(tau)

    if denominator == 0.0:
        if math.isnan(numerator):
            return math.nan
        if numerator == 0.0:
            # IEEE 0/0 is NaN, which saturates every output word to
            # U128_MAX; the σ → 0 limit is returned instead, so outputs
            # for zero-vol at-the-money requests differ from a raw
            # IEEE evaluation.
            return 0.0
        return math.copysign(math.inf, numerator)

    return numerator / denominator


def d2(d1: float, sigma: float, tau: float) -> float:
    """
    Calculate the d2 term of the Black-76 formula.

    Formula:
        d2 = d1 - σ√τ
    """
    return d1 - sigma * math.sqrt(tau)


def price_expired(fwd: float, strike: float, is_call: bool) -> float:
    """
    Intrinsic value of an option at (or past) expiry.

    Returns:
        max(F - K, 0) for a call, max(K - F, 0) for a put
    """
    if is_call:
        return max(fwd - strike, 0.0)
    return max(strike - fwd, 0.0)


def price(fwd: float, vol: float, strike: float, tau: float, is_call: bool) -> float:
    """
    Undiscounted Black-76 price of a European option on a forward.

    Args:
        fwd: Forward price
        vol: Volatility (annualized)
        strike: Strike price
        tau: Time to expiry in years
        is_call: True for a call, False for a put

    Returns:
        Option price in forward terms

    Examples:
        >>> # ATM call, 1 year, 20% vol
        >>> abs(price(100.0, 0.20, 100.0, 1.0, True) - 7.9656) < 1e-4
        True
        >>> price(110.0, 0.20, 100.0, 0.0, True)  # Expired: intrinsic
        10.0

    Edge Cases:
        - τ ≤ 0: Returns intrinsic value, independent of volatility
    """
    if tau <= 0.0:
        return price_expired(fwd, strike, is_call)

    d1_value = d1(vol, strike, fwd, tau)
    d2_value = d2(d1_value, vol, tau)

    if is_call:
        return fwd * normcdf(d1_value) - strike * normcdf(d2_value)
    return strike * normcdf(-d2_value) - fwd * normcdf(-d1_value)


def delta(fwd: float, vol: float, strike: float, tau: float, is_call: bool) -> float:
    """
    Black-76 forward delta (∂V/∂F), undiscounted.

    Formulas:
        Call delta: Δ_c = N(d1)
        Put delta:  Δ_p = N(d1) - 1

    Returns 0 once the option has expired.
    """
    if tau <= 0.0:
        return 0.0

    d1_value = d1(vol, strike, fwd, tau)
    if is_call:
        return normcdf(d1_value)
    return normcdf(d1_value) - 1.0


@dataclass
class Black76Contract:
    """
    A European option on a forward, priced leg by leg.

    Attributes:
        strike: Strike price
        expiry_seconds: Seconds remaining until expiry
        is_call: True for the call leg, False for the put leg; flipped
            in place to price both legs of one request
    """
    strike: float
    expiry_seconds: float
    is_call: bool = True

    @property
    def tau(self) -> float:
        return time_to_expiry(self.expiry_seconds)

    def price_expired(self, fwd: float) -> float:
        return price_expired(fwd, self.strike, self.is_call)

    def price(self, fwd: float, vol: float) -> float:
        return price(fwd, vol, self.strike, self.tau, self.is_call)

    def delta(self, fwd: float, vol: float) -> float:
        return delta(fwd, vol, self.strike, self.tau, self.is_call)
