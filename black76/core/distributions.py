"""
Standard normal distribution functions used by the Black-76 model.

Both functions follow one fixed evaluation order so that results are
reproducible bit-for-bit. The error function is SciPy's Cephes `erf`
rather than the platform libm, which keeps the last bit stable across
hosts that ship the same SciPy build.
"""

import math

from scipy.special import erf

from black76.utils.constants import FRAC_1_SQRT_2, FRAC_1_SQRT_2_PI


def normcdf(x: float) -> float:
    """
    Standard normal cumulative distribution function.

    Args:
        x: Value at which to evaluate the CDF

    Returns:
        Probability that a standard normal random variable is less than x

    Formula:
        N(x) = 0.5 · (1 + erf(x · 1/√2))

    Examples:
        >>> normcdf(0.0)
        0.5
        >>> normcdf(float("inf"))
        1.0
    """
    return 0.5 * (1.0 + float(erf(x * FRAC_1_SQRT_2)))


def normpdf(x: float) -> float:
    """
    Standard normal probability density function.

    Formula:
        φ(x) = exp(-x²/2) · 1/√(2π)

    Squaring a huge |x| overflows to inf, and exp(-inf) is 0, so no
    tail clamping is needed.
    """
    return math.exp(-0.5 * (x * x)) * FRAC_1_SQRT_2_PI
