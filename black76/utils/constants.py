"""
Numerical and wire-format constants for the Black-76 pricing engine.

This module defines every process-wide constant used by the codec, the
pricing model and the request dispatcher. Values are plain module-level
immutables; there is no runtime configuration path.
"""

import math

# Time conventions
SECONDS_PER_YEAR = 365.0 * 24.0 * 60.0 * 60.0  # ACT/365 fixed year

# Normal distribution scaling factors
FRAC_1_SQRT_2 = 1.0 / math.sqrt(2.0)
FRAC_1_SQRT_PI = 0.5641895835477563  # 1/√π
FRAC_1_SQRT_2_PI = FRAC_1_SQRT_PI * FRAC_1_SQRT_2  # 1/√(2π)

# Fixed-point codec
WORD_SIZE = 16  # bytes per encoded output value (uint128)
U128_MAX = (1 << 128) - 1
FIXED_POINT_PRECISION = 1200  # decimal digits; exceeds any float's exact expansion
MIN_EXPONENT = -128
MAX_EXPONENT = 127

# Request layout (all integers big-endian)
SELECTOR_LENGTH = 4
ARGUMENTS_LENGTH = 61

EXPIRY_OFFSET, EXPIRY_SIZE = 0, 4  # uint32, unscaled seconds
DISCOUNT_OFFSET, DISCOUNT_SIZE = 4, 8  # uint64, scaled
VOLATILITY_OFFSET, VOLATILITY_SIZE = 12, 16  # uint128, scaled
FORWARD_OFFSET, FORWARD_SIZE = 28, 16  # uint128, scaled
STRIKE_OFFSET, STRIKE_SIZE = 44, 16  # uint128, scaled
EXPONENT_OFFSET, EXPONENT_SIZE = 60, 1  # int8

# Operation selectors: first four bytes of keccak256 of the ABI signature
# <name>(uint32,uint64,uint128,uint128,uint128,int8)
PRICES_DELTA_SELECTOR = bytes([0x5F, 0x53, 0x18, 0x3D])
PRICES_SELECTOR = bytes([0x10, 0x25, 0x1F, 0x08])
DELTA_SELECTOR = bytes([0x12, 0x9A, 0xB3, 0x1E])

# Host accounting
BLACK76_GAS = 300  # flat cost, independent of input length

# Arbitrage diagnostics tolerances
ARBITRAGE_TOLERANCE = 1e-4  # $0.0001 tolerance for bounds checks
PARITY_TOLERANCE = 1e-6  # Put-call parity tolerance
