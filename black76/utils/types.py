"""
Data types and structures for the Black-76 pricing engine.

This module defines dataclasses and enums used throughout the engine
for representing scaled wire values, decoded arguments, requests,
results and diagnostics.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from black76.codec.fixed_point import decode
from black76.utils.constants import (
    MAX_EXPONENT,
    MIN_EXPONENT,
    SELECTOR_LENGTH,
    U128_MAX,
)


class ErrorKind(IntEnum):
    """
    Failure codes reported by the dispatcher.

    Code 0 is reserved for success and is never a member.
    """
    WRONG_SELECTOR_LENGTH = 1
    UNKNOWN_SELECTOR = 2
    WRONG_LENGTH_OF_ARGUMENTS = 3


class WireFormatError(ValueError):
    """A request that cannot be decoded; carries the code to report."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ArgumentLengthError(WireFormatError):
    """Argument block is not exactly the expected length."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(
            ErrorKind.WRONG_LENGTH_OF_ARGUMENTS,
            f"Argument block must be {expected} bytes, got {length}",
        )
        self.length = length


@dataclass(frozen=True)
class ScaledDecimal:
    """
    Immutable fixed-point decimal as carried on the wire.

    Attributes:
        raw: Unsigned magnitude, at most 128 bits
        exponent: Signed 8-bit exponent; the value is raw × 10^(-exponent)
    """
    raw: int
    exponent: int

    def __post_init__(self) -> None:
        """Validate the magnitude and exponent fit their wire slots."""
        if not 0 <= self.raw <= U128_MAX:
            raise ValueError(f"Raw value must fit in 128 unsigned bits, got raw={self.raw}")
        if not MIN_EXPONENT <= self.exponent <= MAX_EXPONENT:
            raise ValueError(f"Exponent must fit in a signed byte, got exponent={self.exponent}")

    @property
    def value(self) -> float:
        """Decoded floating-point value."""
        return decode(self.raw, self.exponent)


@dataclass(frozen=True)
class Black76Arguments:
    """
    Decoded argument block of a pricing request.

    Attributes:
        expiry_seconds: Time to expiry in seconds (unscaled)
        discount: Discount factor applied to forward and strike
        volatility: Annualized volatility of the forward
        forward: Forward price of the underlying
        strike: Strike price
        exponent: Decimal exponent shared by every scaled field
    """
    expiry_seconds: float
    discount: float
    volatility: float
    forward: float
    strike: float
    exponent: int


@dataclass(frozen=True)
class ComputeRequest:
    """
    A raw request split into its selector and argument block.

    Attributes:
        selector: Leading bytes identifying the operation
        args: Remaining payload, expected to be the argument block
    """
    selector: bytes
    args: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "ComputeRequest":
        data = bytes(data)
        return cls(selector=data[:SELECTOR_LENGTH], args=data[SELECTOR_LENGTH:])


@dataclass(frozen=True)
class ComputeResult:
    """
    Outcome of a single dispatcher call.

    Attributes:
        output: Concatenated 16-byte words on success, empty on failure
        error: Failure kind, or None on success
    """
    output: bytes = b""
    error: Optional[ErrorKind] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def code(self) -> int:
        """Numeric status reported to the host: 0 on success."""
        return 0 if self.error is None else int(self.error)


@dataclass
class ArbitrageCheck:
    """
    Result from arbitrage validation.

    Attributes:
        is_valid: Whether the prices satisfy no-arbitrage conditions
        violations: List of specific violations detected
        details: Dictionary with detailed check results
    """
    is_valid: bool
    violations: list[str] = field(default_factory=list)
    details: dict[str, float] = field(default_factory=dict)
