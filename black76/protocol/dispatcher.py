"""
Selector-based request dispatcher.

A request is a 4-byte selector followed by the 61-byte argument block.
compute() is the single entry point: it never raises for malformed
input, returning a ComputeResult whose code is 0 on success or an
ErrorKind value otherwise.
"""

import logging
from typing import Callable

from black76.codec.fixed_point import decode_word, split_words
from black76.protocol import assembler
from black76.protocol.arguments import encode_arguments
from black76.utils.constants import (
    BLACK76_GAS,
    DELTA_SELECTOR,
    PRICES_DELTA_SELECTOR,
    PRICES_SELECTOR,
    SELECTOR_LENGTH,
)
from black76.utils.types import ComputeRequest, ComputeResult, ErrorKind, WireFormatError

logger = logging.getLogger(__name__)

SELECTORS: dict[str, bytes] = {
    "prices_delta": PRICES_DELTA_SELECTOR,
    "prices": PRICES_SELECTOR,
    "delta": DELTA_SELECTOR,
}

_OPERATIONS: dict[bytes, Callable[[bytes], bytes]] = {
    PRICES_DELTA_SELECTOR: assembler.prices_delta,
    PRICES_SELECTOR: assembler.prices,
    DELTA_SELECTOR: assembler.delta,
}


def compute(data: bytes) -> ComputeResult:
    """
    Route a request to its operation and return the encoded result.

    Args:
        data: Selector followed by the argument block

    Returns:
        ComputeResult with the concatenated output words, or with one of
        WRONG_SELECTOR_LENGTH, UNKNOWN_SELECTOR, WRONG_LENGTH_OF_ARGUMENTS

    Examples:
        >>> compute(b"\\x00\\x01").error
        <ErrorKind.WRONG_SELECTOR_LENGTH: 1>
    """
    if len(data) < SELECTOR_LENGTH:
        logger.warning("Rejected request: %d bytes is shorter than a selector", len(data))
        return ComputeResult(error=ErrorKind.WRONG_SELECTOR_LENGTH)

    request = ComputeRequest.from_bytes(data)
    operation = _OPERATIONS.get(request.selector)
    if operation is None:
        logger.warning("Rejected request: unknown selector 0x%s", request.selector.hex())
        return ComputeResult(error=ErrorKind.UNKNOWN_SELECTOR)

    try:
        output = operation(request.args)
    except WireFormatError as e:
        logger.warning("Rejected request: %s", e)
        return ComputeResult(error=e.kind)

    logger.debug("%s -> %d bytes", operation.__name__, len(output))
    return ComputeResult(output=output)


def required_gas(data: bytes) -> int:
    """Flat host accounting cost; the input length does not matter."""
    return BLACK76_GAS


def encode_request(
    operation: str,
    expiry_seconds: int,
    discount: int,
    volatility: int,
    forward: int,
    strike: int,
    exponent: int,
) -> bytes:
    """
    Build a full request for a named operation from raw scaled integers.

    Raises:
        ValueError: If the operation is unknown or a field does not fit
    """
    try:
        selector = SELECTORS[operation]
    except KeyError:
        raise ValueError(
            f"operation must be one of {sorted(SELECTORS)}, got '{operation}'"
        ) from None
    return selector + encode_arguments(
        expiry_seconds, discount, volatility, forward, strike, exponent
    )


def decode_response(output: bytes, exponent: int) -> list[float]:
    """Decode every 16-byte word of a successful response."""
    return [decode_word(word, exponent) for word in split_words(output)]
