"""
Pytest configuration and shared fixtures.
"""

import pytest

from black76.utils.constants import SECONDS_PER_YEAR

ONE_YEAR = int(SECONDS_PER_YEAR)
NINETY_DAYS = 90 * 24 * 3600
WAD = 10**18


@pytest.fixture
def standard_params():
    """At-the-money forward option, one year, 20% vol."""
    return {
        "fwd": 100.0,
        "vol": 0.20,
        "strike": 100.0,
        "tau": 1.0,
    }


@pytest.fixture
def itm_call_params():
    """In-the-money call parameters."""
    return {
        "fwd": 110.0,
        "vol": 0.20,
        "strike": 100.0,
        "tau": 1.0,
    }


@pytest.fixture
def wad_request_fields():
    """
    Raw request fields at exponent 18: F=100, K=100, σ=20%, D=1, one year.
    """
    return {
        "expiry_seconds": ONE_YEAR,
        "discount": WAD,
        "volatility": 2 * WAD // 10,
        "forward": 100 * WAD,
        "strike": 100 * WAD,
        "exponent": 18,
    }


@pytest.fixture
def args_block(wad_request_fields):
    """61-byte argument block for the standard WAD request."""
    from black76.protocol.arguments import encode_arguments

    return encode_arguments(**wad_request_fields)
