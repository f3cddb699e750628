"""Pytest configuration and fixtures."""

import pytest

from fixmath.format import FixedPointFormat


@pytest.fixture
def q8_8() -> FixedPointFormat:
    """A 16-bit Q8.8 layout, small enough to hit wraparound easily."""
    return FixedPointFormat(frac_bits=8, word_bits=16)


@pytest.fixture
def q32_32() -> FixedPointFormat:
    """A 64-bit Q32.32 layout."""
    return FixedPointFormat(frac_bits=32, word_bits=64)
