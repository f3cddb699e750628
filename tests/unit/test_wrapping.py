"""Tests for native integer semantics helpers."""

import pytest

from fixmath.errors import DivisionByZero
from fixmath.wrapping import fits, rem_trunc, wrap


class TestWrap:
    """Tests for two's-complement wraparound."""

    def test_in_range_unchanged(self):
        """Representable values pass through."""
        assert wrap(0, 32) == 0
        assert wrap(12345, 32) == 12345
        assert wrap(-12345, 32) == -12345

    def test_bounds_unchanged(self):
        """INT32_MIN and INT32_MAX are representable."""
        assert wrap(2**31 - 1, 32) == 2**31 - 1
        assert wrap(-(2**31), 32) == -(2**31)

    def test_positive_overflow(self):
        """INT32_MAX + 1 wraps to INT32_MIN."""
        assert wrap(2**31, 32) == -(2**31)

    def test_negative_overflow(self):
        """INT32_MIN - 1 wraps to INT32_MAX."""
        assert wrap(-(2**31) - 1, 32) == 2**31 - 1

    def test_full_turn(self):
        """Adding 2^32 is a no-op."""
        assert wrap(7 + 2**32, 32) == 7
        assert wrap(-7 - 2**32, 32) == -7

    def test_small_width(self):
        """Works for widths other than 32."""
        assert wrap(128, 8) == -128
        assert wrap(255, 8) == -1
        assert wrap(256, 8) == 0


class TestFits:
    """Tests for the representability check."""

    def test_bounds(self):
        assert fits(2**31 - 1, 32)
        assert fits(-(2**31), 32)

    def test_outside(self):
        assert not fits(2**31, 32)
        assert not fits(-(2**31) - 1, 32)


class TestRemTrunc:
    """Tests for truncating remainder."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (7, 3, 1),
            (-7, 3, -1),
            (7, -3, 1),
            (-7, -3, -1),
            (6, 3, 0),
            (-6, 3, 0),
            (2, 5, 2),
            (-2, 5, -2),
        ],
    )
    def test_sign_follows_dividend(self, a, b, expected):
        """Matches C's % operator, not Python's."""
        assert rem_trunc(a, b) == expected

    def test_differs_from_python_mod(self):
        """Python floors -7 % 3 to 2; C truncates to -1."""
        assert -7 % 3 == 2
        assert rem_trunc(-7, 3) == -1

    def test_zero_divisor_raises(self):
        """Zero divisor raises DivisionByZero."""
        with pytest.raises(DivisionByZero, match="Modulo by zero"):
            rem_trunc(5, 0)

    def test_zero_divisor_is_zero_division_error(self):
        """DivisionByZero can be caught as ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            rem_trunc(0, 0)
