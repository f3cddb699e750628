"""Native fixed-width integer semantics on top of Python ints.

Python ints are arbitrary precision and its % operator floors toward
negative infinity. Native signed integers instead wrap on overflow and
truncate toward zero. These helpers reproduce the native behaviour.
"""

from __future__ import annotations

from fixmath.errors import DivisionByZero


def wrap(value: int, word_bits: int) -> int:
    """Reduce value to the two's-complement range of a word_bits-wide integer.

    Keeps the low word_bits bits and reinterprets the top one as the sign.

    Examples:
        wrap(2**31, 32) = -2**31
        wrap(-2**31 - 1, 32) = 2**31 - 1
    """
    mask = (1 << word_bits) - 1
    sign_bit = 1 << (word_bits - 1)
    return ((value & mask) ^ sign_bit) - sign_bit


def fits(value: int, word_bits: int) -> bool:
    """Check whether value is representable without wrapping."""
    return -(1 << (word_bits - 1)) <= value < (1 << (word_bits - 1))


def rem_trunc(a: int, b: int) -> int:
    """Remainder with truncation toward zero (matching C's % operator).

    The result has the sign of the dividend, unlike Python's % which takes
    the sign of the divisor.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a - b * trunc(a / b)

    Raises:
        DivisionByZero: If b is zero

    Examples:
        Python: -7 % 3 = 2
        C: -7 % 3 = -1
    """
    if b == 0:
        raise DivisionByZero(f"Modulo by zero: {a} % 0")

    # abs(a) % abs(b) is the magnitude of the truncated remainder; only the
    # sign of the dividend matters.
    r = abs(a) % abs(b)
    return -r if a < 0 else r
