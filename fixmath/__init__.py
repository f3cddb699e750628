"""Fixed-point arithmetic with native integer semantics.

This package provides Q-format fixed-point primitives whose results match
fixed-width two's-complement integer code bit for bit:
- ops: from_int, to_int, add, sub, mod on raw int encodings
- Fix: immutable value type with operator support
"""

from fixmath.constants import FIX_MAX, FIX_MIN, FRAC_BITS, INT_MAX, INT_MIN, ONE, WORD_BITS
from fixmath.errors import DivisionByZero, FixMathError, FormatMismatch
from fixmath.fix import Fix
from fixmath.format import DEFAULT_FORMAT, FixedPointFormat
from fixmath.ops import add, from_int, mod, sub, to_int

__all__ = [
    # Constants
    "FRAC_BITS",
    "WORD_BITS",
    "ONE",
    "FIX_MIN",
    "FIX_MAX",
    "INT_MIN",
    "INT_MAX",
    # Formats
    "FixedPointFormat",
    "DEFAULT_FORMAT",
    # Operations
    "from_int",
    "to_int",
    "add",
    "sub",
    "mod",
    # Classes
    "Fix",
    # Errors
    "FixMathError",
    "DivisionByZero",
    "FormatMismatch",
]
