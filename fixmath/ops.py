"""Fixed-point conversion and arithmetic.

Values are plain ints holding the raw two's-complement encoding of a
fixed-point number (Q16.16 by default, see fixmath.constants). Every
operation wraps its result to the word width exactly as native integer
arithmetic would, so results are bit-identical to the equivalent C code.

Usage pattern:
    from fixmath import ops

    a = ops.from_int(7)          # 458752
    b = ops.from_int(3)          # 196608
    ops.add(a, b)                # from_int(10)
    ops.mod(a, b)                # from_int(1)
"""

from __future__ import annotations

import structlog

from fixmath.format import DEFAULT_FORMAT, FixedPointFormat
from fixmath.wrapping import fits, rem_trunc, wrap

__all__ = ["from_int", "to_int", "add", "sub", "mod"]

logger = structlog.get_logger()


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful operand
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} requires int, got {type(value).__name__}")
    return value


def _wrap_result(op: str, value: int, fmt: FixedPointFormat) -> int:
    if fits(value, fmt.word_bits):
        return value
    wrapped = wrap(value, fmt.word_bits)
    logger.debug(
        "fixed_point_wrapped",
        op=op,
        value=value,
        wrapped=wrapped,
        format=fmt.q_notation,
    )
    return wrapped


def from_int(i: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> int:
    """Convert an integer to fixed-point with a zero fractional part.

    Equivalent to i << frac_bits, i.e. i * 2**frac_bits. Integers outside
    [fmt.min_int, fmt.max_int] wrap silently.

    Raises:
        TypeError: If i is not an int
    """
    i = _require_int("from_int", i)
    return _wrap_result("from_int", i << fmt.frac_bits, fmt)


def to_int(a: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> int:
    """Integer part of a fixed-point value.

    Arithmetic right shift, so negative values round toward negative
    infinity: to_int(from_int(-1) + 1) == -1.
    """
    a = _require_int("to_int", a)
    return wrap(a, fmt.word_bits) >> fmt.frac_bits


def add(a: int, b: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> int:
    """Fixed-point addition.

    Both operands share the same scale, so the raw sum is the encoded sum.
    """
    a, b = _require_int("add", a), _require_int("add", b)
    return _wrap_result("add", a + b, fmt)


def sub(a: int, b: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> int:
    """Fixed-point subtraction."""
    a, b = _require_int("sub", a), _require_int("sub", b)
    return _wrap_result("sub", a - b, fmt)


def mod(a: int, b: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> int:
    """Remainder of the raw encodings, truncating toward zero.

    The result is not rescaled and takes the sign of a. For operands with
    the same scale this is also the fixed-point remainder:
    mod(from_int(7), from_int(3)) == from_int(1).

    Operands are first reduced to the word width, so a divisor that wraps
    to zero (e.g. 2**32 in Q16.16) is a zero divisor.

    Raises:
        DivisionByZero: If b is zero after wrapping
    """
    a, b = _require_int("mod", a), _require_int("mod", b)
    a, b = wrap(a, fmt.word_bits), wrap(b, fmt.word_bits)
    # |a % b| <= |a| for in-range operands, so the result never needs wrapping
    return rem_trunc(a, b)
