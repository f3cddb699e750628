"""Fixed-point error classes."""


class FixMathError(ArithmeticError):
    """Base error for fixed-point operations."""

    pass


class DivisionByZero(FixMathError, ZeroDivisionError):
    """Remainder with a zero divisor."""

    pass


class FormatMismatch(FixMathError):
    """Operands were encoded with different fixed-point formats."""

    pass
