"""Fix: a fixed-point value type with operator support.

Thin wrapper over fixmath.ops for code that prefers operators to function
calls. The raw encoding is wrapped to the word width on construction, so a
Fix always holds a representable value.

Usage pattern:
    from fixmath import Fix

    a = Fix.from_int(7)
    b = Fix.from_int(3)
    (a % b).raw      # 65536
    int(a - b)       # 4
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fixmath import ops
from fixmath.errors import FormatMismatch
from fixmath.format import DEFAULT_FORMAT, FixedPointFormat
from fixmath.wrapping import wrap


@dataclass(frozen=True, eq=False, slots=True)
class Fix:
    """Fixed-point number stored as its raw two's-complement encoding.

    Example (Q16.16): 1.5 is stored as 98304 (0x18000).

    Values of different formats compare unequal with ==, while <, <=, > and
    >= raise FormatMismatch.

    Attributes:
        raw: The encoded integer, always within [fmt.min_raw, fmt.max_raw]
        fmt: Layout of the encoding
    """

    raw: int
    fmt: FixedPointFormat = field(default=DEFAULT_FORMAT, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError(f"Fix requires int, got {type(self.raw).__name__}")
        object.__setattr__(self, "raw", wrap(self.raw, self.fmt.word_bits))

    @classmethod
    def from_int(cls, i: int, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> Fix:
        """Create from integer (shifted left by fmt.frac_bits)."""
        return cls(ops.from_int(i, fmt=fmt), fmt=fmt)

    @classmethod
    def zero(cls, *, fmt: FixedPointFormat = DEFAULT_FORMAT) -> Fix:
        """Create a Fix with value 0."""
        return cls(0, fmt=fmt)

    def to_int(self) -> int:
        """Integer part, rounding toward negative infinity."""
        return ops.to_int(self.raw, fmt=self.fmt)

    def _other_raw(self, other: Fix) -> int:
        if other.fmt != self.fmt:
            raise FormatMismatch(f"Cannot combine {self.fmt} with {other.fmt}")
        return other.raw

    # --- Arithmetic operations ---

    def __add__(self, other: object) -> Fix:
        if not isinstance(other, Fix):
            return NotImplemented
        return Fix(ops.add(self.raw, self._other_raw(other), fmt=self.fmt), fmt=self.fmt)

    def __sub__(self, other: object) -> Fix:
        if not isinstance(other, Fix):
            return NotImplemented
        return Fix(ops.sub(self.raw, self._other_raw(other), fmt=self.fmt), fmt=self.fmt)

    def __mod__(self, other: object) -> Fix:
        """Truncating remainder.

        Raises:
            DivisionByZero: If other is zero
        """
        if not isinstance(other, Fix):
            return NotImplemented
        return Fix(ops.mod(self.raw, self._other_raw(other), fmt=self.fmt), fmt=self.fmt)

    def __neg__(self) -> Fix:
        # -FIX_MIN wraps back to FIX_MIN, as in C
        return Fix(ops.sub(0, self.raw, fmt=self.fmt), fmt=self.fmt)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        """Equal when both format and raw encoding match; never raises."""
        if not isinstance(other, Fix):
            return NotImplemented
        return self.fmt == other.fmt and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((self.raw, self.fmt))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fix):
            return NotImplemented
        return self.raw < self._other_raw(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fix):
            return NotImplemented
        return self.raw <= self._other_raw(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fix):
            return NotImplemented
        return self.raw > self._other_raw(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fix):
            return NotImplemented
        return self.raw >= self._other_raw(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self.raw != 0

    def __repr__(self) -> str:
        if self.fmt == DEFAULT_FORMAT:
            return f"Fix({self.raw})"
        return f"Fix({self.raw}, {self.fmt.q_notation})"
