"""Description of a Q-format fixed-point layout."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from fixmath.constants import FRAC_BITS, WORD_BITS


class FixedPointFormat(BaseModel):
    """A Qm.n layout: a signed word of `word_bits` bits, `frac_bits` of them fractional.

    Formats are immutable and hashable so they can be compared cheaply when
    checking that two operands share an encoding.

    Attributes:
        frac_bits: Number of low-order bits holding the fraction
        word_bits: Total width of the two's-complement word
    """

    frac_bits: int = Field(default=FRAC_BITS, ge=0, description="Fractional bits (n).")
    word_bits: int = Field(default=WORD_BITS, ge=2, description="Total word width.")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def _check_layout(self) -> FixedPointFormat:
        if self.frac_bits >= self.word_bits:
            raise ValueError(
                f"frac_bits ({self.frac_bits}) must be less than word_bits ({self.word_bits})"
            )
        return self

    @property
    def int_bits(self) -> int:
        """Bits left for the integer part, sign bit included."""
        return self.word_bits - self.frac_bits

    @property
    def one(self) -> int:
        """Raw encoding of 1.0."""
        return 1 << self.frac_bits

    @property
    def min_raw(self) -> int:
        """Smallest raw encoding, -2**(word_bits - 1)."""
        return -(1 << (self.word_bits - 1))

    @property
    def max_raw(self) -> int:
        """Largest raw encoding, 2**(word_bits - 1) - 1."""
        return (1 << (self.word_bits - 1)) - 1

    @property
    def min_int(self) -> int:
        """Smallest integer from_int converts without wrapping."""
        return self.min_raw >> self.frac_bits

    @property
    def max_int(self) -> int:
        """Largest integer from_int converts without wrapping."""
        return self.max_raw >> self.frac_bits

    @property
    def q_notation(self) -> str:
        """Qm.n name of the layout, m counting the sign bit (e.g. "Q16.16")."""
        return f"Q{self.int_bits}.{self.frac_bits}"

    def __str__(self) -> str:
        return self.q_notation


DEFAULT_FORMAT = FixedPointFormat(frac_bits=FRAC_BITS, word_bits=WORD_BITS)
