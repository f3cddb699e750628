"""Build-time constants for the fixed-point encoding.

The default layout is Q16.16: a 32-bit two's-complement word whose low 16
bits hold the fraction. Change FRAC_BITS / WORD_BITS here to rebuild the
library for another layout.
"""

# Number of low-order bits holding the fractional part
FRAC_BITS = 16

# Width of the underlying signed integer (matches a native C int)
WORD_BITS = 32

# Encoding of 1.0
ONE = 1 << FRAC_BITS

# Raw bounds of a fix value
FIX_MIN = -(1 << (WORD_BITS - 1))
FIX_MAX = (1 << (WORD_BITS - 1)) - 1

# Integers that from_int converts without wrapping
INT_MIN = FIX_MIN >> FRAC_BITS
INT_MAX = FIX_MAX >> FRAC_BITS
