"""
exactdec Core Constants (integer domain)
========================================

Tuning constants for exponent quantisation, division and float bridging.
All arithmetic stays in the integer domain; these only pick block sizes,
default precisions and the envelope of the float division shortcut.
"""

# NOTE: FAST_DIV_* bound the double-precision division shortcut. Outside this
# envelope division always takes the exact integer path.

# ---------------------------------------------------------------------------
# Exponent quantisation
# ---------------------------------------------------------------------------

#: Normalised exponents are multiples of this block size (round_exp).
EXP_QUANTUM: int = 7


# ---------------------------------------------------------------------------
# Division
# ---------------------------------------------------------------------------

#: Default minimum number of extra fractional digits produced by `div` and `/`.
DEFAULT_DIV_PREC: int = 15

#: Fast path only when the requested precision is at most this.
FAST_DIV_MAX_PREC: int = 15

#: Fast path only when |x.exponent - y.exponent| is at most this.
FAST_DIV_MAX_EXP_DIFF: int = 15

#: Both mantissas must lie within [-limit, limit] (exact as IEEE doubles).
FAST_DIV_MANTISSA_LIMIT: int = 10 ** 15


# ---------------------------------------------------------------------------
# Float bridge
# ---------------------------------------------------------------------------

#: Fixed-point digits used when rendering the fractional part of a float.
DEFAULT_FLOAT_PREC: int = 16


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "EXP_QUANTUM",
    "DEFAULT_DIV_PREC",
    "FAST_DIV_MAX_PREC",
    "FAST_DIV_MAX_EXP_DIFF",
    "FAST_DIV_MANTISSA_LIMIT",
    "DEFAULT_FLOAT_PREC",
]
