"""
exactdec Core
=============

Unified exports for the integer-domain decimal primitives.
All arithmetic is exact on (mantissa, exponent) pairs; the only inexact
operations are the float bridges and the bounded-precision division.
"""

# NOTE:
#   Every BigDecimal is immutable. Exponents are quantised to multiples of
#   EXP_QUANTUM; equality and ordering are value-based, never structural.

# Tuning constants
from .constants import (
    EXP_QUANTUM,
    DEFAULT_DIV_PREC,
    FAST_DIV_MAX_PREC,
    FAST_DIV_MAX_EXP_DIFF,
    FAST_DIV_MANTISSA_LIMIT,
    DEFAULT_FLOAT_PREC,
)

# Representation, alignment and arithmetic
from .number import (
    BigDecimal,
    round_exp,
    decimal_exp,
    decimal,
    expand,
    add,
    sub,
    negate,
    multiply,
    pow_int,
    compare,
    sign,
    minimum,
    maximum,
    sum_decimals,
    inc,
    dec,
    count_digits,
)

# Rounding engine
from .rounding import (
    RoundingMode,
    reduce,
    round_to_prec,
    round_decimal,
    to_int,
    floor,
    ceiling,
    trunc,
)

# Division
from .division import div

# Conversions
from .convert import (
    from_float,
    to_float,
    ffraction,
    fraction,
    from_py_decimal,
    to_py_decimal,
    as_fraction,
    from_fraction_exact,
)

# Text
from .parse import parse_decimal, parse_decimal_strict
from .fmt import show, showx, show_exp

# Core exceptions
from .exc import DecimalDomainError, DecimalParseError

__all__ = [
    # constants
    "EXP_QUANTUM",
    "DEFAULT_DIV_PREC",
    "FAST_DIV_MAX_PREC",
    "FAST_DIV_MAX_EXP_DIFF",
    "FAST_DIV_MANTISSA_LIMIT",
    "DEFAULT_FLOAT_PREC",
    # number
    "BigDecimal",
    "round_exp",
    "decimal_exp",
    "decimal",
    "expand",
    "add",
    "sub",
    "negate",
    "multiply",
    "pow_int",
    "compare",
    "sign",
    "minimum",
    "maximum",
    "sum_decimals",
    "inc",
    "dec",
    "count_digits",
    # rounding
    "RoundingMode",
    "reduce",
    "round_to_prec",
    "round_decimal",
    "to_int",
    "floor",
    "ceiling",
    "trunc",
    # division
    "div",
    # conversions
    "from_float",
    "to_float",
    "ffraction",
    "fraction",
    "from_py_decimal",
    "to_py_decimal",
    "as_fraction",
    "from_fraction_exact",
    # text
    "parse_decimal",
    "parse_decimal_strict",
    "show",
    "showx",
    "show_exp",
    # exceptions
    "DecimalDomainError",
    "DecimalParseError",
]
