# Top-level API for exactdec.
"""
Top-level API for exactdec (exact base-10 arithmetic).

This module exposes the stable surface:
  - BigDecimal: immutable mantissa * 10^exponent value with operators
  - constructors, rounding, division, text and float conversions

Everything is re-exported from `exactdec.core`; import submodules directly
only for the integer helpers (mul_exp10, divmod_exp10, trailing_zeros).
"""

from __future__ import annotations

from .core import (
    BigDecimal,
    RoundingMode,
    decimal,
    decimal_exp,
    div,
    round_to_prec,
    round_decimal,
    reduce,
    to_int,
    floor,
    ceiling,
    trunc,
    compare,
    minimum,
    maximum,
    sum_decimals,
    inc,
    dec,
    pow_int,
    parse_decimal,
    show,
    show_exp,
    from_float,
    to_float,
    ffraction,
    fraction,
    from_py_decimal,
    to_py_decimal,
    DecimalDomainError,
    DecimalParseError,
)

__version__ = "0.1.0"

__all__ = [
    "BigDecimal",
    "RoundingMode",
    "decimal",
    "decimal_exp",
    "div",
    "round_to_prec",
    "round_decimal",
    "reduce",
    "to_int",
    "floor",
    "ceiling",
    "trunc",
    "compare",
    "minimum",
    "maximum",
    "sum_decimals",
    "inc",
    "dec",
    "pow_int",
    "parse_decimal",
    "show",
    "show_exp",
    "from_float",
    "to_float",
    "ffraction",
    "fraction",
    "from_py_decimal",
    "to_py_decimal",
    "DecimalDomainError",
    "DecimalParseError",
]
