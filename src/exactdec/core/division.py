"""
Precision-bounded division with a double-precision fast path.

Alignment notes:
- Zero on either side yields zero; division never raises.
- Fast path: when min_prec <= FAST_DIV_MAX_PREC, |x.exp - y.exp| <=
  FAST_DIV_MAX_EXP_DIFF and both mantissas are within +/-FAST_DIV_MANTISSA_LIMIT
  (exact as doubles), the mantissas are divided as floats, the quotient is
  rebuilt with `from_float` and shifted by the exponent difference. When fewer
  than FAST_DIV_MAX_PREC digits were requested, the result is floored to the
  same scale the exact path would produce.
- Negative min_prec is clamped to 0 on both paths.
- Slow path: scale x's mantissa by 10^max(min_prec, 0), floor-divide by y's mantissa,
  set exponent to (x.exp - y.exp) - max(min_prec, 0), then reduce.
"""

from __future__ import annotations

from .constants import (
    DEFAULT_DIV_PREC,
    FAST_DIV_MAX_PREC,
    FAST_DIV_MAX_EXP_DIFF,
    FAST_DIV_MANTISSA_LIMIT,
)
from .convert import from_float
from .number import BigDecimal, decimal_exp, mul_exp10, reduce
from .rounding import RoundingMode, round_to_prec

# Debug printing control
DEBUG_DIVISION = False

def _dbg(msg: str) -> None:
    if DEBUG_DIVISION:
        print(msg)


def _fits_double(m: int) -> bool:
    return -FAST_DIV_MANTISSA_LIMIT <= m <= FAST_DIV_MANTISSA_LIMIT


def _use_fast_path(x: BigDecimal, y: BigDecimal, min_prec: int) -> bool:
    return (
        min_prec <= FAST_DIV_MAX_PREC
        and abs(x.exponent - y.exponent) <= FAST_DIV_MAX_EXP_DIFF
        and _fits_double(x.mantissa)
        and _fits_double(y.mantissa)
    )


def div(x: BigDecimal, y: BigDecimal, min_prec: int = DEFAULT_DIV_PREC) -> BigDecimal:
    """Divide x by y with at least `min_prec` digits beyond the operands' scale."""
    if x.is_zero() or y.is_zero():
        _dbg("div: zero operand -> zero")
        return BigDecimal.zero()
    e = x.exponent - y.exponent
    p = max(min_prec, 0)
    if _use_fast_path(x, y, min_prec):
        q = from_float(float(x.mantissa) / float(y.mantissa))
        _dbg(f"div: fast path m={x.mantissa}/{y.mantissa}, e={e} -> q=({q.mantissa},{q.exponent})")
        z = decimal_exp(q.mantissa, q.exponent + e)
        if min_prec < FAST_DIV_MAX_PREC:
            z = round_to_prec(z, p - e, RoundingMode.FLOOR)
        return z
    m = mul_exp10(x.mantissa, p) // y.mantissa
    _dbg(f"div: slow path m={m}, e={e - p}")
    return reduce(decimal_exp(m, e - p))


__all__ = [
    "div",
]
