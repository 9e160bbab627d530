"""
Rounding engine: seven rounding modes and precision-bounded rounding.

Key behaviours:
- round_to_prec(x, prec, mode) keeps `prec` digits after the decimal point
  (negative prec rounds to tens, hundreds, ...). Values already on the grid
  are returned unchanged.
- The dropped digits are split off by floor division by 10^p, so the
  quotient q is floor(x / 10^-prec) and the remainder r is in [0, 10^p).
- Mode dispatch looks at r against half = 10^p / 2 and, for the signed
  modes, at the sign of q (not the sign of x):

    EVEN       r == half: make q even;  r > half: q+1
    HALF_UP    r == half: q+1 if q < 0; r > half: q+1
    HALF_DOWN  r == half: q+1 if q >= 0; r > half: q+1
    FLOOR      q
    CEIL       q+1
    UP         q+1 if q > 0
    DOWN       q+1 if q < 0   (toward zero for negative quotients)

  Note that UP leaves a zero quotient alone (UP of 0.5 is 0).
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .exc import DecimalDomainError
from .number import (
    BigDecimal,
    _ten_pow,
    decimal_exp,
    divmod_exp10,
    mul_exp10,
    reduce,
)

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


class RoundingMode(Enum):
    """Tie-break and truncation policy for round_to_prec."""

    EVEN = "even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    FLOOR = "floor"
    CEIL = "ceil"
    UP = "up"
    DOWN = "down"

    @classmethod
    def coerce(cls, mode: Union["RoundingMode", str]) -> "RoundingMode":
        """Accept a member or its name/value as a string (case-insensitive)."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip().lower().replace("-", "_")
            for m in cls:
                if m.value == key:
                    return m
        raise DecimalDomainError(f"unknown rounding mode: {mode!r}")


def _round_rem(q: int, r: int, p: int, mode: RoundingMode) -> int:
    """Apply `mode` to quotient q with remainder r of a division by 10^p."""
    if r == 0:
        return q
    half = _ten_pow(p) // 2
    _dbg(f"round: q={q}, r={r}, half={half}, mode={mode.value}")
    if mode is RoundingMode.EVEN:
        if r == half:
            return q if q % 2 == 0 else q + 1
        return q + 1 if r > half else q
    if mode is RoundingMode.HALF_UP:
        if r == half:
            return q + 1 if q < 0 else q
        return q + 1 if r > half else q
    if mode is RoundingMode.HALF_DOWN:
        if r == half:
            return q + 1 if q >= 0 else q
        return q + 1 if r > half else q
    if mode is RoundingMode.FLOOR:
        return q
    if mode is RoundingMode.CEIL:
        return q + 1
    if mode is RoundingMode.UP:
        return q + 1 if q > 0 else q
    if mode is RoundingMode.DOWN:
        return q + 1 if q < 0 else q
    raise DecimalDomainError(f"unhandled rounding mode: {mode!r}")


def round_to_prec(
    x: BigDecimal,
    prec: int = 0,
    mode: Union[RoundingMode, str] = RoundingMode.EVEN,
) -> BigDecimal:
    """Round x to `prec` digits after the decimal point."""
    mode = RoundingMode.coerce(mode)
    if x.exponent >= -prec:
        return x
    cx = reduce(x)
    p = -cx.exponent - prec
    if p <= 0:
        return cx
    q, r = divmod_exp10(cx.mantissa, p)
    return decimal_exp(_round_rem(q, r, p, mode), -prec)


def round_decimal(x: BigDecimal, mode: Union[RoundingMode, str] = RoundingMode.EVEN) -> BigDecimal:
    """Round to a whole number, keeping the BigDecimal type."""
    return round_to_prec(x, 0, mode)


def to_int(x: BigDecimal, mode: Union[RoundingMode, str] = RoundingMode.EVEN) -> int:
    """Round to a whole number and return it as an int."""
    r = round_decimal(x, mode)
    # round_to_prec(.., 0, ..) always yields a non-negative exponent
    return mul_exp10(r.mantissa, r.exponent)


def floor(x: BigDecimal) -> int:
    return to_int(x, RoundingMode.FLOOR)


def ceiling(x: BigDecimal) -> int:
    return to_int(x, RoundingMode.CEIL)


def trunc(x: BigDecimal) -> int:
    return to_int(x, RoundingMode.DOWN)


__all__ = [
    "RoundingMode",
    "reduce",
    "round_to_prec",
    "round_decimal",
    "to_int",
    "floor",
    "ceiling",
    "trunc",
]
