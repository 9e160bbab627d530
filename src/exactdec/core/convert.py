"""
Conversions between BigDecimal and Python's float, decimal.Decimal and Fraction.

- from_float is lossy by construction: it renders the float's fractional part
  as a fixed-point string and rebuilds the value from those digits, so binary
  artefacts show up (1.1 -> 1.1000000000000001) exactly as the platform's
  fixed-point formatting prints them.
- to_float is lossy beyond ~15-17 significant digits.
- The decimal.Decimal and Fraction bridges are exact.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

from .constants import DEFAULT_FLOAT_PREC
from .exc import DecimalDomainError
from .number import (
    BigDecimal,
    _ten_pow,
    decimal,
    decimal_exp,
    divmod_exp10,
    mul_exp10,
    sub,
)
from .rounding import floor, trunc


# ----------------------------
# float bridge
# ----------------------------

def from_float(d: float, max_prec: int = DEFAULT_FLOAT_PREC) -> BigDecimal:
    """Approximate a float using at most `max_prec` fractional digits."""
    if isinstance(d, bool) or not isinstance(d, (int, float)):
        raise DecimalDomainError(f"from_float expects a float, got {type(d).__name__}")
    try:
        d = float(d)
    except OverflowError:
        raise DecimalDomainError(f"int too large for a float: {d.bit_length()} bits") from None
    if math.isnan(d) or math.isinf(d):
        raise DecimalDomainError(f"non-finite float cannot be represented: {d!r}")
    whole = math.floor(d)
    frac = d - whole
    if frac == 0:
        return decimal_exp(whole, 0)
    s = f"{frac:.{max(max_prec, 0)}f}"
    head, _, digits = s.partition(".")
    # rounding the fraction may carry into the whole part ("1.000...")
    return decimal(whole + int(head), int(digits) if digits else 0, len(digits))


def _int_to_float(i: int) -> float:
    try:
        return float(i)
    except OverflowError:
        return math.inf if i > 0 else -math.inf


def to_float(x: BigDecimal) -> float:
    """Nearest-ish float; whole part plus a correctly rounded fraction, split on |mantissa|."""
    if x.exponent >= 0:
        return _int_to_float(mul_exp10(x.mantissa, x.exponent))
    q, r = divmod_exp10(abs(x.mantissa), -x.exponent)
    f = _int_to_float(q) + r / _ten_pow(-x.exponent)
    return -f if x.mantissa < 0 else f


def ffraction(x: BigDecimal) -> float:
    """Fractional part in [0, 1): x - floor(x)."""
    return to_float(sub(x, decimal_exp(floor(x), 0)))


def fraction(x: BigDecimal) -> float:
    """Signed fractional part in (-1, 1): x - trunc(x)."""
    return to_float(sub(x, decimal_exp(trunc(x), 0)))


# ----------------------------
# decimal.Decimal / Fraction bridges (exact)
# ----------------------------

def from_py_decimal(x: Decimal) -> BigDecimal:
    """Bridge from decimal.Decimal; exact for every finite input."""
    if not isinstance(x, Decimal):
        raise DecimalDomainError(f"from_py_decimal expects decimal.Decimal, got {type(x).__name__}")
    if x.is_nan() or x.is_infinite():
        raise DecimalDomainError("invalid Decimal for BigDecimal")
    tup = x.as_tuple()
    digits = int("".join(str(d) for d in tup.digits)) if tup.digits else 0
    if tup.sign:
        digits = -digits
    return decimal_exp(digits, tup.exponent)


def to_py_decimal(x: BigDecimal) -> Decimal:
    """Exact decimal.Decimal view, independent of the current context precision."""
    digits = tuple(int(c) for c in str(abs(x.mantissa)))
    return Decimal((1 if x.mantissa < 0 else 0, digits, x.exponent))


def as_fraction(x: BigDecimal) -> Fraction:
    return x.as_fraction()


def from_fraction_exact(f: Fraction) -> BigDecimal:
    """Exact conversion when the denominator has only factors 2 and 5."""
    f = Fraction(f)
    den = f.denominator
    twos = fives = 0
    while den % 2 == 0:
        den //= 2
        twos += 1
    while den % 5 == 0:
        den //= 5
        fives += 1
    if den != 1:
        raise DecimalDomainError(f"{f} has no terminating decimal expansion")
    p = max(twos, fives)
    # f = num / (2^twos * 5^fives) = num * 2^(p-twos) * 5^(p-fives) / 10^p
    m = f.numerator * (2 ** (p - twos)) * (5 ** (p - fives))
    return decimal_exp(m, -p)


__all__ = [
    "from_float",
    "to_float",
    "ffraction",
    "fraction",
    "from_py_decimal",
    "to_py_decimal",
    "as_fraction",
    "from_fraction_exact",
]
