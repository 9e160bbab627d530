"""
BigDecimal to canonical text.

- showx renders the exact value in fixed-point form: optional "-", whole
  digits (never empty, "0" instead), and a fractional part with trailing
  zeros trimmed. No decimal point is printed when the fraction is empty.
- show reduces first (or rounds to `max_prec` digits, Even) and then calls
  showx. parse_decimal(show(x)) == x for every finite x.
- show_exp renders scientific form, e.g. "1.25e+3" or "-5e-7".
"""

from __future__ import annotations

from .number import (
    BigDecimal,
    _ten_pow,
    count_digits,
    reduce,
    trailing_zeros,
)
from .rounding import round_to_prec


def showx(x: BigDecimal) -> str:
    """Exact fixed-point rendering of x as stored (no rounding)."""
    m, e = x.mantissa, x.exponent
    if m == 0:
        return "0"
    sign = "-" if m < 0 else ""
    digits = str(abs(m))
    if e >= 0:
        return sign + digits + "0" * e
    n = -e
    if len(digits) <= n:
        whole, frac = "", digits.rjust(n, "0")
    else:
        whole, frac = digits[:-n], digits[-n:]
    frac = frac.rstrip("0")
    if not frac:
        return sign + (whole or "0")
    return f"{sign}{whole or '0'}.{frac}"


def show(x: BigDecimal, max_prec: int = -1) -> str:
    """Canonical text; with max_prec >= 0 round (Even) to that many fraction digits first."""
    if max_prec < 0:
        return showx(reduce(x))
    return showx(round_to_prec(x, max_prec))


def _strip(x: BigDecimal):
    tz = trailing_zeros(x.mantissa)
    return x.mantissa // _ten_pow(tz), x.exponent + tz


def show_exp(x: BigDecimal, prec: int = -1) -> str:
    """Scientific rendering; with prec >= 0 round (Even) to prec digits after the leading one."""
    if x.is_zero():
        return "0"
    m, e = _strip(x)
    lead = e + count_digits(m) - 1
    if prec >= 0:
        m, e = _strip(round_to_prec(x, prec - lead))
        if m == 0:
            return "0"
        lead = e + count_digits(m) - 1
    digits = str(abs(m))
    body = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    sign = "-" if m < 0 else ""
    return f"{sign}{body}e{lead:+d}"


__all__ = [
    "showx",
    "show",
    "show_exp",
]
