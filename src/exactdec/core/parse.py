"""
Text to BigDecimal.

Grammar (ASCII digits only, whole string must match):

    sign? digit+ ("." digit+)? (("e" | "E") sign? digit+)?

The exponent suffix is what `show_exp` emits; plain fixed-point literals are
what `show` emits. Malformed input yields None from `parse_decimal`; only the
strict variant raises.
"""

from __future__ import annotations

import re
from typing import Optional

from .exc import DecimalDomainError, DecimalParseError
from .number import BigDecimal, decimal, decimal_exp, negate

# Debug printing control
DEBUG_PARSE = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSE:
        print(msg)


_DECIMAL_RE = re.compile(r"([+-]?)([0-9]+)(?:\.([0-9]+))?(?:[eE]([+-]?[0-9]+))?")


def parse_decimal(s: str) -> Optional[BigDecimal]:
    """Parse a decimal literal; return None when `s` does not match the grammar."""
    if not isinstance(s, str):
        raise DecimalDomainError(f"parse_decimal expects str, got {type(s).__name__}")
    m = _DECIMAL_RE.fullmatch(s)
    if m is None:
        _dbg(f"parse: no match for {s!r}")
        return None
    sign, whole, frac, exp = m.groups()
    frac = frac or ""
    x = decimal(int(whole), int(frac) if frac else 0, len(frac))
    if exp:
        x = decimal_exp(x.mantissa, x.exponent + int(exp))
    if sign == "-":
        x = negate(x)
    return x


def parse_decimal_strict(s: str) -> BigDecimal:
    """Parse a decimal literal; raise DecimalParseError on malformed input."""
    x = parse_decimal(s)
    if x is None:
        raise DecimalParseError(s)
    return x


__all__ = [
    "parse_decimal",
    "parse_decimal_strict",
]
