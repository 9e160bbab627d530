"""
Decimal primitive: BigDecimal (arbitrary-precision mantissa, signed exponent).

- Value = mantissa * 10^exponent; mantissa is an unbounded signed int.
- Exponents are quantised down to multiples of EXP_QUANTUM, so most operands
  already share an exponent and large mantissas are rescaled rarely. The price
  is a few trailing zero digits carried in the mantissa.
- Representation is not unique: (100, 0) and (1, 2) denote the same value.
  Equality, ordering and hashing are value-based and all go through `compare`.
- Values are immutable; every operation returns a new BigDecimal.

Alignment notes:
# - Add/sub/compare align both operands to the smaller exponent (exact).
# - Multiply sums exponents and reduces negative-exponent results to keep the
#   mantissa from accumulating trailing zeros.
# - Power-of-ten scaling and digit counting are the hot primitives; they are
#   kept as small module-level helpers (mul_exp10, divmod_exp10, count_digits).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Tuple

from .constants import EXP_QUANTUM
from .exc import DecimalDomainError

# Debug printing control
DEBUG_NUMBER = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMBER:
        print(msg)


# Lower bound for log10(2); used by count_digits to estimate from bit length.
_LOG10_2 = 0.30102999566398120


# ----------------------------
# Integer power-of-ten helpers
# ----------------------------

def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def mul_exp10(i: int, n: int) -> int:
    """Return i * 10^n for n >= 0."""
    if n == 0 or i == 0:
        return i
    return i * _ten_pow(n)


def divmod_exp10(i: int, n: int) -> Tuple[int, int]:
    """Floor-divide i by 10^n; the remainder is always in [0, 10^n)."""
    if n == 0:
        return i, 0
    return divmod(i, _ten_pow(n))


def count_digits(i: int) -> int:
    """Number of decimal digits of |i| (zero has one digit)."""
    n = abs(i)
    if n < 10:
        return 1
    k = int((n.bit_length() - 1) * _LOG10_2)
    # 10^k <= n < 10^(k+2)
    return k + 1 if n < _ten_pow(k + 1) else k + 2


def trailing_zeros(i: int) -> int:
    """Number of trailing zero digits of i (zero has none)."""
    if i == 0:
        return 0
    n = 0
    while i % 100_000_000 == 0:
        i //= 100_000_000
        n += 8
    while i % 10 == 0:
        i //= 10
        n += 1
    return n


# ----------------------------
# Exponent quantisation
# ----------------------------

def round_exp(e: int) -> int:
    """Quantise an exponent down to the nearest multiple of EXP_QUANTUM (0 stays 0)."""
    if e == 0:
        return 0
    return EXP_QUANTUM * (e // EXP_QUANTUM)


# ----------------------------
# BigDecimal (immutable value)
# ----------------------------

@dataclass(frozen=True)
class BigDecimal:
    """Exact decimal: mantissa * 10^exponent (signed, unbounded)."""
    mantissa: int
    exponent: int

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "BigDecimal":
        return BigDecimal(0, 0)

    @classmethod
    def from_components(cls, mantissa: int, exponent: int) -> "BigDecimal":
        """Value mantissa * 10^exponent with a quantised exponent (see `decimal_exp`)."""
        return decimal_exp(mantissa, exponent)

    @classmethod
    def of(cls, i: int, frac: int = 0, prec: int = -1) -> "BigDecimal":
        """Value i + frac * 10^-prec (see `decimal`)."""
        return decimal(i, frac, prec)

    @classmethod
    def from_str(cls, s: str) -> "BigDecimal":
        """Strict parse: like `parse_decimal` but raises DecimalParseError on malformed input."""
        from .parse import parse_decimal_strict  # parse builds on this module
        return parse_decimal_strict(s)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def is_pos(self) -> bool:
        return self.mantissa > 0

    def is_neg(self) -> bool:
        return self.mantissa < 0

    def sign(self) -> int:
        return sign(self)

    # ------------- views -------------

    def mantissa_exponent(self) -> Tuple[int, int]:
        """Return the raw (mantissa, exponent) pair; not canonical across equal values."""
        return self.mantissa, self.exponent

    def as_fraction(self) -> Fraction:
        """Return the value as an exact Fraction."""
        if self.exponent >= 0:
            return Fraction(mul_exp10(self.mantissa, self.exponent), 1)
        return Fraction(self.mantissa, _ten_pow(-self.exponent))

    # ------------- comparisons (integer domain) -------------

    def __eq__(self, other: object) -> bool:
        y = _coerce_or_none(other)
        if y is None:
            return NotImplemented
        return compare(self, y) == 0

    def __lt__(self, other: object) -> bool:
        y = _coerce_or_none(other)
        if y is None:
            return NotImplemented
        return compare(self, y) < 0

    def __le__(self, other: object) -> bool:
        y = _coerce_or_none(other)
        if y is None:
            return NotImplemented
        return compare(self, y) <= 0

    def __gt__(self, other: object) -> bool:
        y = _coerce_or_none(other)
        if y is None:
            return NotImplemented
        return compare(self, y) > 0

    def __ge__(self, other: object) -> bool:
        y = _coerce_or_none(other)
        if y is None:
            return NotImplemented
        return compare(self, y) >= 0

    def __hash__(self) -> int:
        # Fraction hashing agrees with int hashing, so 2 and BigDecimal(2) collide too.
        return hash(self.as_fraction())

    # ------------- arithmetic (integer domain) -------------

    def __add__(self, other: "BigDecimal") -> "BigDecimal":
        return add(self, _coerce(other))

    def __radd__(self, other: "BigDecimal") -> "BigDecimal":
        return add(_coerce(other), self)

    def __sub__(self, other: "BigDecimal") -> "BigDecimal":
        return sub(self, _coerce(other))

    def __rsub__(self, other: "BigDecimal") -> "BigDecimal":
        return sub(_coerce(other), self)

    def __mul__(self, other: "BigDecimal") -> "BigDecimal":
        return multiply(self, _coerce(other))

    def __rmul__(self, other: "BigDecimal") -> "BigDecimal":
        return multiply(_coerce(other), self)

    def __truediv__(self, other: "BigDecimal") -> "BigDecimal":
        from .division import div  # division builds on this module
        return div(self, _coerce(other))

    def __rtruediv__(self, other: "BigDecimal") -> "BigDecimal":
        from .division import div
        return div(_coerce(other), self)

    def __neg__(self) -> "BigDecimal":
        return negate(self)

    def __pos__(self) -> "BigDecimal":
        return self

    def __abs__(self) -> "BigDecimal":
        return negate(self) if self.mantissa < 0 else self

    def __bool__(self) -> bool:
        return self.mantissa != 0

    # ------------- conversions -------------

    def __int__(self) -> int:
        from .rounding import trunc
        return trunc(self)

    def __float__(self) -> float:
        from .convert import to_float
        return to_float(self)

    def __round__(self, ndigits=None):
        from .rounding import round_to_prec, to_int
        if ndigits is None:
            return to_int(self)
        return round_to_prec(self, ndigits)

    def __str__(self) -> str:
        from .fmt import show
        return show(self)

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"


def _coerce_or_none(x: object):
    if isinstance(x, BigDecimal):
        return x
    if isinstance(x, int):
        return decimal_exp(x, 0)
    return None


def _coerce(x: object) -> BigDecimal:
    y = _coerce_or_none(x)
    if y is None:
        raise DecimalDomainError(
            f"BigDecimal arithmetic requires BigDecimal or int operands, got {type(x).__name__}"
        )
    return y


# ----------------------------
# Constructors
# ----------------------------

def decimal_exp(i: int, exp: int) -> BigDecimal:
    """Exactly i * 10^exp, stored with exponent round_exp(exp) <= exp."""
    if not isinstance(i, int) or not isinstance(exp, int):
        raise DecimalDomainError(
            f"decimal_exp expects int mantissa and exponent, got ({type(i).__name__}, {type(exp).__name__})"
        )
    x = round_exp(exp)
    return BigDecimal(mul_exp10(i, exp - x), x)


def decimal(i: int, frac: int = 0, prec: int = -1) -> BigDecimal:
    """Build i + frac * 10^-prec.

    The precision is never less than the digit count of `frac`, so a
    negative `prec` means "exactly as many digits as frac has". A zero
    precision or zero fraction yields the integer i. `frac` is taken as a
    non-negative magnitude.
    """
    if not isinstance(frac, int) or not isinstance(prec, int):
        raise DecimalDomainError("decimal expects int fraction and precision")
    if prec == 0 or frac == 0:
        return decimal_exp(i, 0)
    p = max(count_digits(frac), prec)
    return decimal_exp(mul_exp10(i, p) + frac, -p)


# ----------------------------
# Alignment
# ----------------------------

def expand(x: BigDecimal, e: int) -> BigDecimal:
    """Rescale x so its exponent is exactly e (no-op when x.exponent <= e)."""
    if x.exponent <= e:
        return x
    return BigDecimal(mul_exp10(x.mantissa, x.exponent - e), e)


def _aligned(x: BigDecimal, y: BigDecimal) -> Tuple[int, int, int]:
    e = min(x.exponent, y.exponent)
    return expand(x, e).mantissa, expand(y, e).mantissa, e


# ----------------------------
# Arithmetic core
# ----------------------------

def add(x: BigDecimal, y: BigDecimal) -> BigDecimal:
    mx, my, e = _aligned(x, y)
    return decimal_exp(mx + my, e)


def sub(x: BigDecimal, y: BigDecimal) -> BigDecimal:
    mx, my, e = _aligned(x, y)
    return decimal_exp(mx - my, e)


def negate(x: BigDecimal) -> BigDecimal:
    return BigDecimal(-x.mantissa, x.exponent)


def multiply(x: BigDecimal, y: BigDecimal) -> BigDecimal:
    z = decimal_exp(x.mantissa * y.mantissa, x.exponent + y.exponent)
    if z.exponent < 0:
        return reduce(z)
    return z


def pow_int(x: BigDecimal, n: int) -> BigDecimal:
    """Exact x^n for integer n >= 0 (x^0 == 1, including 0^0)."""
    if not isinstance(n, int) or n < 0:
        raise DecimalDomainError(f"pow_int expects a non-negative int exponent, got n={n!r}")
    z = decimal_exp(x.mantissa ** n, x.exponent * n)
    if z.exponent < 0:
        return reduce(z)
    return z


def compare(x: BigDecimal, y: BigDecimal) -> int:
    """Three-way value comparison: -1, 0 or 1."""
    mx, my, _ = _aligned(x, y)
    return (mx > my) - (mx < my)


def sign(x: BigDecimal) -> int:
    return (x.mantissa > 0) - (x.mantissa < 0)


def minimum(x: BigDecimal, y: BigDecimal) -> BigDecimal:
    return x if compare(x, y) <= 0 else y


def maximum(x: BigDecimal, y: BigDecimal) -> BigDecimal:
    return x if compare(x, y) >= 0 else y


def sum_decimals(xs: Iterable[BigDecimal]) -> BigDecimal:
    """Sum of a sequence; the empty sum is zero."""
    total = BigDecimal.zero()
    for x in xs:
        total = add(total, x)
    return total


def inc(x: BigDecimal) -> BigDecimal:
    """Add one unit in the last place (10^exponent, not numeric 1)."""
    return decimal_exp(x.mantissa + 1, x.exponent)


def dec(x: BigDecimal) -> BigDecimal:
    """Subtract one unit in the last place (10^exponent, not numeric 1)."""
    return decimal_exp(x.mantissa - 1, x.exponent)


def reduce(x: BigDecimal) -> BigDecimal:
    """Move trailing zero digits of the mantissa into the exponent.

    The change is committed only when the quantised target exponent differs
    from the current one, so reductions inside a quantisation block are free.
    """
    p = trailing_zeros(x.mantissa)
    if p <= 0:
        return x
    target = x.exponent + p
    if round_exp(target) == x.exponent:
        return x
    _dbg(f"reduce: m={x.mantissa}, e={x.exponent}, tz={p} -> e'={round_exp(target)}")
    return decimal_exp(x.mantissa // _ten_pow(p), target)


__all__ = [
    "BigDecimal",
    "mul_exp10",
    "divmod_exp10",
    "count_digits",
    "trailing_zeros",
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
    "reduce",
]
