import pytest

from exactdec.core.number import BigDecimal, decimal, decimal_exp
from exactdec.core.rounding import (
    RoundingMode,
    round_to_prec,
    round_decimal,
    to_int,
    floor,
    ceiling,
    trunc,
)
from exactdec.core.exc import DecimalDomainError
from exactdec.core.fmt import show
from exactdec.core.parse import parse_decimal


def _d(x: str) -> BigDecimal:
    return parse_decimal(x)


# -----------------------------
# round_to_prec
# -----------------------------

def test_even_tie_keeps_quotient_even():
    print("[round-even] 1.485 to 2 digits -> 1.48 (exact halfway, 148 is even)")
    assert show(round_to_prec(decimal(1, 485), 2)) == "1.48"
    assert show(round_to_prec(_d("1.475"), 2)) == "1.48"


def test_negative_precision_rounds_to_tens():
    print("[round-neg-prec] 112.49 to -1 digits -> 110; -155 -> -160 (Even)")
    assert show(round_to_prec(decimal(112, 49), -1)) == "110"
    assert show(round_to_prec(_d("-155"), -1)) == "-160"
    assert show(round_to_prec(_d("149.99"), -2)) == "100"


def test_values_already_on_grid_are_unchanged():
    print("[round-noop] integer at prec 2 is returned as-is; 1.5 at prec 3 keeps value")
    x = decimal(5)
    assert round_to_prec(x, 2) is x
    assert round_to_prec(_d("1.5"), 3) == _d("1.5")


def test_round_result_exponent_is_quantised():
    print("[round-exp] 2/3 style value rounded to 6 digits stores exponent -7")
    r = round_to_prec(_d("0.6666666666666666"), 6)
    assert show(r) == "0.666667"
    assert r.exponent % 7 == 0


def test_tiny_value_rounds_to_zero():
    print("[round-tiny] 1e-30 to 29 digits -> 0")
    assert round_to_prec(decimal_exp(1, -30), 29).is_zero()


# mode table (prec 0):
#            2.5  3.5  -2.5  2.4  2.6  -2.6  -2.4  0.5  -0.5
_MODE_TABLE = {
    RoundingMode.EVEN:      [2, 4, -2, 2, 3, -3, -2, 0, 0],
    RoundingMode.HALF_UP:   [2, 3, -2, 2, 3, -3, -2, 0, 0],
    RoundingMode.HALF_DOWN: [3, 4, -3, 2, 3, -3, -2, 1, -1],
    RoundingMode.FLOOR:     [2, 3, -3, 2, 2, -3, -3, 0, -1],
    RoundingMode.CEIL:      [3, 4, -2, 3, 3, -2, -2, 1, 0],
    RoundingMode.UP:        [3, 4, -3, 3, 3, -3, -3, 0, -1],
    RoundingMode.DOWN:      [2, 3, -2, 2, 2, -2, -2, 0, 0],
}
_MODE_INPUTS = ["2.5", "3.5", "-2.5", "2.4", "2.6", "-2.6", "-2.4", "0.5", "-0.5"]


@pytest.mark.parametrize(
    "mode,value,expected",
    [
        (mode, value, expected)
        for mode, row in _MODE_TABLE.items()
        for value, expected in zip(_MODE_INPUTS, row)
    ],
)
def test_rounding_mode_table(mode, value, expected):
    print(f"[round-mode] {mode.value}: {value} -> expect {expected}")
    assert to_int(_d(value), mode) == expected
    assert round_decimal(_d(value), mode) == expected


def test_sign_gated_modes_follow_quotient_sign():
    print("[round-gating] UP leaves a zero quotient alone; DOWN moves negative quotients up")
    assert to_int(_d("0.9"), RoundingMode.UP) == 0
    assert to_int(_d("1.1"), RoundingMode.UP) == 2
    assert to_int(_d("-0.9"), RoundingMode.DOWN) == 0
    assert show(round_to_prec(_d("-1.25"), 1, RoundingMode.HALF_UP)) == "-1.2"
    assert show(round_to_prec(_d("1.25"), 1, RoundingMode.HALF_UP)) == "1.2"
    assert show(round_to_prec(_d("1.25"), 1, RoundingMode.HALF_DOWN)) == "1.3"
    assert show(round_to_prec(_d("-1.25"), 1, RoundingMode.HALF_DOWN)) == "-1.3"


# -----------------------------
# Integer views
# -----------------------------

@pytest.mark.parametrize(
    "value,fl,ce,tr",
    [
        ("1.5", 1, 2, 1),
        ("-1.5", -2, -1, -1),
        ("7", 7, 7, 7),
        ("-0.001", -1, 0, 0),
        ("123456789012345678901234567890.9", 123456789012345678901234567890, 123456789012345678901234567891, 123456789012345678901234567890),
    ],
)
def test_floor_ceiling_trunc(value, fl, ce, tr):
    print(f"[int-views] {value} -> floor={fl}, ceiling={ce}, trunc={tr}")
    x = _d(value)
    assert floor(x) == fl
    assert ceiling(x) == ce
    assert trunc(x) == tr
    assert int(x) == tr


def test_to_int_scales_positive_exponent():
    print("[to_int] 3e2 -> 300; 1e9 -> 1000000000")
    assert to_int(decimal_exp(3, 2)) == 300
    assert to_int(decimal_exp(1, 9)) == 10 ** 9


def test_builtin_round():
    print("[round-builtin] round(2.675, 2) -> 2.68 (Even on exact tie); round(2.5) -> 2")
    assert show(round(_d("2.675"), 2)) == "2.68"
    assert round(_d("2.5")) == 2
    assert isinstance(round(_d("2.5")), int)


# -----------------------------
# Mode coercion
# -----------------------------

@pytest.mark.parametrize(
    "raw,mode",
    [
        ("even", RoundingMode.EVEN),
        ("EVEN", RoundingMode.EVEN),
        ("half-up", RoundingMode.HALF_UP),
        ("half_down", RoundingMode.HALF_DOWN),
        (" Floor ", RoundingMode.FLOOR),
        (RoundingMode.CEIL, RoundingMode.CEIL),
    ],
)
def test_mode_coerce(raw, mode):
    print(f"[mode-coerce] {raw!r} -> {mode}")
    assert RoundingMode.coerce(raw) is mode


def test_mode_coerce_unknown_raises():
    print("[mode-coerce-unknown] 'nearest' and 3 -> expect DecimalDomainError")
    with pytest.raises(DecimalDomainError):
        RoundingMode.coerce("nearest")
    with pytest.raises(DecimalDomainError):
        round_to_prec(_d("1.5"), 0, 3)  # type: ignore[arg-type]


def test_string_mode_accepted_by_round_to_prec():
    print("[mode-string] round_to_prec(-2.5, 0, 'ceil') -> -2")
    assert round_to_prec(_d("-2.5"), 0, "ceil") == -2
