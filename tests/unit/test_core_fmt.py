import pytest

from exactdec.core.number import BigDecimal, decimal
from exactdec.core.fmt import show, showx, show_exp
from exactdec.core.parse import parse_decimal


def _d(x: str) -> BigDecimal:
    return parse_decimal(x)


# -----------------------------
# show
# -----------------------------

@pytest.mark.parametrize(
    "x,text",
    [
        (decimal(1, 123, 4), "1.0123"),
        (decimal(1, 123), "1.123"),
        (decimal(123), "123"),
        (decimal(1, 123, 2), "1.123"),
        (decimal(-1), "-1"),
        (decimal(0), "0"),
    ],
)
def test_show_canonical(x, text):
    print(f"[show] {x.mantissa_exponent()} -> expect {text}")
    assert show(x) == text


@pytest.mark.parametrize(
    "value,prec,text",
    [
        ("2.675", 2, "2.68"),
        ("1.5", 0, "2"),
        ("2.5", 0, "2"),
        ("1.10", 5, "1.1"),
        ("-0.0049", 2, "0"),
        ("123.456", -1, "123.456"),
    ],
)
def test_show_with_max_precision(value, prec, text):
    print(f"[show-prec] show({value}, {prec}) -> expect {text}")
    assert show(_d(value), prec) == text


def test_show_never_emits_trailing_point(samples):
    print("[show-no-trailing-dot] no sample renders with a dangling '.'")
    for x in samples:
        s = show(x)
        assert not s.endswith(".")
        assert s not in ("", "-", "-0")


# -----------------------------
# showx (raw, no reduction)
# -----------------------------

@pytest.mark.parametrize(
    "m,e,text",
    [
        (5, 3, "5000"),
        (0, 5, "0"),
        (0, -5, "0"),
        (-12, -5, "-0.00012"),
        (1200, -2, "12"),
        (-1230, -2, "-12.3"),
        (5, -1, "0.5"),
        (123, -3, "0.123"),
    ],
)
def test_showx_raw_pairs(m, e, text):
    print(f"[showx] ({m}, {e}) -> expect {text}")
    assert showx(BigDecimal(m, e)) == text


def test_str_and_repr():
    print("[str/repr] str(1.5) -> '1.5'; repr -> BigDecimal('1.5')")
    x = decimal(1, 5, 1)
    assert str(x) == "1.5"
    assert repr(x) == "BigDecimal('1.5')"
    assert f"{decimal(-3)}" == "-3"


# -----------------------------
# show_exp
# -----------------------------

@pytest.mark.parametrize(
    "value,prec,text",
    [
        ("12345", -1, "1.2345e+4"),
        ("0.00125", -1, "1.25e-3"),
        ("-5", -1, "-5e+0"),
        ("0", -1, "0"),
        ("12345", 2, "1.23e+4"),
        ("9.99", 1, "1e+1"),
        ("-0.000987", 0, "-1e-3"),
    ],
)
def test_show_exp(value, prec, text):
    print(f"[show_exp] show_exp({value}, {prec}) -> expect {text}")
    assert show_exp(_d(value), prec) == text


def test_show_exp_parses_back(samples):
    print("[show_exp-roundtrip] parse(show_exp(x)) == x over the samples")
    for x in samples:
        assert parse_decimal(show_exp(x)) == x
