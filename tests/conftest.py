from __future__ import annotations

from typing import List

import pytest

# Import project primitives
from exactdec.core import BigDecimal, decimal, decimal_exp, from_float, parse_decimal


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def dec_of(text: str) -> BigDecimal:
    """Parse a literal that is known to be well-formed."""
    x = parse_decimal(text)
    assert x is not None, f"fixture literal did not parse: {text!r}"
    return x


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def samples() -> List[BigDecimal]:
    """A spread of values built through every public constructor."""
    return [
        decimal(0),
        decimal(1),
        decimal(-1),
        decimal(123),
        decimal(1, 123, 4),
        decimal(-3, 5, 1),
        decimal(10 ** 30, 1),
        decimal_exp(7, -20),
        decimal_exp(-42, 9),
        decimal_exp(123456789, -3),
        from_float(0.25),
        from_float(-1.1),
        dec_of("-0.000123"),
        dec_of("98765.4321"),
    ]


@pytest.fixture()
def zero() -> BigDecimal:
    return BigDecimal.zero()
