#!/usr/bin/env python3
"""Command-line calculator over exact decimals.

Examples:
  calc.py 2 / 3                  -> 0.6666666666666666
  calc.py 2 / 3 --div-prec 30    -> 0.666666666666666666666666666666
  calc.py 1.485 --prec 2         -> 1.48
  calc.py -2.5 --mode floor --prec 0 -> -3
  calc.py 12345 --sci            -> 1.2345e+4
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from exactdec import (
    BigDecimal,
    RoundingMode,
    DecimalDomainError,
    div,
    round_to_prec,
    show,
    show_exp,
)
from exactdec.core.constants import DEFAULT_DIV_PREC

OPS = ("+", "-", "*", "/")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exact decimal calculator.")
    parser.add_argument("x", help="Left operand (decimal literal)")
    parser.add_argument("op", nargs="?", choices=OPS, help="Operator")
    parser.add_argument("y", nargs="?", help="Right operand (decimal literal)")
    parser.add_argument("--prec", type=int, default=None, help="Round result to this many fraction digits")
    parser.add_argument(
        "--mode",
        default=RoundingMode.EVEN.value,
        choices=[m.value for m in RoundingMode],
        help="Rounding mode used with --prec",
    )
    parser.add_argument("--div-prec", type=int, default=DEFAULT_DIV_PREC, help="Minimum division precision")
    parser.add_argument("--sci", action="store_true", help="Print in scientific notation")
    return parser.parse_args(argv)


def _operand(text: str) -> BigDecimal:
    return BigDecimal.from_str(text)


def evaluate(args: argparse.Namespace) -> BigDecimal:
    x = _operand(args.x)
    if args.op is None:
        z = x
    else:
        y = _operand(args.y)
        if args.op == "+":
            z = x + y
        elif args.op == "-":
            z = x - y
        elif args.op == "*":
            z = x * y
        else:
            z = div(x, y, args.div_prec)
    if args.prec is not None:
        z = round_to_prec(z, args.prec, args.mode)
    return z


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    if args.op is not None and args.y is None:
        print(f"[error] operator {args.op!r} needs a right operand", file=sys.stderr)
        return 2
    try:
        z = evaluate(args)
    except DecimalDomainError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 2
    print(show_exp(z) if args.sci else show(z))
    return 0


if __name__ == "__main__":
    sys.exit(main())
