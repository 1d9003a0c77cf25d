#!/usr/bin/env python3
"""Golden ratio numerals example.

Shows how integers and real numbers are written as sums of powers of
phi, and how the exponent set behind a numeral can be inspected with
the codec directly.
"""

from __future__ import annotations

import argparse
from decimal import Decimal

from baseex import BasePhi
from baseex.core.phi import PhiNumeralCodec


def describe(codec: PhiNumeralCodec, value: Decimal, decimal_mode: bool) -> None:
    """Print the numeral of a value and the powers of phi it uses."""
    text, exponents = codec.encode(value, decimal_mode=decimal_mode)
    powers = " + ".join(f"phi^{e}" for e in exponents.exponents) or "0"
    shown = text if len(text) <= 60 else text[:57] + "..."
    print(f"{value}: {shown}")
    if len(exponents.exponents) <= 8:
        print(f"    = {powers}")
    if exponents.approximated:
        print("    (approximated)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Base phi numerals example")
    parser.add_argument(
        "values",
        nargs="*",
        default=["1", "2", "3", "10", "89", "-42", "3.141592653589793"],
        help="Numbers to encode",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=120,
        help="Significant digits for the decimal arithmetic (>= 120)",
    )
    args = parser.parse_args()

    codec = PhiNumeralCodec(precision=args.precision)
    converter = BasePhi(codec=codec)

    for raw in args.values:
        value = Decimal(raw)
        decimal_mode = value != value.to_integral_value()
        describe(codec, abs(value), decimal_mode)

        encoded = converter.encode(raw if decimal_mode else int(value), decimal_mode=decimal_mode)
        output_type = "float" if decimal_mode else "int"
        decoded = converter.decode(encoded, decimal_mode=decimal_mode, output_type=output_type)
        print(f"    signed numeral {encoded[:40]!r} decodes to {decoded}")


if __name__ == "__main__":
    main()
