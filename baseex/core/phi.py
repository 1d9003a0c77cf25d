"""Golden ratio (base phi) positional numerals.

Place values are powers of phi = (1 + sqrt(5)) / 2 instead of powers of an
integer. Every non-negative integer has a finite representation made of the
digits 0 and 1 around a radix point, e.g. 2 = phi + phi**-2 -> "10.01".

All arithmetic runs on decimal.Decimal inside a local context, so neither
the caller's context nor other threads are affected. The working precision
is at least PHI_PRECISION significant digits and grows with the magnitude of
the value, which keeps the backward recurrence phi**(k-1) = phi**(k+1) - phi**k
accurate far below the ZERO_PLACES stopping threshold.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from baseex.components.numeral import PhiExponentSet
from baseex.core.codec import Codec
from baseex.core.errors import DecodingError, PhiApproximationWarning
from baseex.core.radix import RadixConverter

logger = logging.getLogger(__name__)

PHI_PRECISION = 120
ZERO_PLACES = 50
PHI_SYMBOLS = "01"
DECIMAL_DIGITS = "0123456789"

Number = Union[int, float, Decimal, str]


def golden_ratio() -> Decimal:
    """Phi at the precision of the active decimal context."""
    return (1 + Decimal(5).sqrt()) / 2


class PhiNumeralCodec(Codec):
    """Encode integers (or real numbers) as golden ratio numerals.

    Byte input is read as a big-endian unsigned integer through the radix-10
    path of RadixConverter, decomposed greedily into powers of phi, and
    written as a string of 0/1 symbols around a radix point.

    Attributes:
        precision: Minimum significant digits for phi and all intermediates
        zero_places: Decimal places at which a remainder counts as zero

    Example:
        >>> codec = PhiNumeralCodec()
        >>> codec.encode(2)[0]
        '10.01'
        >>> codec.decode("10.01")
        b'\x02'
    """

    radix = 2

    def __init__(self, precision: int = PHI_PRECISION, zero_places: int = ZERO_PLACES) -> None:
        """Initialize codec.

        Args:
            precision: Significant digits, at least PHI_PRECISION
            zero_places: Rounding precision of the stop condition

        Raises:
            ValueError: If precision is below PHI_PRECISION or zero_places < 1
        """
        if precision < PHI_PRECISION:
            raise ValueError(f"precision must be at least {PHI_PRECISION}, got {precision}")
        if zero_places < 1:
            raise ValueError(f"zero_places must be positive, got {zero_places}")
        self.precision = precision
        self.zero_places = zero_places
        self._decimal = RadixConverter(10, 0, 0)

    def encode(
        self,
        value: bytes | Number,
        charset: Sequence[str] = PHI_SYMBOLS,
        little_endian: bool = False,
        decimal_mode: bool = False,
    ) -> tuple[str, PhiExponentSet]:
        """Encode a byte sequence or a non-negative number.

        Args:
            value: Bytes (read as an unsigned integer) or a non-negative
                number. Non-integral numbers need ``decimal_mode``.
            charset: Two symbols for the digits 0 and 1
            little_endian: Read bytes least significant first
            decimal_mode: Accept real numbers

        Returns:
            Tuple of (numeral string, exponent set). The exponent set is
            flagged ``approximated`` when the decomposition could not finish,
            in which case a PhiApproximationWarning is emitted as well.

        Raises:
            TypeError: If the value type is not supported
            ValueError: If the value is negative, not finite, or not
                integral without decimal_mode
        """
        if isinstance(value, (bytes, bytearray, memoryview, list, tuple)):
            if not len(value):
                return "", PhiExponentSet()
            text, _ = self._decimal.encode(value, DECIMAL_DIGITS, little_endian)
            n = Decimal(text)
        else:
            n = self._to_decimal(value, decimal_mode)

        zero, one = charset[0], charset[1]
        if n == 0:
            return f"{zero}.", PhiExponentSet()
        if n == 1:
            return f"{one}.", PhiExponentSet(integer_exponents=[0])

        digits = n.adjusted() + 1 if n >= 1 else 1
        with localcontext() as ctx:
            ctx.prec = self.precision + 2 * digits
            exponents = self._decompose(n)

        if exponents.approximated:
            logger.warning("Base phi decomposition stopped early (%d integer digits)", digits)
            warnings.warn(
                "Could not find an exact base-phi representation. Value is approximated.",
                PhiApproximationWarning,
                stacklevel=2,
            )

        return self._assemble(exponents, zero, one), exponents

    def decode(
        self,
        text: str,
        charset: Sequence[str] = PHI_SYMBOLS,
        pad_symbols: Sequence[str] = (),
        integrity: bool = True,
        little_endian: bool = False,
        decimal_mode: bool = False,
    ) -> bytes | Decimal:
        """Decode a golden ratio numeral.

        Args:
            text: Numeral string (digits with at most one radix point)
            charset: Two symbols for the digits 0 and 1
            pad_symbols: Unused, phi numerals have no padding
            integrity: Reject unknown symbols and repeated radix points;
                when off, unknown symbols are dropped
            little_endian: Write the resulting integer least significant first
            decimal_mode: Return the real value instead of bytes

        Returns:
            Decoded bytes, or a Decimal in decimal mode

        Raises:
            DecodingError: If a symbol is invalid or the radix point repeats
        """
        zero, one = charset[0], charset[1]
        if not integrity:
            text = "".join(c for c in text if c in (zero, one, "."))

        if not text:
            return Decimal(0) if decimal_mode else b""

        parts = text.split(".")
        if len(parts) > 2 and integrity:
            raise DecodingError(".", "There are multiple decimal points in the input.")
        integer = parts[0]
        fraction = parts[1] if len(parts) > 1 else ""

        with localcontext() as ctx:
            ctx.prec = self.precision + (len(integer) + len(fraction)) // 4 + 1
            phi = golden_ratio()
            n = Decimal(0)

            last, cur = phi - 1, Decimal(1)
            for char in reversed(integer):
                if char == one:
                    n += cur
                elif char != zero:
                    raise DecodingError(char)
                last, cur = cur, last + cur

            prev, cur = Decimal(1), phi - 1
            for char in fraction:
                if char == one:
                    n += cur
                elif char != zero:
                    raise DecodingError(char)
                cur, prev = prev - cur, cur

            if decimal_mode:
                return +n
            rounded = n.to_integral_value(rounding=ROUND_HALF_UP)

        return self._decimal.decode(
            format(rounded, "f"), DECIMAL_DIGITS, (), integrity, little_endian
        )

    def _to_decimal(self, value: Number, decimal_mode: bool) -> Decimal:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
            raise TypeError(f"Cannot encode {type(value).__name__} as a base phi numeral")
        try:
            n = Decimal(repr(value) if isinstance(value, float) else value)
        except InvalidOperation as e:
            raise ValueError(f"Not a decimal number: {value!r}") from e
        if not n.is_finite():
            raise ValueError(f"Cannot encode non-finite value {value!r}")
        if n < 0:
            raise ValueError("PhiNumeralCodec only encodes non-negative values")
        if not decimal_mode and n != n.to_integral_value():
            raise ValueError(f"{value!r} is not an integer, use decimal_mode")
        return n

    def _decompose(self, n: Decimal) -> PhiExponentSet:
        """Greedy decomposition of n into distinct powers of phi."""
        phi = golden_ratio()
        threshold = Decimal(5).scaleb(-(self.zero_places + 1))

        last, cur = Decimal(1), phi
        exp = 0
        while cur < n:
            last, cur = cur, last + cur
            exp += 1

        integer_exponents: list[int] = []
        fraction_exponents: list[int] = []
        power, above = last, cur
        approximated = False

        while abs(n) >= threshold:
            if power <= n + threshold:
                if exp > -1:
                    integer_exponents.append(exp)
                else:
                    fraction_exponents.append(exp)
                n -= power
                if abs(n) < threshold:
                    break

            # Each exponent is used at most once, step down after a hit
            power, above = above - power, power
            exp -= 1
            if power <= 0:
                approximated = True
                break

        return PhiExponentSet(
            integer_exponents=integer_exponents,
            fraction_exponents=fraction_exponents,
            approximated=approximated,
        )

    @staticmethod
    def _assemble(exponents: PhiExponentSet, zero: str, one: str) -> str:
        integer = ""
        if exponents.integer_exponents:
            recorded = set(exponents.integer_exponents)
            top = exponents.integer_exponents[0]
            integer = "".join(one if k in recorded else zero for k in range(top, -1, -1))

        fraction = ""
        if exponents.fraction_exponents:
            recorded = set(exponents.fraction_exponents)
            bottom = exponents.fraction_exponents[-1]
            fraction = "".join(one if k in recorded else zero for k in range(-1, bottom - 1, -1))

        return f"{integer or zero}.{fraction}"

    def __repr__(self) -> str:
        return f"PhiNumeralCodec(precision={self.precision})"
