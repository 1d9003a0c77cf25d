"""Tests for golden ratio numerals."""

import warnings
from decimal import Decimal, localcontext

import pytest

from baseex.components.numeral import PhiExponentSet
from baseex.core.errors import DecodingError, PhiApproximationWarning
from baseex.core.phi import PHI_PRECISION, PhiNumeralCodec, golden_ratio

PI = 3.141592653589793


@pytest.fixture
def codec() -> PhiNumeralCodec:
    """Codec with default precision."""
    return PhiNumeralCodec()


class TestGoldenRatio:
    """Test phi itself."""

    def test_defining_identity(self) -> None:
        """Test phi**2 == phi + 1 at working precision."""
        with localcontext() as ctx:
            ctx.prec = PHI_PRECISION
            phi = golden_ratio()
            assert abs(phi * phi - phi - 1) < Decimal("1e-118")

    def test_value(self) -> None:
        """Test leading digits."""
        with localcontext() as ctx:
            ctx.prec = 20
            assert str(golden_ratio()).startswith("1.6180339887498948")


class TestPhiInit:
    """Test codec construction."""

    def test_defaults(self, codec) -> None:
        """Test default precision and stop threshold."""
        assert codec.precision == 120
        assert codec.zero_places == 50

    def test_precision_too_low(self) -> None:
        """Test precision below the minimum."""
        with pytest.raises(ValueError, match="at least 120"):
            PhiNumeralCodec(precision=100)

    def test_invalid_zero_places(self) -> None:
        """Test non-positive stop threshold."""
        with pytest.raises(ValueError, match="zero_places"):
            PhiNumeralCodec(zero_places=0)


class TestPhiEncode:
    """Test encoding."""

    def test_zero(self, codec) -> None:
        """Test zero has an empty exponent set."""
        text, exponents = codec.encode(0)
        assert text == "0."
        assert exponents.exponents == []

    def test_one(self, codec) -> None:
        """Test one is phi**0."""
        text, exponents = codec.encode(1)
        assert text == "1."
        assert exponents.integer_exponents == [0]

    def test_two(self, codec) -> None:
        """Test 2 = phi + phi**-2."""
        text, exponents = codec.encode(2)
        assert text == "10.01"
        assert exponents.integer_exponents == [1]
        assert exponents.fraction_exponents == [-2]
        assert not exponents.approximated

    def test_three(self, codec) -> None:
        """Test 3 = phi**2 + phi**-2."""
        assert codec.encode(3)[0] == "100.01"

    def test_no_adjacent_ones(self, codec) -> None:
        """Test greedy output never has two neighbouring ones."""
        for n in range(2, 200):
            assert "11" not in codec.encode(n)[0].replace(".", "")

    def test_bytes_input(self, codec) -> None:
        """Test bytes are read as an unsigned big-endian integer."""
        assert codec.encode(b"\x00\x02")[0] == codec.encode(2)[0]

    def test_little_endian_bytes(self, codec) -> None:
        """Test little-endian byte input."""
        assert codec.encode(b"\x02\x00", little_endian=True)[0] == codec.encode(2)[0]

    def test_empty_bytes(self, codec) -> None:
        """Test empty input."""
        assert codec.encode(b"") == ("", PhiExponentSet())

    def test_custom_charset(self, codec) -> None:
        """Test the two digit symbols are taken from the charset."""
        assert codec.encode(2, "ab")[0] == "ba.ab"

    def test_negative(self, codec) -> None:
        """Test negative values are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            codec.encode(-1)

    def test_fraction_needs_decimal_mode(self, codec) -> None:
        """Test non-integral values outside decimal mode."""
        with pytest.raises(ValueError, match="decimal_mode"):
            codec.encode(1.5)

    def test_not_finite(self, codec) -> None:
        """Test infinity is rejected."""
        with pytest.raises(ValueError, match="non-finite"):
            codec.encode(float("inf"), decimal_mode=True)

    def test_unsupported_type(self, codec) -> None:
        """Test booleans and other objects."""
        with pytest.raises(TypeError):
            codec.encode(True)
        with pytest.raises(TypeError):
            codec.encode(object())

    def test_approximation_warning(self) -> None:
        """Test a stop threshold beyond the working precision."""
        codec = PhiNumeralCodec(zero_places=100)
        with pytest.warns(PhiApproximationWarning):
            text, exponents = codec.encode(Decimal("3.141592653589793"), decimal_mode=True)
        assert exponents.approximated
        value = PhiNumeralCodec().decode(text, decimal_mode=True)
        assert abs(value - Decimal("3.141592653589793")) < Decimal("1e-40")

    def test_approximation_log_omits_value(self, caplog) -> None:
        """Test the warning record names the size, not the value."""
        codec = PhiNumeralCodec(zero_places=100)
        with pytest.warns(PhiApproximationWarning):
            codec.encode(Decimal("3.141592653589793"), decimal_mode=True)
        assert "stopped early (1 integer digits)" in caplog.text
        assert "3.14159" not in caplog.text


class TestPhiDecode:
    """Test decoding."""

    def test_one(self, codec) -> None:
        """Test the numeral of one."""
        assert codec.decode("1.", decimal_mode=True) == 1
        assert codec.decode("1.") == b"\x01"

    def test_two(self, codec) -> None:
        """Test the numeral of two."""
        assert codec.decode("10.01") == b"\x02"

    def test_zero(self, codec) -> None:
        """Test the numeral of zero."""
        assert codec.decode("0.") == b"\x00"

    def test_without_radix_point(self, codec) -> None:
        """Test integer numerals without a point."""
        assert codec.decode("100") == codec.decode("100.")

    def test_empty(self, codec) -> None:
        """Test empty input."""
        assert codec.decode("") == b""
        assert codec.decode("", decimal_mode=True) == 0

    def test_multiple_points(self, codec) -> None:
        """Test repeated radix points."""
        with pytest.raises(DecodingError, match="multiple decimal points"):
            codec.decode("10.0.1")

    def test_invalid_digit(self, codec) -> None:
        """Test symbols outside the charset."""
        with pytest.raises(DecodingError, match="Character '2'"):
            codec.decode("12.")

    def test_without_integrity(self, codec) -> None:
        """Test unknown symbols are dropped when integrity is off."""
        assert codec.decode("1x0.01 ", integrity=False) == b"\x02"

    def test_little_endian(self, codec) -> None:
        """Test little-endian byte output."""
        text, _ = codec.encode(b"\x01\x02", little_endian=True)
        assert codec.decode(text, little_endian=True) == b"\x01\x02"


class TestPhiRoundTrip:
    """Test decode(encode(n)) == n."""

    @pytest.mark.parametrize("n", [0, 1, 2, 89, 1000, 1_000_003, 2**64 + 1])
    def test_integers(self, codec, n) -> None:
        """Test integer round trip."""
        text, _ = codec.encode(n)
        assert int.from_bytes(codec.decode(text), "big") == n

    def test_large_integer(self, codec) -> None:
        """Test precision grows with the magnitude."""
        n = 2**200 + 12345
        data = n.to_bytes(26, "big")
        text, exponents = codec.encode(data)
        assert not exponents.approximated
        assert codec.decode(text) == data

    def test_decimal_mode_pi(self, codec) -> None:
        """Test a real number round trip."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", PhiApproximationWarning)
            text, exponents = codec.encode(PI, decimal_mode=True)
        assert not exponents.approximated
        value = codec.decode(text, decimal_mode=True)
        assert abs(value - Decimal(repr(PI))) < Decimal("1e-45")
        assert float(value) == PI

    def test_decimal_mode_fraction(self, codec) -> None:
        """Test a value below one."""
        text, _ = codec.encode(Decimal("0.25"), decimal_mode=True)
        assert text.startswith("0.")
        assert float(codec.decode(text, decimal_mode=True)) == 0.25
