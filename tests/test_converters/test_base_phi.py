"""Tests for the golden ratio converter."""

from decimal import Decimal

import pytest

from baseex.converters import BasePhi
from baseex.core.phi import PhiNumeralCodec


class TestBasePhi:
    """Test BasePhi."""

    def test_encode(self) -> None:
        """Test integer input."""
        b_phi = BasePhi()
        assert b_phi.encode(1) == "1."
        assert b_phi.encode(2) == "10.01"

    def test_decode(self) -> None:
        """Test integer output."""
        b_phi = BasePhi()
        assert b_phi.decode("10.01", output_type="int") == 2
        assert b_phi.decode("1.") == b"\x01"

    def test_negative(self) -> None:
        """Test signed integers."""
        b_phi = BasePhi()
        assert b_phi.encode(-2) == "-10.01"
        assert b_phi.decode("-10.01", output_type="int") == -2

    def test_bytes(self) -> None:
        """Test bytes round trip."""
        b_phi = BasePhi()
        assert b_phi.decode(b_phi.encode(b"Hi")) == b"Hi"

    def test_decimal_mode(self) -> None:
        """Test real numbers."""
        b_phi = BasePhi()
        encoded = b_phi.encode(3.141592653589793, decimal_mode=True)
        assert b_phi.decode(encoded, decimal_mode=True) == 3.141592653589793

    def test_decimal_mode_negative(self) -> None:
        """Test negative real numbers."""
        b_phi = BasePhi(decimal_mode=True)
        encoded = b_phi.encode(-1.5)
        assert encoded.startswith("-")
        assert b_phi.decode(encoded) == -1.5

    def test_decimal_output(self) -> None:
        """Test Decimal output keeps full precision."""
        b_phi = BasePhi(decimal_mode=True)
        value = b_phi.decode(b_phi.encode("0.1"), output_type="decimal")
        assert isinstance(value, Decimal)
        assert abs(value - Decimal("0.1")) < Decimal("1e-45")

    def test_decimal_mode_needs_number(self) -> None:
        """Test bytes in decimal mode."""
        with pytest.raises(TypeError, match="needs a number"):
            BasePhi(decimal_mode=True).encode(b"\x01")

    def test_decimal_mode_invalid_string(self) -> None:
        """Test a string that is no number."""
        with pytest.raises(ValueError, match="Not a decimal number"):
            BasePhi(decimal_mode=True).encode("phi")

    def test_custom_charset(self) -> None:
        """Test a two symbol charset."""
        b_phi = BasePhi(charsets={"ab": "ab"})
        assert b_phi.encode(2, version="ab") == "ba.ab"
        assert b_phi.decode("ba.ab", version="ab", output_type="int") == 2

    def test_custom_codec(self) -> None:
        """Test a codec with higher precision."""
        b_phi = BasePhi(codec=PhiNumeralCodec(precision=200))
        assert b_phi.codec.precision == 200
        assert b_phi.decode(b_phi.encode(2**100), output_type="int") == 2**100

    def test_signed_is_fixed(self) -> None:
        """Test signed mode cannot be turned off."""
        with pytest.raises(TypeError, match="not allowed"):
            BasePhi(signed=False)
