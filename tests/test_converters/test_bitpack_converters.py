"""Tests for the basE91 and base2048 converters."""

import pytest

from baseex.components.charset import Charset
from baseex.converters import Base91, Base2048
from baseex.core.bitpack import BASE2048_PAD_SYMBOLS, BASE2048_SYMBOLS
from baseex.core.errors import CharsetError, DecodingError


class TestBase91:
    """Test Base91."""

    def test_encode(self) -> None:
        """Test a known value."""
        assert Base91().encode("test") == "fPNKd"

    def test_decode(self) -> None:
        """Test a known value."""
        assert Base91().decode("fPNKd", output_type="str") == "test"

    def test_round_trip(self) -> None:
        """Test binary data."""
        b91 = Base91()
        data = bytes(range(256))
        assert b91.decode(b91.encode(data)) == data

    def test_integrity(self) -> None:
        """Test unknown symbols."""
        b91 = Base91()
        with pytest.raises(DecodingError):
            b91.decode("fP NKd")
        assert b91.decode("fP NKd", integrity=False) == b"test"

    def test_charset_length(self) -> None:
        """Test custom charsets need 91 symbols."""
        with pytest.raises(CharsetError, match="must have 91 symbols"):
            Base91(charsets={"short": "abc"})


class TestBase2048:
    """Test Base2048."""

    def test_round_trip(self) -> None:
        """Test text round trip."""
        b2048 = Base2048()
        encoded = b2048.encode("Hello, World!")
        assert b2048.decode(encoded, output_type="str") == "Hello, World!"

    def test_symbols(self) -> None:
        """Test output uses the main and pad alphabets."""
        encoded = Base2048().encode(b"\xff\xff\xff")
        assert encoded[:2] == BASE2048_SYMBOLS[2047] * 2
        assert encoded[2] in BASE2048_PAD_SYMBOLS

    def test_pad_symbol_not_last(self) -> None:
        """Test a pad symbol in the middle of the input."""
        with pytest.raises(DecodingError, match="Secondary character"):
            Base2048().decode(BASE2048_PAD_SYMBOLS[3] + BASE2048_SYMBOLS[5])

    def test_custom_charset_needs_pad_symbols(self) -> None:
        """Test custom charsets keep eight pad symbols."""
        symbols = "".join(chr(c) for c in range(0x4E00, 0x4E00 + 2048))
        b2048 = Base2048(charsets={"cjk": symbols})
        assert b2048.charsets["cjk"].pad_symbols == tuple(BASE2048_PAD_SYMBOLS)
        assert b2048.decode(b2048.encode(b"abc", version="cjk"), version="cjk") == b"abc"

    def test_missing_pad_symbols(self) -> None:
        """Test a charset without pad symbols."""
        symbols = "".join(chr(c) for c in range(0x4E00, 0x4E00 + 2048))
        with pytest.raises(CharsetError, match="8 pad symbols"):
            Base2048(charsets=[Charset(name="bare", symbols=symbols)])
