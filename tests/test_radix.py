"""Tests for the block based radix converter."""

from decimal import Decimal

import numpy as np
import pytest

from baseex.core.errors import DecodingError
from baseex.core.primitives import guess_block_sizes
from baseex.core.radix import RadixConverter, format_decimal

BASE64_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
DECIMAL = "0123456789"
SYMBOLS = "".join(chr(c) for c in range(0x100, 0x100 + 300))


def random_bytes(length: int, seed: int = 0) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=length, dtype=np.uint8).tobytes()


class TestRadixConverterInit:
    """Test converter construction."""

    def test_init(self) -> None:
        """Test explicit block sizes."""
        converter = RadixConverter(64, 3, 4)
        assert converter.radix == 64
        assert (converter.bs_enc, converter.bs_dec) == (3, 4)
        assert converter.dec_pad_val == 0

    def test_guessed_block_sizes(self) -> None:
        """Test block sizes derived from the radix."""
        converter = RadixConverter(85)
        assert (converter.bs_enc, converter.bs_dec) == (4, 5)

    def test_invalid_radix(self) -> None:
        """Test radix below 2."""
        with pytest.raises(ValueError, match="at least 2"):
            RadixConverter(1, 1, 8)

    def test_mixed_sentinel(self) -> None:
        """Test only one block size set to zero."""
        with pytest.raises(ValueError, match="both be zero"):
            RadixConverter(58, 0, 4)

    def test_block_too_small(self) -> None:
        """Test a symbol block that cannot hold the bytes."""
        with pytest.raises(ValueError, match="cannot hold"):
            RadixConverter(64, 3, 3)

    def test_invalid_pad_value(self) -> None:
        """Test decode pad value outside the radix."""
        with pytest.raises(ValueError, match="dec_pad_val"):
            RadixConverter(85, 4, 5, dec_pad_val=85)


class TestRadixEncode:
    """Test encoding."""

    def test_base64_hello(self) -> None:
        """Test the final block is zero padded."""
        converter = RadixConverter(64, 3, 4)
        assert converter.encode(b"Hello", BASE64_SYMBOLS) == ("SGVsbG8A", 1)

    def test_binary_zero_byte(self) -> None:
        """Test a zero byte keeps its full block width."""
        converter = RadixConverter(2, 1, 8)
        assert converter.encode(b"\x00", "01") == ("00000000", 0)

    def test_empty_input(self) -> None:
        """Test empty input."""
        assert RadixConverter(64, 3, 4).encode(b"", BASE64_SYMBOLS) == ("", 0)
        assert RadixConverter(58, 0, 0).encode(b"", SYMBOLS) == ("", 0)

    def test_whole_buffer(self) -> None:
        """Test the whole input is one number."""
        converter = RadixConverter(16, 0, 0)
        assert converter.encode(b"\x01\x00", "0123456789abcdef") == ("100", 0)

    def test_replacer(self) -> None:
        """Test the frame replacer hook."""
        converter = RadixConverter(85, 4, 5)
        charset = "".join(chr(c) for c in range(33, 118))

        def replacer(frame: str, padding: int) -> str:
            return "z" if frame == "!!!!!" and not padding else frame

        output, padding = converter.encode(bytes(8), charset, replacer=replacer)
        assert output == "zz"
        assert padding == 0

    def test_little_endian_padding_goes_first(self) -> None:
        """Test little-endian input is reversed after zero padding."""
        converter = RadixConverter(32, 5, 8)
        charset = "0123456789abcdefghijklmnopqrstuv"
        little, padding = converter.encode(b"\x01\x02\x03", charset, little_endian=True)
        big, _ = converter.encode(bytes(2) + b"\x03\x02\x01", charset)
        assert little == big
        assert padding == 2


class TestRadixDecimal:
    """Test the radix 10 shortcut."""

    @pytest.mark.parametrize(
        "data",
        [b"", b"\x00", b"\x00\x01", b"\xff", b"Hello, World", random_bytes(64)],
    )
    def test_matches_integer_string(self, data) -> None:
        """Test radix 10 output equals the decimal string of the integer."""
        converter = RadixConverter(10, 0, 0)
        output, _ = converter.encode(data, DECIMAL)
        assert output == str(int.from_bytes(data, "big"))

    def test_beyond_int_string_limit(self) -> None:
        """Test numbers with more digits than int -> str allows."""
        data = bytes(range(1, 256)) * 10
        converter = RadixConverter(10, 0, 0)
        output, _ = converter.encode(data, DECIMAL)
        assert output == format(Decimal(int.from_bytes(data, "big")), "f")
        assert converter.decode(output, DECIMAL) == data

    def test_format_decimal(self) -> None:
        """Test decimal formatting."""
        assert format_decimal(0) == "0"
        assert format_decimal(10**30) == "1" + "0" * 30


class TestRadixDecode:
    """Test decoding."""

    def test_base64_hello(self) -> None:
        """Test pad symbols are skipped and padding bytes removed."""
        converter = RadixConverter(64, 3, 4)
        assert converter.decode("SGVsbG8=", BASE64_SYMBOLS, pad_symbols="=") == b"Hello"

    def test_empty_input(self) -> None:
        """Test empty input."""
        assert RadixConverter(64, 3, 4).decode("", BASE64_SYMBOLS) == b""

    def test_unknown_symbol(self) -> None:
        """Test integrity check."""
        converter = RadixConverter(64, 3, 4)
        with pytest.raises(DecodingError, match="Character '!' is not part of the charset."):
            converter.decode("SGVs!bG8=", BASE64_SYMBOLS, pad_symbols="=")

    def test_unknown_symbol_without_integrity(self) -> None:
        """Test unknown symbols are dropped when integrity is off."""
        converter = RadixConverter(64, 3, 4)
        decoded = converter.decode("SG!Vs", BASE64_SYMBOLS, integrity=False)
        assert decoded == b"Hel"

    def test_decoding_error_is_value_error(self) -> None:
        """Test DecodingError can be caught as ValueError."""
        with pytest.raises(ValueError):
            RadixConverter(2, 1, 8).decode("012", "01")

    def test_symbols_beyond_radix_are_unknown(self) -> None:
        """Test only the first radix symbols of the charset are used."""
        converter = RadixConverter(2, 1, 8)
        with pytest.raises(DecodingError):
            converter.decode("00000002", "0123")

    def test_little_endian_round_trip(self) -> None:
        """Test little-endian round trip with a non-zero last byte."""
        converter = RadixConverter(32, 5, 8)
        charset = "0123456789abcdefghijklmnopqrstuv"
        output, _ = converter.encode(b"\x01\x02\x03", charset, little_endian=True)
        assert converter.decode(output, charset, little_endian=True) == b"\x01\x02\x03"

    def test_block_value_too_large(self) -> None:
        """Test a block whose value needs more than bs_enc bytes."""
        converter = RadixConverter(85, 4, 5)
        charset = "".join(chr(c) for c in range(33, 118))
        assert converter.decode("s8W-!", charset) == b"\xff\xff\xff\xff"
        with pytest.raises(DecodingError, match="Block 0 does not fit into 4 bytes"):
            converter.decode("uuuuu", charset)


class TestRadixRoundTrip:
    """Test decode(encode(b)) across radices."""

    @pytest.mark.parametrize("radix", [2, 3, 7, 10, 16, 36, 58, 64, 85, 100, 255, 256, 300])
    @pytest.mark.parametrize("length", [0, 1, 2, 5, 17, 64])
    def test_fixed_blocks(self, radix, length) -> None:
        """Test full frames decode to the input plus its zero padding."""
        converter = RadixConverter(radix, *guess_block_sizes(radix))
        data = random_bytes(length, seed=radix)
        output, padding = converter.encode(data, SYMBOLS)
        if radix == 10:
            output, padding = converter.encode(data, DECIMAL)
            assert converter.decode(output, DECIMAL) == data + bytes(padding)
        else:
            assert converter.decode(output, SYMBOLS) == data + bytes(padding)

    @pytest.mark.parametrize("radix", [2, 5, 16, 36, 58, 62, 91, 300])
    @pytest.mark.parametrize("length", [1, 3, 20])
    @pytest.mark.parametrize("little_endian", [False, True])
    def test_whole_buffer(self, radix, length, little_endian) -> None:
        """Test whole-buffer round trip without leading zero bytes."""
        converter = RadixConverter(radix, 0, 0)
        data = bytearray(random_bytes(length, seed=length))
        # The most significant byte must be non-zero
        data[-1 if little_endian else 0] |= 1
        output, _ = converter.encode(bytes(data), SYMBOLS, little_endian)
        assert converter.decode(output, SYMBOLS, little_endian=little_endian) == bytes(data)
