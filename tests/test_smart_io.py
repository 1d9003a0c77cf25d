"""Tests for native value to bytes conversion."""

import struct
from decimal import Decimal

import numpy as np
import pytest

from baseex.core.errors import RangeError, SignError
from baseex.core.smart_io import compile_output, int_to_bytes, to_bytes


class TestToBytes:
    """Test input conversion."""

    def test_bytes_like(self) -> None:
        """Test bytes-like objects pass through."""
        assert to_bytes(b"ab") == (b"ab", False, "bytes")
        assert to_bytes(bytearray(b"ab")) == (b"ab", False, "bytes")
        assert to_bytes(memoryview(b"ab")) == (b"ab", False, "bytes")

    def test_str(self) -> None:
        """Test strings are UTF-8 encoded."""
        assert to_bytes("Hi") == (b"Hi", False, "str")
        assert to_bytes("é") == (b"\xc3\xa9", False, "str")

    def test_numpy_array(self) -> None:
        """Test arrays contribute their raw buffer."""
        data = np.array([1, 2], dtype=">u2")
        assert to_bytes(data) == (b"\x00\x01\x00\x02", False, "bytes")

    def test_small_int(self) -> None:
        """Test integers use at least two bytes."""
        assert to_bytes(0) == (b"\x00\x00", False, "int")
        assert to_bytes(255) == (b"\x00\xff", False, "int")
        assert to_bytes(255, little_endian=True) == (b"\xff\x00", False, "int")

    def test_int_widths(self) -> None:
        """Test integers grow to 4 and 8 bytes."""
        assert to_bytes(65536)[0] == b"\x00\x01\x00\x00"
        assert len(to_bytes(2**32)[0]) == 8
        assert len(to_bytes(2**53 - 1)[0]) == 8

    def test_big_int(self) -> None:
        """Test integers beyond 53 bits use 64 bit words."""
        payload, _, _ = to_bytes(2**64)
        assert len(payload) == 16
        assert int.from_bytes(payload, "big") == 2**64

    def test_negative_unsigned(self) -> None:
        """Test negative integers use two's complement when not signed."""
        assert to_bytes(-1) == (b"\xff\xff", False, "int")
        assert to_bytes(-70000)[0] == (-70000).to_bytes(4, "big", signed=True)

    def test_negative_signed(self) -> None:
        """Test signed mode stores the magnitude and a flag."""
        assert to_bytes(-1, signed=True) == (b"\x00\x01", True, "int")

    def test_float(self) -> None:
        """Test floats are stored as binary64."""
        assert to_bytes(1.5) == (struct.pack(">d", 1.5), False, "float")
        assert to_bytes(1.5, little_endian=True)[0] == struct.pack("<d", 1.5)

    def test_number_mode(self) -> None:
        """Test integers packed as floats."""
        assert to_bytes(3, number_mode=True) == (struct.pack(">d", 3.0), False, "float")

    def test_numpy_scalars(self) -> None:
        """Test numpy scalars behave like Python numbers."""
        assert to_bytes(np.int32(255)) == to_bytes(255)
        assert to_bytes(np.float32(0.5)) == to_bytes(0.5)

    def test_list(self) -> None:
        """Test list items are concatenated."""
        assert to_bytes([1, "a", b"b"]) == (b"\x00\x01ab", False, "bytes")

    def test_not_finite(self) -> None:
        """Test NaN and infinity are rejected."""
        with pytest.raises(TypeError, match="NaN"):
            to_bytes(float("nan"))
        with pytest.raises(TypeError, match="Infinity"):
            to_bytes(float("-inf"))

    def test_unsupported(self) -> None:
        """Test booleans and unknown types are rejected."""
        with pytest.raises(TypeError):
            to_bytes(True)
        with pytest.raises(TypeError, match="dict"):
            to_bytes({})


class TestCompileOutput:
    """Test output conversion."""

    def test_bytes(self) -> None:
        """Test byte outputs."""
        assert compile_output(b"ab") == b"ab"
        assert compile_output(b"ab", "bytearray") == bytearray(b"ab")

    def test_str(self) -> None:
        """Test UTF-8 text."""
        assert compile_output(b"\xc3\xa9", "str") == "é"

    def test_int(self) -> None:
        """Test integers in both byte orders."""
        assert compile_output(b"\x01\x00", "int") == 256
        assert compile_output(b"\x01\x00", "int", little_endian=True) == 1

    def test_decimal(self) -> None:
        """Test Decimal output."""
        assert compile_output(b"\x01\x00", "decimal") == Decimal(256)

    def test_float(self) -> None:
        """Test 4 and 8 byte floats."""
        assert compile_output(struct.pack(">f", 1.5), "float") == 1.5
        assert compile_output(struct.pack(">d", 0.1), "float") == 0.1
        assert compile_output(struct.pack("<d", 0.1), "float", little_endian=True) == 0.1
        assert compile_output(b"", "float") == 0.0

    def test_float_too_wide(self) -> None:
        """Test more than 8 bytes cannot be a float."""
        with pytest.raises(RangeError):
            compile_output(bytes(9), "float")

    def test_typed_array(self) -> None:
        """Test numpy typed outputs."""
        result = compile_output(b"\x01\x02\x03\x04", "uint16")
        assert result.tolist() == [0x0102, 0x0304]
        assert compile_output(b"\xff\xfe", "int16").tolist() == [-2]

    def test_typed_array_padding(self) -> None:
        """Test short data is padded without changing its value."""
        assert compile_output(b"\x01", "uint32").tolist() == [1]
        assert compile_output(b"\x01", "uint32", little_endian=True).tolist() == [1]

    def test_negative(self) -> None:
        """Test the sign flag for numeric outputs."""
        assert compile_output(b"\x05", "int", negative=True) == -5
        assert compile_output(b"\x05", "decimal", negative=True) == Decimal(-5)
        assert compile_output(struct.pack(">d", 2.5), "float", negative=True) == -2.5

    def test_negative_bytes(self) -> None:
        """Test negative byte output is two's complement."""
        assert compile_output(b"\x05", "bytes", negative=True) == b"\xff\xfb"

    def test_negative_str(self) -> None:
        """Test a negative value cannot be text."""
        with pytest.raises(SignError):
            compile_output(b"\x05", "str", negative=True)

    def test_unknown_output_type(self) -> None:
        """Test unknown output type names."""
        with pytest.raises(ValueError, match="Unknown output type"):
            compile_output(b"\x05", "complex")

    def test_int_to_bytes_round_trip(self) -> None:
        """Test signed integers survive packing."""
        for value in (-(2**63), -1, 0, 1, 2**40, -(2**70)):
            packed = int_to_bytes(value)
            assert int.from_bytes(packed, "big", signed=value < 0) == value
