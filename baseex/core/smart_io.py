"""Conversion of native Python values to and from raw bytes.

Converters only ever hand bytes to their codec. This module decides how a
str, int, float, bytes-like object or numpy array becomes a byte sequence,
and how decoded bytes are turned back into the requested output type.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

import numpy as np

from baseex.components.settings import OUTPUT_TYPES
from baseex.core.errors import RangeError, SignError

# Largest integer a float64 represents exactly
MAX_SAFE_INTEGER = 2**53 - 1

DTYPE_CODES = {
    "int8": "i1",
    "uint8": "u1",
    "int16": "i2",
    "uint16": "u2",
    "int32": "i4",
    "uint32": "u4",
    "int64": "i8",
    "uint64": "u8",
    "float32": "f4",
    "float64": "f8",
}


def _byte_order(little_endian: bool) -> str:
    return "<" if little_endian else ">"


def float_to_bytes(value: float, little_endian: bool = False) -> bytes:
    """IEEE-754 binary64 representation of ``value``."""
    return np.array(value, dtype=_byte_order(little_endian) + "f8").tobytes()


def int_to_bytes(value: int, little_endian: bool = False) -> bytes:
    """Pack an integer into the smallest of 2, 4 or 8 bytes, or 64-bit words.

    Negative values are stored in two's complement.
    """
    order = _byte_order(little_endian)

    if abs(value) <= MAX_SAFE_INTEGER:
        if value >= 0:
            code = "u2" if value <= 0xFFFF else "u4" if value <= 0xFFFFFFFF else "u8"
        else:
            code = "i2" if value >= -(2**15) else "i4" if value >= -(2**31) else "i8"
        return np.array(value, dtype=order + code).tobytes()

    bits = value.bit_length() + (1 if value < 0 else 0)
    length = math.ceil(bits / 64) * 8
    return value.to_bytes(length, "little" if little_endian else "big", signed=value < 0)


def to_bytes(
    data: Any,
    signed: bool = False,
    little_endian: bool = False,
    number_mode: bool = False,
) -> tuple[bytes, bool, str]:
    """Turn a native value into bytes.

    Args:
        data: bytes-like, numpy array, str, int, float, or a list/tuple of these
        signed: Store negative numbers as their magnitude plus a sign flag
        little_endian: Byte order for numbers
        number_mode: Pack integers as float64

    Returns:
        Tuple of (bytes, negative flag, input type name). The type name is
        one of 'bytes', 'str', 'int' or 'float'.

    Raises:
        TypeError: If the value cannot be converted
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data), False, "bytes"
    if isinstance(data, np.ndarray):
        return data.tobytes(), False, "bytes"
    if isinstance(data, str):
        return data.encode("utf-8"), False, "str"
    if isinstance(data, (bool, np.bool_)):
        raise TypeError("Booleans are not supported as input")

    if isinstance(data, (int, np.integer, float, np.floating)):
        if isinstance(data, (float, np.floating)):
            value: int | float = float(data)
            if math.isnan(value):
                raise TypeError("Cannot proceed. Input is NaN.")
            if math.isinf(value):
                raise TypeError("Cannot proceed. Input is Infinity.")
        else:
            value = int(data)

        negative = False
        if signed and value < 0:
            negative = True
            value = -value

        if number_mode or isinstance(value, float):
            return float_to_bytes(value, little_endian), negative, "float"
        return int_to_bytes(value, little_endian), negative, "int"

    if isinstance(data, (list, tuple)):
        chunks = [to_bytes(item, signed, little_endian, number_mode)[0] for item in data]
        return b"".join(chunks), False, "bytes"

    raise TypeError(f"The provided input type can not be processed: {type(data).__name__}")


def _pad_to_item(data: bytes, itemsize: int, little_endian: bool) -> bytes:
    delta = -len(data) % itemsize
    if not delta:
        return data
    return data + bytes(delta) if little_endian else bytes(delta) + data


def compile_output(
    data: bytes,
    output_type: str = "bytes",
    little_endian: bool = False,
    negative: bool = False,
) -> Any:
    """Turn decoded bytes into the requested native type.

    Args:
        data: Decoded bytes
        output_type: One of OUTPUT_TYPES
        little_endian: Byte order for numeric outputs
        negative: The encoded value carried a minus sign

    Returns:
        bytes, bytearray, str, int, float, Decimal or numpy array

    Raises:
        ValueError: If the output type is unknown
        RangeError: If the data is too wide for a float
        SignError: If a negative value is requested as text
    """
    if output_type not in OUTPUT_TYPES:
        raise ValueError(f"Unknown output type: '{output_type}'")

    if negative:
        if output_type == "float":
            return -compile_output(data, "float", little_endian)
        magnitude = compile_output(data, "int", little_endian)
        if output_type == "int":
            return -magnitude
        if output_type == "decimal":
            return -Decimal(magnitude)
        if output_type == "str":
            raise SignError("A negative value cannot be returned as text")
        data = int_to_bytes(-magnitude, little_endian)

    if output_type == "bytes":
        return bytes(data)
    if output_type == "bytearray":
        return bytearray(data)
    if output_type == "str":
        return data.decode("utf-8")
    if output_type == "int":
        return int.from_bytes(data, "little" if little_endian else "big")
    if output_type == "decimal":
        return Decimal(int.from_bytes(data, "little" if little_endian else "big"))
    if output_type == "float":
        if not data:
            return 0.0
        if len(data) > 8:
            raise RangeError(f"{len(data)} bytes do not fit into a 64-bit float")
        itemsize = 4 if len(data) <= 4 else 8
        padded = _pad_to_item(data, itemsize, little_endian)
        code = _byte_order(little_endian) + ("f4" if itemsize == 4 else "f8")
        return float(np.frombuffer(padded, dtype=code)[0])

    dtype = np.dtype(_byte_order(little_endian) + DTYPE_CODES[output_type])
    padded = _pad_to_item(data, dtype.itemsize, little_endian)
    return np.frombuffer(padded, dtype=dtype).copy()
