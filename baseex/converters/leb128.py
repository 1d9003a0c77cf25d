"""LEB128 converter (little endian base 128 variable length integers)."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter, normalize_input, wrap_output
from baseex.core.errors import DecodingError, SignError
from baseex.core.radix import RadixConverter
from baseex.core.smart_io import compile_output, to_bytes

HEX_SYMBOLS = "0123456789abcdef"


class LEB128(Converter):
    """LEB128 converter.

    The input is read as one little-endian integer and written as
    groups of 7 bits, least significant first, with the high bit of every
    byte but the last set. In signed mode the value is stored in two's
    complement. The default version returns the raw bytes; the "hex"
    version returns them as a hexadecimal string.

    Example:
        >>> LEB128().encode(624485)
        b'\\xe5\\x8e&'
        >>> LEB128("hex", signed=True).encode(-123456)
        'c0bb78'
    """

    name = "leb128"
    charset_length = 16
    mutable = frozenset({"signed"})
    accepts_bytes = True

    def __init__(
        self,
        version: str | None = None,
        *,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping(
            "default", {"default": HEX_SYMBOLS, "hex": HEX_SYMBOLS}
        )
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(16, 1, 2),
            table,
            ConverterSettings(little_endian=True),
            config_path=config_path,
            **options,
        )

    def encode(self, data: Any, **options: Any) -> bytes | str:  # type: ignore[override]
        """Encode an integer (or bytes read as a little-endian integer).

        Args:
            data: int, or any input accepted by the other converters
            **options: Per-call option overrides

        Returns:
            LEB128 bytes, or a string for every version but "default"

        Raises:
            SignError: If the value is negative and signed mode is off
        """
        settings = self.settings(**options)
        payload, negative, _ = to_bytes(data, True, True)

        n = int.from_bytes(payload, "little")
        if negative:
            if not settings.signed:
                raise SignError("Negative values in unsigned mode are invalid.")
            n = -n

        output = bytearray()
        while True:
            byte = n & 0x7F
            n >>= 7
            if settings.signed:
                done = (n == 0 and not byte & 0x40) or (n == -1 and byte & 0x40)
            else:
                done = n == 0
            if done:
                output.append(byte)
                break
            output.append(byte | 0x80)

        if settings.version == "default":
            return bytes(output)
        text, _ = self.codec.encode(bytes(output), self.charsets[settings.version].symbols)
        return wrap_output(text, settings.line_wrap)

    def decode(self, data: Any, **options: Any) -> Any:
        """Decode LEB128 bytes (or their text form for non-default versions).

        Args:
            data: bytes-like input, or a string for text versions
            **options: Per-call option overrides

        Returns:
            Decoded value of the requested output type

        Raises:
            TypeError: If text is given to the bytes version
            DecodingError: If integrity is on and the continuation bits are
                malformed
        """
        settings = self.settings(**options)

        if settings.version == "default":
            if isinstance(data, str):
                raise TypeError("Input must be a bytes like object.")
            raw = bytes(data)
        else:
            if isinstance(data, (bytes, bytearray, memoryview)):
                data = bytes(data).decode("ascii")
            charset = self.charsets[settings.version]
            text = normalize_input(data).strip()
            if charset.text == charset.text.lower():
                text = text.lower()
            raw = self.codec.decode(text, charset.symbols, (), settings.integrity)

        if not raw:
            return compile_output(bytes(1), settings.output_type, True)
        if settings.integrity:
            if any(not b & 0x80 for b in raw[:-1]) or raw[-1] & 0x80:
                raise DecodingError("", "Malformed LEB128 sequence, continuation bits are inconsistent")

        n = 0
        for i, byte in enumerate(raw):
            n |= (byte & 0x7F) << (7 * i)
        if settings.signed and raw[-1] & 0x40:
            n -= 1 << (7 * len(raw))

        negative = n < 0
        magnitude = -n if negative else n
        output = magnitude.to_bytes(max(1, (magnitude.bit_length() + 7) // 8), "little")
        return compile_output(output, settings.output_type, True, negative)
