"""Byte converter: native values to raw bytes and back."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

from baseex.components.settings import ConverterSettings
from baseex.config import converter_config
from baseex.core.smart_io import compile_output, to_bytes

# The only options that apply without a text encoding
OPTIONS = frozenset({"little_endian", "number_mode", "output_type"})


class ByteConverter:
    """Exposes the smart input/output layer without a text encoding.

    encode() returns the bytes any other converter would encode, decode()
    turns bytes into any supported output type. The byte order defaults
    to the one of the running machine.

    Example:
        >>> ByteConverter(little_endian=False).encode(1)
        b'\\x00\\x01'
        >>> ByteConverter(little_endian=False).decode(b"\\x00\\x01", output_type="int")
        1
    """

    name = "bytes"
    accepts_bytes = True

    def __init__(self, *, config_path: str | None = None, **options: Any) -> None:
        """Initialize converter.

        Args:
            config_path: Configuration file with per-converter defaults
            **options: little_endian, number_mode or output_type

        Raises:
            TypeError: If an option does not apply to byte conversion
        """
        config_options, _ = converter_config(self.name, config_path)
        defaults = ConverterSettings(little_endian=sys.byteorder == "little")
        self.defaults = self._resolve(defaults, {**config_options, **options})

    def _resolve(self, base: ConverterSettings, options: Mapping[str, Any]) -> ConverterSettings:
        unknown = set(options) - OPTIONS
        if unknown:
            raise TypeError(f"Unknown option(s) for {self.name}: {', '.join(sorted(unknown))}")
        return base.merged(**options)

    def settings(self, **options: Any) -> ConverterSettings:
        """Resolve per-call options against the converter defaults."""
        return self._resolve(self.defaults, options)

    def encode(self, data: Any, **options: Any) -> bytes:
        """Return the bytes of a native value."""
        settings = self.settings(**options)
        payload, _, _ = to_bytes(data, False, settings.little_endian, settings.number_mode)
        return payload

    def decode(self, data: Any, **options: Any) -> Any:
        """Turn bytes into the requested output type.

        Raises:
            TypeError: If data is not bytes-like
        """
        if isinstance(data, str):
            raise TypeError("Input must be a bytes like object.")
        settings = self.settings(**options)
        output_type = settings.output_type
        if settings.number_mode and output_type == "bytes":
            output_type = "float"
        return compile_output(bytes(data), output_type, settings.little_endian)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(little_endian={self.defaults.little_endian})"
