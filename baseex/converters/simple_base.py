"""Simple positional bases 2 to 62."""

from __future__ import annotations

import string
from typing import Any

from baseex.components.charset import CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.errors import RangeError
from baseex.core.radix import RadixConverter

DIGITS = string.digits + string.ascii_lowercase + string.ascii_uppercase


class SimpleBase(Converter):
    """Plain positional notation in any radix from 2 to 62.

    The whole input is one integer written with the digits 0-9, a-z, A-Z.
    Numbers are little-endian by default, except for radix 2 and 16 which
    read bytes in their natural order.

    Example:
        >>> SimpleBase(36).encode(1295)
        'zz'
        >>> SimpleBase(2).encode(b"\\x05")
        '101'
    """

    name = "simplebase"
    mutable = frozenset({"little_endian", "signed", "upper"})
    has_signed_mode = True

    def __init__(
        self,
        radix: int,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        if isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= 62:
            raise RangeError(
                "Radix argument must be provided and has to be an integer between 2 and 62."
            )
        self.radix = radix
        self.charset_length = radix  # type: ignore[misc]
        # Mixed case digits above 36 make case folding lossy
        if radix > 36:
            self.mutable = frozenset({"little_endian", "signed"})  # type: ignore[misc]

        table = CharsetTable.from_mapping("default", {"default": DIGITS[:radix]})
        super().__init__(
            RadixConverter(radix, 0, 0),
            table,
            ConverterSettings(signed=True, little_endian=radix not in (2, 16)),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _pre_decode(self, text: str, **context: Any) -> str:
        if self.radix == 2:
            return text.zfill(len(text) + -len(text) % 8)
        if self.radix == 16:
            return text.zfill(len(text) + len(text) % 2)
        return text

    def __repr__(self) -> str:
        return f"SimpleBase(radix={self.radix})"
