"""Base16 (hexadecimal) converter."""

from __future__ import annotations

import re
from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.radix import RadixConverter

_NON_HEX = re.compile(r"[^0-9a-f]")


class Base16(Converter):
    """Hexadecimal converter.

    One byte becomes two symbols. Decoding accepts a leading "0x" and odd
    length input; with integrity off every non-hex character is dropped.

    Example:
        >>> Base16().encode(b"\\xde\\xad")
        'dead'
        >>> Base16().encode(-255, signed=True)
        '-ff'
    """

    name = "base16"
    charset_length = 16
    mutable = frozenset({"number_mode", "signed", "upper"})
    has_signed_mode = True

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable(
            default="default",
            charsets=(Charset(name="default", symbols="0123456789abcdef"),),
        )
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(16, 1, 2),
            table,
            ConverterSettings(),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _pre_decode(self, text: str, **context: Any) -> str:
        settings = context["settings"]
        if text.startswith("0x"):
            text = text[2:]
        if not settings.integrity:
            text = _NON_HEX.sub("", text.lower())
        if len(text) % 2:
            text = f"0{text}"
        return text
