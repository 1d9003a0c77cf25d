"""basE91 converter."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.bitpack import BASE91_SYMBOLS, BitPackCodec91


class Base91(Converter):
    """basE91 converter (Joachim Henke's variable width encoding).

    Example:
        >>> Base91().encode("test")
        'fPNKd'
    """

    name = "base91"
    charset_length = 91
    mutable = frozenset({"number_mode"})

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping("default", {"default": BASE91_SYMBOLS})
        if version is not None:
            options["version"] = version
        super().__init__(
            BitPackCodec91(),
            table,
            ConverterSettings(),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )
