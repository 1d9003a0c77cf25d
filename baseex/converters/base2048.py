"""Base2048 converter."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.bitpack import BASE2048_PAD_SYMBOLS, BASE2048_SYMBOLS, BitPackCodec2048
from baseex.core.errors import CharsetError


class Base2048(Converter):
    """Base2048 converter, 11 bits per symbol.

    The output is made of Unicode letters that survive most text
    channels; a final group of up to 3 bits is written with one of the
    digits "0".."7".
    """

    name = "base2048"
    charset_length = 2048

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping(
            "default",
            {"default": BASE2048_SYMBOLS},
            pad_symbols={"default": BASE2048_PAD_SYMBOLS},
        )
        if version is not None:
            options["version"] = version
        super().__init__(
            BitPackCodec2048(),
            table,
            ConverterSettings(),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _check_charsets(self, table: CharsetTable) -> None:
        super()._check_charsets(table)
        for charset in table.charsets:
            if len(charset.pad_symbols) != 8:
                raise CharsetError(
                    f"Charset '{charset.name}' of {self.name} needs 8 pad symbols, "
                    f"got {len(charset.pad_symbols)}"
                )

    def _encode_bytes(
        self, payload: bytes, charset: Charset, settings: ConverterSettings
    ) -> tuple[str, int]:
        return self.codec.encode(
            payload, charset.symbols, settings.little_endian, charset.pad_symbols
        )
