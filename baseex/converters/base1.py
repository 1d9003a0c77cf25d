"""Base1 (unary) converter."""

from __future__ import annotations

import logging
from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.errors import RangeError
from baseex.core.radix import RadixConverter

logger = logging.getLogger(__name__)

# Longest unary string the converter agrees to build
MAX_UNARY_LENGTH = 2**28
LARGE_UNARY_LENGTH = 2**24

DECIMAL_DIGITS = "0123456789"

CHARSETS = {
    "default": "1",
    "tmark": "|#",
}


class Base1(Converter):
    """Unary converter.

    The input is read as one integer n and written as n marks. The
    "tmark" version writes tally marks: "#" for every group of five and
    "|" for the rest.

    Example:
        >>> Base1().encode(5)
        '11111'
        >>> Base1("tmark").encode(12)
        '##||'
    """

    name = "base1"
    mutable = frozenset({"signed", "little_endian"})
    has_signed_mode = True

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping("default", CHARSETS)
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(10, 0, 0),
            table,
            ConverterSettings(signed=True, little_endian=True),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _encode_bytes(
        self, payload: bytes, charset: Charset, settings: ConverterSettings
    ) -> tuple[str, int]:
        decimal, _ = self.codec.encode(payload, DECIMAL_DIGITS, settings.little_endian)
        too_long = len(decimal) > len(str(MAX_UNARY_LENGTH))
        if too_long or int(decimal) > MAX_UNARY_LENGTH:
            raise RangeError(
                f"The value exceeds the maximum unary length of {MAX_UNARY_LENGTH} characters"
            )
        n = int(decimal)
        if n > LARGE_UNARY_LENGTH:
            logger.warning("Building a unary string of %d characters", n)

        if len(charset) == 1:
            return charset[0] * n, 0
        # Tally marks: last symbol counts five, first counts one
        fives, ones = divmod(n, 5)
        return charset[-1] * fives + charset[0] * ones, 0

    def _decode_text(self, text: str, charset: Charset, settings: ConverterSettings) -> Any:
        if len(charset) == 1:
            n = text.count(charset[0])
        else:
            n = text.count(charset[-1]) * 5 + text.count(charset[0])
        return self.codec.decode(str(n), DECIMAL_DIGITS, (), True, settings.little_endian)
