"""Base58 converter (Bitcoin, Flickr and default alphabets)."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.radix import RadixConverter

CHARSETS = {
    "default": "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    "bitcoin": "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz",
    "flickr": "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
}

DEFAULT_VERSION = "bitcoin"


def _leading(sequence: Any, item: Any) -> int:
    count = 0
    for element in sequence:
        if element != item:
            break
        count += 1
    return count


class Base58(Converter):
    """Base58 converter.

    The whole input is converted as one big integer. With padding on (the
    default) every leading zero byte is written as one leading "zero"
    symbol, as in Bitcoin addresses. Integer input is never padded.

    Example:
        >>> Base58().encode(b"\\x00\\x00hi")
        '118wr'
    """

    name = "base58"
    charset_length = 58
    mutable = frozenset({"padding", "signed"})
    has_signed_mode = True

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping(DEFAULT_VERSION, CHARSETS)
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(58, 0, 0),
            table,
            ConverterSettings(version=DEFAULT_VERSION, padding=True),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _post_encode(self, output: str, **context: Any) -> str:
        settings = context["settings"]
        payload = context["payload"]
        if not settings.padding or context["input_type"] == "int" or not payload:
            return output

        zero_symbol = context["charset"][0]
        zeros = _leading(payload, 0)
        if zeros == len(payload):
            return zero_symbol * zeros
        return zero_symbol * zeros + output

    def _decode_text(self, text: str, charset: Charset, settings: ConverterSettings) -> Any:
        if not settings.padding or not text:
            return super()._decode_text(text, charset, settings)

        zeros = _leading(text, charset[0])
        if zeros == len(text):
            return bytes(zeros)
        return bytes(zeros) + super()._decode_text(text[zeros:], charset, settings)
