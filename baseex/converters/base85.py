"""Base85 converter (Ascii85, Adobe, RFC 1924, Z85)."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.primitives import pad_bytes
from baseex.core.radix import RadixConverter

_ASCII85 = "".join(chr(c) for c in range(33, 118))

CHARSETS = {
    "adobe": _ASCII85,
    "ascii85": _ASCII85,
    "rfc1924": "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~",
    "z85": "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#",
}

DEFAULT_VERSION = "ascii85"

# Versions that abbreviate a block of four zero bytes as "z"
_Z_VERSIONS = ("adobe", "ascii85")
_ZERO_FRAME = "!!!!!"


def _zero_frame_replacer(frame: str, zero_padding: int) -> str:
    if not zero_padding and frame == _ZERO_FRAME:
        return "z"
    return frame


class Base85(Converter):
    """Base85 converter.

    Four bytes become five symbols. A short final block is filled with the
    highest symbol when decoding, so it rounds up to the original bytes.

    Example:
        >>> Base85().encode("Hello")
        '87cURDZ'
        >>> Base85("adobe").encode(bytes(4))
        '<~z~>'
    """

    name = "base85"
    charset_length = 85
    mutable = frozenset({"number_mode"})

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
            RadixConverter(85, 4, 5, dec_pad_val=84),
            table,
            ConverterSettings(version=DEFAULT_VERSION),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _encode_bytes(
        self, payload: bytes, charset: Charset, settings: ConverterSettings
    ) -> tuple[str, int]:
        replacer = _zero_frame_replacer if settings.version in _Z_VERSIONS else None
        return self.codec.encode(payload, charset.symbols, settings.little_endian, replacer)

    def _post_encode(self, output: str, **context: Any) -> str:
        padding = context["padding"]
        if padding:
            output = output[: -pad_bytes(padding, self.codec.bs_enc, self.codec.bs_dec)]
        if context["settings"].version == "adobe":
            output = f"<~{output}~>"
        return output

    def _pre_decode(self, text: str, **context: Any) -> str:
        version = context["settings"].version
        if version == "adobe":
            if text.startswith("<~"):
                text = text[2:]
            if text.endswith("~>"):
                text = text[:-2]
        if version in _Z_VERSIONS:
            text = text.replace("z", _ZERO_FRAME)
        return text
