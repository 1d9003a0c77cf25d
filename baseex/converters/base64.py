"""Base64 converter (standard and URL safe alphabets)."""

from __future__ import annotations

import string
from typing import Any

from baseex.components.charset import CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.primitives import pad_bytes
from baseex.core.radix import RadixConverter

_ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits

CHARSETS = {
    "default": _ALPHANUMERIC + "+/",
    "urlsafe": _ALPHANUMERIC + "-_",
}


class Base64(Converter):
    """Base64 converter.

    Three bytes become four symbols; with padding on, "=" completes the
    final block.

    Example:
        >>> Base64().encode("Hello")
        'SGVsbG8='
        >>> Base64("urlsafe", padding=False).encode(b"\\xfb\\xff")
        '-_8'
    """

    name = "base64"
    charset_length = 64
    mutable = frozenset({"number_mode", "padding"})

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
            CHARSETS,
            pad_symbols={name: "=" for name in CHARSETS},
        )
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(64, 3, 4),
            table,
            ConverterSettings(padding=True),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _post_encode(self, output: str, **context: Any) -> str:
        padding = context["padding"]
        if not padding:
            return output

        cut = pad_bytes(padding, self.codec.bs_enc, self.codec.bs_dec)
        output = output[:-cut]
        if context["settings"].padding:
            pad_symbol = (context["charset"].pad_symbols or ("=",))[0]
            output += pad_symbol * cut
        return output
