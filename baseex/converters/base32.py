"""Base32 converter (RFC 3548, RFC 4648, Crockford, z-base-32)."""

from __future__ import annotations

from typing import Any

from baseex.components.charset import CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.primitives import pad_bytes
from baseex.core.radix import RadixConverter

CHARSETS = {
    "crockford": "0123456789abcdefghjkmnpqrstvwxyz",
    "rfc3548": "abcdefghijklmnopqrstuvwxyz234567",
    "rfc4648": "0123456789abcdefghijklmnopqrstuv",
    "zbase32": "ybndrfg8ejkmcpqxot1uwisza345h769",
}

DEFAULT_VERSION = "rfc4648"


class Base32(Converter):
    """Base32 converter.

    Five bytes become eight symbols. Short final blocks are cut to the
    symbols that carry data; with padding on, "=" fills up the block.

    Versions:
        rfc4648: "Extended hex" alphabet (default)
        rfc3548: Classic A-Z2-7 alphabet
        crockford: Douglas Crockford's alphabet, upper case output
        zbase32: Human oriented alphabet, no padding
    """

    name = "base32"
    charset_length = 32
    mutable = frozenset({"little_endian", "number_mode", "padding", "signed", "upper"})
    has_signed_mode = True

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping(
            DEFAULT_VERSION,
            CHARSETS,
            pad_symbols={name: "=" for name in CHARSETS},
        )
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(32, 5, 8),
            table,
            ConverterSettings(version=DEFAULT_VERSION, **self._version_defaults(DEFAULT_VERSION)),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _version_defaults(self, version: str) -> dict[str, Any]:
        return {
            "padding": version in ("rfc3548", "rfc4648"),
            "upper": version == "crockford",
        }

    def _post_encode(self, output: str, **context: Any) -> str:
        settings = context["settings"]
        padding = context["padding"]
        if settings.little_endian or not padding:
            return output

        cut = pad_bytes(padding, self.codec.bs_enc, self.codec.bs_dec)
        output = output[:-cut]
        if settings.padding:
            pad_symbol = (context["charset"].pad_symbols or ("=",))[0]
            output += pad_symbol * cut
        return output
