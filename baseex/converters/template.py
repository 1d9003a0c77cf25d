"""Converter template shared by all base-N converters.

A converter owns one codec from ``baseex.core`` plus an immutable charset
table and default settings. It handles everything around the codec:
native input coercion, sign prefixing, case folding, padding symbols and
output compilation. Variants customize the steps through small hooks
(``_post_encode``, ``_pre_decode``, ...) instead of reimplementing the flow.

Encode flow:
    native value -> bytes -> codec.encode -> sign -> case -> _post_encode -> wrap

Decode flow:
    text -> sign -> case -> _pre_decode -> codec.decode -> _post_decode -> native value
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.config import converter_config
from baseex.core.codec import Codec
from baseex.core.errors import CharsetError, SignError
from baseex.core.smart_io import compile_output, to_bytes

logger = logging.getLogger(__name__)

# Options a converter has to opt into explicitly
MUTABLE_OPTIONS = frozenset(
    {
        "signed",
        "little_endian",
        "padding",
        "upper",
        "decimal_mode",
        "number_mode",
        "header",
        "trim",
    }
)

_LEADING_ZEROS = re.compile(r"^0+(?!$)")


def wrap_output(output: str, cols: int = 0) -> str:
    """Insert a newline every ``cols`` characters (0 disables wrapping)."""
    if not cols:
        return output
    return "\n".join(output[i : i + cols] for i in range(0, len(output), cols))


def normalize_input(text: str) -> str:
    """Remove line breaks inserted by ``wrap_output``."""
    return str(text).replace("\r", "").replace("\n", "")


class Converter:
    """Base class for all converters.

    Subclasses set the class attributes and pass a codec, the builtin
    charset table and the default settings to ``__init__``.

    Attributes:
        name: Registry name, also the [converters.<name>] config section
        charset_length: Required number of data symbols (None = any)
        mutable: Options from MUTABLE_OPTIONS the caller may change
        has_signed_mode: A leading '-' marks a negative value
        accepts_bytes: decode takes bytes-like input as well as text
        codec: Codec instance doing the numeral conversion
        charsets: Immutable charset table
        defaults: Settings used when a call passes no options

    Example:
        >>> b64 = Base64()
        >>> b64.encode("Hello")
        'SGVsbG8='
        >>> b64.decode("SGVsbG8=", output_type="str")
        'Hello'
    """

    name: ClassVar[str] = ""
    charset_length: ClassVar[int | None] = None
    mutable: ClassVar[frozenset[str]] = frozenset()
    has_signed_mode: ClassVar[bool] = False
    accepts_bytes: ClassVar[bool] = False

    def __init__(
        self,
        codec: Codec,
        charsets: CharsetTable,
        defaults: ConverterSettings,
        extra_charsets: Mapping[str, str | Charset] | Iterable[Charset] | None = None,
        config_path: str | None = None,
        **options: Any,
    ) -> None:
        """Initialize converter.

        Args:
            codec: Codec used for the numeral conversion
            charsets: Builtin charset table
            defaults: Builtin default settings
            extra_charsets: Additional charsets, either Charset objects or a
                mapping of version name to symbols
            config_path: Configuration file with per-converter defaults
            **options: Default option overrides (see ConverterSettings)

        Raises:
            CharsetError: If a charset does not fit the converter
            TypeError: If an option is unknown or not changeable
            ValueError: If an option value is invalid
        """
        self.codec = codec

        config_options, config_charsets = converter_config(self.name, config_path)
        for charset in [*config_charsets, *self._coerce_charsets(extra_charsets, charsets)]:
            charsets = charsets.with_charset(charset)
        self._check_charsets(charsets)
        self.charsets = charsets

        self.defaults = self._resolve(defaults, {**config_options, **options})
        logger.debug("Created %r with %s", self, self.defaults)

    def _coerce_charsets(
        self,
        extra: Mapping[str, str | Charset] | Iterable[Charset] | None,
        table: CharsetTable,
    ) -> list[Charset]:
        if extra is None:
            return []
        if not isinstance(extra, Mapping):
            return list(extra)

        pad_symbols = table[table.default].pad_symbols
        result = []
        for version, symbols in extra.items():
            if isinstance(symbols, Charset):
                result.append(symbols.model_copy(update={"name": version}))
            else:
                result.append(Charset(name=version, symbols=symbols, pad_symbols=pad_symbols))
        return result

    def _check_charsets(self, table: CharsetTable) -> None:
        if self.charset_length is None:
            return
        for charset in table.charsets:
            if len(charset) != self.charset_length:
                raise CharsetError(
                    f"Charset '{charset.name}' of {self.name} must have "
                    f"{self.charset_length} symbols, got {len(charset)}"
                )

    def _version_defaults(self, version: str) -> dict[str, Any]:
        """Settings implied by selecting a charset version."""
        return {}

    def _resolve(self, base: ConverterSettings, options: Mapping[str, Any]) -> ConverterSettings:
        unknown = set(options) - ConverterSettings.option_names()
        if unknown:
            raise TypeError(f"Unknown option(s) for {self.name}: {', '.join(sorted(unknown))}")

        for key in MUTABLE_OPTIONS & set(options):
            if key not in self.mutable and options[key] != getattr(base, key):
                raise TypeError(f"Option '{key}' is not allowed for this type of converter ({self.name})")

        version = options.get("version", base.version)
        if version not in self.charsets:
            raise ValueError(
                f"Unknown version '{version}' for {self.name}. "
                f"Available: {', '.join(self.charsets.names)}"
            )
        if version != base.version:
            options = {**self._version_defaults(version), **options}

        settings = base.merged(**options)

        if settings.padding and settings.signed:
            logger.warning("Padding was disabled, it is incompatible with signed mode")
            settings = settings.merged(padding=False)
        if settings.decimal_mode and settings.number_mode:
            logger.warning("Number mode was disabled, decimal mode takes precedence")
            settings = settings.merged(number_mode=False)
        return settings

    def settings(self, **options: Any) -> ConverterSettings:
        """Resolve per-call options against the converter defaults.

        Args:
            **options: Option overrides (see ConverterSettings)

        Returns:
            Validated settings

        Raises:
            TypeError: If an option is unknown or not changeable
            ValueError: If an option value is invalid
        """
        return self._resolve(self.defaults, options)

    def encode(self, data: Any, **options: Any) -> str:
        """Encode a native value.

        Args:
            data: bytes-like, str, int, float, numpy array, or a list of these
            **options: Per-call option overrides

        Returns:
            Encoded string
        """
        settings = self.settings(**options)
        charset = self.charsets[settings.version]

        payload, negative, input_type = self._to_bytes(data, settings)
        output, padding = self._encode_bytes(payload, charset, settings)

        if settings.signed:
            output = self._apply_sign(output, negative)
        if settings.upper:
            output = output.upper()

        output = self._post_encode(
            output,
            payload=payload,
            charset=charset,
            settings=settings,
            padding=padding,
            input_type=input_type,
        )
        return self._wrap(output, settings)

    def decode(self, text: str, **options: Any) -> Any:
        """Decode a string into the requested output type.

        Args:
            text: Encoded string (line breaks are ignored)
            **options: Per-call option overrides; ``output_type`` selects
                the returned type (default bytes)

        Returns:
            Decoded value

        Raises:
            DecodingError: If the input is not valid for the charset
            SignError: If the input is negative but signed mode is off
        """
        settings = self.settings(**options)
        charset = self.charsets[settings.version]

        text = normalize_input(text)
        text, negative = self._extract_sign(text, settings)
        if "upper" in self.mutable and charset.text == charset.text.lower():
            text = text.lower()

        text = self._pre_decode(text, charset=charset, settings=settings)
        output = self._decode_text(text, charset, settings)
        output = self._post_decode(output, charset=charset, settings=settings)
        return self._compile(output, settings, negative)

    def _to_bytes(self, data: Any, settings: ConverterSettings) -> tuple[Any, bool, str]:
        return to_bytes(data, settings.signed, settings.little_endian, settings.number_mode)

    def _encode_bytes(
        self, payload: bytes, charset: Charset, settings: ConverterSettings
    ) -> tuple[str, int]:
        return self.codec.encode(payload, charset.symbols, settings.little_endian)

    def _decode_text(self, text: str, charset: Charset, settings: ConverterSettings) -> Any:
        return self.codec.decode(
            text, charset.symbols, charset.pad_symbols, settings.integrity, settings.little_endian
        )

    def _compile(self, output: Any, settings: ConverterSettings, negative: bool) -> Any:
        output_type = settings.output_type
        # Number mode payloads are float64 unless a type was requested
        if settings.number_mode and output_type == "bytes":
            output_type = "float"
        return compile_output(output, output_type, settings.little_endian, negative)

    def _apply_sign(self, output: str, negative: bool) -> str:
        output = _LEADING_ZEROS.sub("", output)
        return f"-{output}" if negative else output

    def _extract_sign(self, text: str, settings: ConverterSettings) -> tuple[str, bool]:
        if not self.has_signed_mode or not text.startswith("-"):
            return text, False
        if not settings.signed:
            raise SignError()
        return text[1:], True

    def _wrap(self, output: str, settings: ConverterSettings) -> str:
        return wrap_output(output, settings.line_wrap)

    def _post_encode(self, output: str, **context: Any) -> str:
        return output

    def _pre_decode(self, text: str, **context: Any) -> str:
        return text

    def _post_decode(self, output: Any, **context: Any) -> Any:
        return output

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(codec={self.codec!r})"
