"""High-level API for encoding and decoding.

Provides encode() and decode() functions that pick a converter by name,
so callers do not need to construct converter objects themselves.
"""

from __future__ import annotations

import re
from typing import Any

from baseex.converters import CONVERTERS, ByteConverter, SimpleBase
from baseex.converters.template import Converter

# Converter names that select a non-default charset version
ALIASES: dict[str, tuple[str, str]] = {
    "base1_tmark": ("base1", "tmark"),
    "base32_crockford": ("base32", "crockford"),
    "base32_rfc3548": ("base32", "rfc3548"),
    "base32_rfc4648": ("base32", "rfc4648"),
    "base32_zbase32": ("base32", "zbase32"),
    "base58_bitcoin": ("base58", "bitcoin"),
    "base58_flickr": ("base58", "flickr"),
    "base64_urlsafe": ("base64", "urlsafe"),
    "base85_adobe": ("base85", "adobe"),
    "base85_ascii85": ("base85", "ascii85"),
    "base85_rfc1924": ("base85", "rfc1924"),
    "base85_z85": ("base85", "z85"),
    "ecoji_v1": ("ecoji", "emojis_v1"),
    "ecoji_v2": ("ecoji", "emojis_v2"),
    "leb128_hex": ("leb128", "hex"),
    "uuencode_original": ("uuencode", "original"),
    "xxencode": ("uuencode", "xx"),
}

_SIMPLE_BASE = re.compile(r"base(\d+)")

# Options consumed by the converter constructor rather than each call
_CONSTRUCTOR_OPTIONS = ("charsets", "config_path")


def available_converters() -> list[str]:
    """Return the names accepted by get_converter().

    Any ``base<N>`` with 2 <= N <= 62 is accepted as well and maps to
    SimpleBase(N) when no dedicated converter exists.
    """
    return sorted([*CONVERTERS, *ALIASES])


def get_converter(name: str, **options: Any) -> Converter | ByteConverter:
    """Create a converter by name.

    Args:
        name: Converter name such as 'base64', 'base32_crockford' or 'base36'
        **options: Constructor options (config_path, charsets, defaults)

    Returns:
        Converter instance

    Raises:
        TypeError: If name is not a string
        ValueError: If no converter has that name

    Example:
        >>> get_converter("base32_crockford").encode(b"hi")
        'D1MG'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected converter name as str, got {type(name)}")

    key = name.strip().lower().replace("-", "_")
    if key in CONVERTERS:
        return CONVERTERS[key](**options)
    if key in ALIASES:
        converter, version = ALIASES[key]
        return CONVERTERS[converter](version, **options)

    match = _SIMPLE_BASE.fullmatch(key)
    if match:
        return SimpleBase(int(match.group(1)), **options)

    raise ValueError(
        f"Unknown converter '{name}'. Available: {', '.join(available_converters())}"
    )


def _split_options(options: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    constructor = {k: options.pop(k) for k in _CONSTRUCTOR_OPTIONS if k in options}
    return constructor, options


def encode(data: Any, converter: str = "base64", **options: Any) -> str | bytes:
    """Encode a value with the named converter.

    Args:
        data: bytes-like, str, int, float, numpy array, or a list of these
        converter: Converter name (default: 'base64')
        **options: Converter options, e.g. version='urlsafe', padding=False,
            signed=True. config_path and charsets are passed to the
            converter constructor.

    Returns:
        Encoded string, or bytes for the binary converters "bytes" and "leb128"

    Raises:
        ValueError: If the converter is unknown or an option value is invalid
        TypeError: If the data type or an option is not supported

    Example:
        >>> from baseex import encode
        >>> encode("Hello")
        'SGVsbG8='
        >>> encode(255, "base16")
        '00ff'
    """
    constructor, call = _split_options(dict(options))
    return get_converter(converter, **constructor).encode(data, **call)


def decode(
    text: str | bytes,
    converter: str = "base64",
    output: str = "bytes",
    **options: Any,
) -> Any:
    """Decode a string with the named converter.

    Args:
        text: Encoded string, or bytes for the binary converters
        converter: Converter name (default: 'base64')
        output: Output type, e.g. 'bytes', 'str', 'int', 'float', 'uint16'
        **options: Converter options (see encode)

    Returns:
        Decoded value of the requested output type

    Raises:
        TypeError: If text is not a string (or bytes-like for binary converters)
        DecodingError: If text contains symbols outside the charset

    Example:
        >>> from baseex import decode
        >>> decode("SGVsbG8=", output="str")
        'Hello'
    """
    constructor, call = _split_options(dict(options))
    instance = get_converter(converter, **constructor)

    binary = isinstance(text, (bytes, bytearray, memoryview))
    if not isinstance(text, str) and not (binary and instance.accepts_bytes):
        raise TypeError(f"Expected str, got {type(text)}")

    call.setdefault("output_type", output)
    return instance.decode(text, **call)
