"""Arbitrary radix binary-to-text encodings.

This package provides reversible base-N codecs:
- Block based radix conversion (base16, base32, base58, base64, base85, base 2..62)
- Variable width bit packing (basE91, base2048)
- Golden ratio positional numerals (base phi)
- Unary numerals (base1)
- Line framed uuencode and Ecoji emoji packing
- LEB128 variable length integers

Quick Start:
    >>> from baseex import encode, decode
    >>>
    >>> encode("Hello")
    'SGVsbG8='
    >>> decode("SGVsbG8=", output="str")
    'Hello'

For more control, construct a converter and reuse it:
    >>> from baseex import Base32
    >>>
    >>> b32 = Base32("crockford")
    >>> b32.encode(b"hi")
    'D1MG'
    >>> b32.decode("d1mg")
    b'hi'

The numeral core can be used directly on bytes and charsets:
    >>> from baseex.core.radix import RadixConverter
    >>>
    >>> RadixConverter(2, 1, 8).encode(b"\\x00", "01")
    ('00000000', 0)
"""

__version__ = "0.1.0"

from baseex.api import available_converters, decode, encode, get_converter
from baseex.converters import (
    Base1,
    Base16,
    Base32,
    Base58,
    Base64,
    Base85,
    Base91,
    Base2048,
    BasePhi,
    ByteConverter,
    Converter,
    Ecoji,
    LEB128,
    SimpleBase,
    UUencode,
)
from baseex.core.errors import (
    BaseExError,
    CharsetError,
    DecodingError,
    PhiApproximationWarning,
    RangeError,
    SignError,
)

__all__ = [
    "__version__",
    "encode",
    "decode",
    "get_converter",
    "available_converters",
    "Base1",
    "Base16",
    "Base32",
    "Base58",
    "Base64",
    "Base85",
    "Base91",
    "Base2048",
    "BasePhi",
    "ByteConverter",
    "Converter",
    "Ecoji",
    "LEB128",
    "SimpleBase",
    "UUencode",
    "BaseExError",
    "CharsetError",
    "DecodingError",
    "PhiApproximationWarning",
    "RangeError",
    "SignError",
]
