"""Base-N converters built on the numeral conversion core."""

from baseex.converters.base1 import Base1
from baseex.converters.base16 import Base16
from baseex.converters.base32 import Base32
from baseex.converters.base58 import Base58
from baseex.converters.base64 import Base64
from baseex.converters.base85 import Base85
from baseex.converters.base91 import Base91
from baseex.converters.base2048 import Base2048
from baseex.converters.base_phi import BasePhi
from baseex.converters.byte_converter import ByteConverter
from baseex.converters.ecoji import Ecoji
from baseex.converters.leb128 import LEB128
from baseex.converters.simple_base import SimpleBase
from baseex.converters.template import Converter
from baseex.converters.uuencode import UUencode

CONVERTERS: dict[str, type[Converter] | type[ByteConverter]] = {
    "base1": Base1,
    "base16": Base16,
    "base32": Base32,
    "base58": Base58,
    "base64": Base64,
    "base85": Base85,
    "base91": Base91,
    "base2048": Base2048,
    "basephi": BasePhi,
    "bytes": ByteConverter,
    "ecoji": Ecoji,
    "leb128": LEB128,
    "uuencode": UUencode,
}

__all__ = [
    "CONVERTERS",
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
]
