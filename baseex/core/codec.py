"""Codec base class for the numeral conversion core.

A codec turns a byte sequence into a string of symbols taken from a charset
and back. Codecs only hold immutable configuration (radix, block sizes), so
a single instance can be shared freely between callers.

Implementations:
- RadixConverter: fixed block, arbitrary radix base conversion
- BitPackCodec91 / BitPackCodec2048: variable width bit packers
- PhiNumeralCodec: golden ratio positional numerals

Example:
    >>> class Identity(Codec):
    ...     radix = 256
    ...     def encode(self, input_bytes, charset, little_endian=False):
    ...         return "".join(charset[b] for b in input_bytes), 0
    ...     def decode(self, text, charset, pad_symbols=(), integrity=True,
    ...                little_endian=False):
    ...         return bytes(charset.index(c) for c in text)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class Codec(ABC):
    """Base class for all numeral codecs.

    Attributes:
        radix: Number of distinct data symbols the codec expects
    """

    radix: int

    @abstractmethod
    def encode(
        self,
        input_bytes: bytes,
        charset: Sequence[str],
        little_endian: bool = False,
    ) -> tuple[str, Any]:
        """Encode a byte sequence into symbols.

        Args:
            input_bytes: Bytes to encode (never modified)
            charset: Ordered, duplicate free symbol table of length ``radix``
            little_endian: Process the least significant byte first

        Returns:
            Tuple of (symbol string, codec specific metadata). For block
            based codecs the metadata is the zero padding count.
        """
        pass

    @abstractmethod
    def decode(
        self,
        text: str,
        charset: Sequence[str],
        pad_symbols: Sequence[str] = (),
        integrity: bool = True,
        little_endian: bool = False,
    ) -> bytes:
        """Decode a symbol string back into bytes.

        Args:
            text: Encoded string
            charset: The symbol table used for encoding
            pad_symbols: Symbols that carry padding metadata only
            integrity: Raise on unknown symbols instead of skipping them
            little_endian: Mirror of the flag used for encoding

        Returns:
            Decoded bytes

        Raises:
            DecodingError: If a symbol is unknown or misplaced
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(radix={self.radix})"
