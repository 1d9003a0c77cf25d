"""Generic arbitrary radix base conversion.

RadixConverter groups input bytes into fixed size blocks, reads every block
as one big-endian integer and writes it out as a fixed number of radix-R
digits. The (bs_enc, bs_dec) block pair controls the grouping; (0, 0) makes
the whole buffer a single block, which is how non power of two bases such
as base58 or arbitrary "simple" bases are built.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from decimal import Decimal

from baseex.core.codec import Codec
from baseex.core.errors import DecodingError
from baseex.core.primitives import (
    from_digits,
    guess_block_sizes,
    pad_chars,
    to_digits,
    zero_padding,
)

logger = logging.getLogger(__name__)

Replacer = Callable[[str, int], str]


def format_decimal(n: int) -> str:
    """Render a non-negative integer as a decimal string of any length."""
    try:
        return str(n)
    except ValueError:
        # int -> str is capped by sys.get_int_max_str_digits()
        return format(Decimal(n), "f")


class RadixConverter(Codec):
    """Block based converter between bytes and radix-R symbols.

    Attributes:
        radix: Number of symbols per digit
        bs_enc: Bytes per block (0 = whole input)
        bs_dec: Symbols per block (0 = whole input)
        dec_pad_val: Symbol index used to fill the last block when decoding
    """

    def __init__(
        self,
        radix: int,
        bs_enc: int | None = None,
        bs_dec: int | None = None,
        dec_pad_val: int = 0,
    ) -> None:
        """Initialize converter.

        Args:
            radix: Number of symbols per digit (>= 2)
            bs_enc: Bytes per block. Derived from the radix if omitted.
            bs_dec: Symbols per block. Derived from the radix if omitted.
            dec_pad_val: Symbol index used to fill a short final block

        Raises:
            ValueError: If the radix or block sizes are invalid
        """
        if radix < 2:
            raise ValueError(f"Radix must be at least 2, got {radix}")
        if bs_enc is None or bs_dec is None:
            bs_enc, bs_dec = guess_block_sizes(radix)
        if bs_enc < 0 or bs_dec < 0:
            raise ValueError(f"Block sizes must be non-negative, got ({bs_enc}, {bs_dec})")
        if bool(bs_enc) != bool(bs_dec):
            raise ValueError("bs_enc and bs_dec must both be zero or both be positive")
        if not 0 <= dec_pad_val < radix:
            raise ValueError(f"dec_pad_val must be in [0, {radix}), got {dec_pad_val}")
        if bs_enc and radix**bs_dec < 256**bs_enc:
            raise ValueError(
                f"{bs_dec} radix-{radix} digits cannot hold {bs_enc} bytes"
            )

        self.radix = radix
        self.bs_enc = bs_enc
        self.bs_dec = bs_dec
        self.dec_pad_val = dec_pad_val
        logger.debug("RadixConverter radix=%d blocks=(%d, %d)", radix, bs_enc, bs_dec)

    def encode(
        self,
        input_bytes: bytes,
        charset: Sequence[str],
        little_endian: bool = False,
        replacer: Replacer | None = None,
    ) -> tuple[str, int]:
        """Encode bytes into radix-R symbols.

        Args:
            input_bytes: Bytes (or any iterable of ints 0..255)
            charset: Symbol table with at least ``radix`` symbols
            little_endian: Reverse the input before grouping; the zero
                padding then goes in front of the reversed bytes
            replacer: Optional ``f(frame, zero_padding) -> str`` applied to
                every encoded block

        Returns:
            Tuple of (encoded string, number of zero bytes added)

        Example:
            >>> RadixConverter(64, 3, 4).encode(b"Hello", BASE64_SYMBOLS)
            ('SGVsbG8A', 1)
        """
        data = bytes(input_bytes)
        bs = self.bs_enc or len(data)
        padding = zero_padding(len(data), bs)

        if little_endian:
            working = bytes(padding) + data[::-1]
        else:
            working = data + bytes(padding)

        if not working:
            return ("0" if self.radix == 10 else ""), 0

        frames = []
        for start in range(0, len(working), bs):
            n = int.from_bytes(working[start : start + bs], "big")

            if self.radix == 10:
                frames.append(format_decimal(n).zfill(self.bs_dec))
                continue

            digits = to_digits(n, self.radix, self.bs_dec)
            frame = "".join(charset[d] for d in digits)
            if replacer is not None:
                frame = replacer(frame, padding)
            frames.append(frame)

        return "".join(frames), padding

    def decode(
        self,
        text: str,
        charset: Sequence[str],
        pad_symbols: Sequence[str] = (),
        integrity: bool = True,
        little_endian: bool = False,
    ) -> bytes:
        """Decode radix-R symbols into bytes.

        Args:
            text: Encoded string
            charset: Symbol table used for encoding
            pad_symbols: Symbols that are skipped silently
            integrity: Raise on symbols outside charset and pad_symbols
            little_endian: Undo little-endian encoding (strips leading zero
                bytes of the big-endian result, then reverses it)

        Returns:
            Decoded bytes

        Raises:
            DecodingError: If integrity is on and a symbol is unknown, or a
                block value is too large for ``bs_enc`` bytes
        """
        if not text:
            return b""

        lookup = {symbol: i for i, symbol in enumerate(charset[: self.radix])}
        indices = []
        for char in text:
            idx = lookup.get(char)
            if idx is not None:
                indices.append(idx)
            elif integrity and char not in pad_symbols:
                raise DecodingError(char)

        if not indices:
            return b""

        bs = self.bs_dec
        fill = 0
        if bs:
            fill = zero_padding(len(indices), bs)
            if little_endian:
                indices[:0] = [self.dec_pad_val] * fill
            else:
                indices.extend([self.dec_pad_val] * fill)
        else:
            bs = len(indices)

        limit = 256**self.bs_enc if self.bs_enc else 0
        output = bytearray()
        for start in range(0, len(indices), bs):
            n = from_digits(indices[start : start + bs], self.radix)
            if limit and n >= limit:
                raise DecodingError(
                    "",
                    f"Block {start // bs} does not fit into {self.bs_enc} bytes",
                )
            output.extend(to_digits(n, 256, self.bs_enc))

        if little_endian:
            if len(output) > 1:
                stripped = output.lstrip(b"\x00") or bytearray(1)
                output = stripped[::-1]
        elif self.bs_dec:
            removal = pad_chars(fill, self.bs_enc, self.bs_dec)
            del output[len(output) - removal :]

        return bytes(output)

    def __repr__(self) -> str:
        return f"RadixConverter(radix={self.radix}, blocks=({self.bs_enc}, {self.bs_dec}))"
