"""Shared integer helpers for block based conversion."""

from __future__ import annotations

import math


def symbols_per_block(radix: int, bs_enc: int) -> int:
    """Number of radix-R digits needed to hold ``bs_enc`` bytes.

    Equal to ceil(bs_enc * 8 * ln 2 / ln radix), computed with integers
    so exact powers (radix 16, radix 256, ...) never round up.
    """
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")
    if bs_enc <= 0:
        return 0
    limit = 256**bs_enc
    digits = max(1, math.floor(bs_enc * 8 * math.log(2) / math.log(radix)) - 1)
    while radix**digits < limit:
        digits += 1
    while digits > 1 and radix ** (digits - 1) >= limit:
        digits -= 1
    return digits


def guess_block_sizes(radix: int) -> tuple[int, int]:
    """Derive a (bs_enc, bs_dec) pair for a radix.

    Small radices group by the radix itself, larger ones by ceil(256 / R)
    reduced by factors of 8. The byte count is the smallest one whose
    digit width reaches that target.

    Args:
        radix: Target radix (>= 2)

    Returns:
        Tuple of (bytes per block, symbols per block)

    Example:
        >>> guess_block_sizes(64)
        (3, 4)
    """
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")

    target = radix if radix < 8 else math.ceil(256 / radix)
    while target > 8 and target % 8 == 0:
        target //= 8

    bs_enc = 0
    # bs_enc * 8 * ln2 / lnR < target  <=>  256**bs_enc < R**target
    while 256**bs_enc < radix**target:
        bs_enc += 1

    return bs_enc, symbols_per_block(radix, bs_enc)


def zero_padding(length: int, block_size: int) -> int:
    """Bytes needed to complete the last block (0 for the whole-buffer sentinel)."""
    if not block_size:
        return 0
    return (block_size - length % block_size) % block_size


def pad_bytes(char_count: int, bs_enc: int, bs_dec: int) -> int:
    """Output symbols that correspond to ``char_count`` padded input bytes."""
    return math.floor(char_count * bs_dec / bs_enc)


def pad_chars(byte_count: int, bs_enc: int, bs_dec: int) -> int:
    """Output bytes that correspond to ``byte_count`` padded input symbols."""
    return math.ceil(byte_count * bs_enc / bs_dec)


def to_digits(n: int, base: int, width: int = 0) -> list[int]:
    """Split a non-negative integer into digits of ``base``, most significant first.

    Args:
        n: Value to split
        base: Digit base (>= 2)
        width: Minimum number of digits (left padded with zeros)

    Returns:
        List of digits
    """
    digits: list[int] = []
    while n >= base:
        n, r = divmod(n, base)
        digits.append(r)
    digits.append(n)
    digits.reverse()
    if len(digits) < width:
        digits[:0] = [0] * (width - len(digits))
    return digits


def from_digits(digits: list[int], base: int) -> int:
    """Big-endian positional value of a digit list."""
    n = 0
    for d in digits:
        n = n * base + d
    return n
