#!/usr/bin/env python3
"""Quickstart example using the high-level encode/decode API.

This example demonstrates the simplest way to use the package:
- Encode a message (or random bytes) with one or more converters
- Decode it back and verify the round trip
- Compare the output length of each encoding
"""

from __future__ import annotations

import argparse

import numpy as np

from baseex import available_converters, decode, encode


def _expansion(encoded: str | bytes, size: int) -> float:
    if not size:
        return 0.0
    return len(encoded) / size


def main() -> None:
    parser = argparse.ArgumentParser(description="Quickstart API example")
    parser.add_argument(
        "--message",
        default=None,
        help="Text to encode (random bytes if omitted)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=32,
        help="Number of random bytes if no message is given",
    )
    parser.add_argument(
        "--converter",
        action="append",
        default=None,
        help="Converter name, may be repeated (default: all byte converters)",
    )
    parser.add_argument("--config", default=None, help="Path to baseex.toml")
    args = parser.parse_args()

    if args.message is not None:
        data = args.message.encode("utf-8")
    else:
        data = np.random.randint(0, 256, args.size, dtype=np.uint8).tobytes()

    names = args.converter or [
        name for name in available_converters() if not name.startswith(("base1", "basephi", "leb128"))
    ]

    print(f"Input: {len(data)} bytes")
    print(f"{'converter':<18} {'chars':>6} {'ratio':>6}  output")
    for name in names:
        encoded = encode(data, name, config_path=args.config)
        decoded = decode(encoded, name, config_path=args.config)
        if decoded != data:
            raise RuntimeError(f"Round trip failed for {name}")

        shown = encoded.replace("\n", " ") if isinstance(encoded, str) else encoded.hex()
        preview = shown if len(shown) <= 40 else shown[:37] + "..."
        print(f"{name:<18} {len(encoded):>6} {_expansion(encoded, len(data)):>6.2f}  {preview}")


if __name__ == "__main__":
    main()
