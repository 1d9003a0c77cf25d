"""Charset components (symbol tables)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Charset(BaseModel):
    """Ordered, duplicate free symbol table.

    Attributes:
        name: Version name the charset is registered under
        symbols: Data symbols, the index of a symbol is its digit value
        pad_symbols: Symbols that only carry padding information
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    symbols: tuple[str, ...] = Field(min_length=1)
    pad_symbols: tuple[str, ...] = ()

    @field_validator("symbols", "pad_symbols", mode="before")
    @classmethod
    def _split_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value)
        return value

    @field_validator("symbols", "pad_symbols")
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for symbol in value:
            if len(symbol) != 1:
                raise ValueError(f"Symbols must be single characters, got {symbol!r}")
        return value

    @model_validator(mode="after")
    def _unique(self) -> Charset:
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Charset '{self.name}' contains duplicate symbols")
        if len(set(self.pad_symbols)) != len(self.pad_symbols):
            raise ValueError(f"Charset '{self.name}' contains duplicate pad symbols")
        if set(self.symbols) & set(self.pad_symbols):
            raise ValueError(f"Pad symbols of '{self.name}' overlap with the data symbols")
        return self

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    @property
    def text(self) -> str:
        """Symbols joined into one string."""
        return "".join(self.symbols)


class CharsetTable(BaseModel):
    """Immutable collection of named charsets for one converter.

    Tables are built once when a converter is constructed. Adding a
    charset returns a new table; the original is never modified.

    Attributes:
        default: Name of the charset used when no version is requested
        charsets: Registered charsets in registration order
    """

    model_config = {"frozen": True}

    default: str
    charsets: tuple[Charset, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_names(self) -> CharsetTable:
        names = [c.name for c in self.charsets]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate charset names: {names}")
        if self.default not in names:
            raise ValueError(f"Default charset '{self.default}' is not registered")
        return self

    @classmethod
    def from_mapping(
        cls,
        default: str,
        charsets: Mapping[str, str | tuple[str, ...]],
        pad_symbols: Mapping[str, str | tuple[str, ...]] | None = None,
    ) -> CharsetTable:
        """Build a table from ``{name: symbols}`` and ``{name: pad_symbols}``."""
        pad_symbols = pad_symbols or {}
        return cls(
            default=default,
            charsets=tuple(
                Charset(name=name, symbols=symbols, pad_symbols=pad_symbols.get(name, ()))
                for name, symbols in charsets.items()
            ),
        )

    @property
    def names(self) -> list[str]:
        """Registered charset names."""
        return [c.name for c in self.charsets]

    def __contains__(self, name: object) -> bool:
        return any(c.name == name for c in self.charsets)

    def __getitem__(self, name: str) -> Charset:
        for charset in self.charsets:
            if charset.name == name:
                return charset
        raise KeyError(name)

    def with_charset(self, charset: Charset) -> CharsetTable:
        """Return a new table with ``charset`` added or replaced."""
        kept = tuple(c for c in self.charsets if c.name != charset.name)
        return CharsetTable(default=self.default, charsets=kept + (charset,))
