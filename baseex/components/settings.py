"""Converter settings component."""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, Field

OutputType = Literal[
    "bytes",
    "bytearray",
    "str",
    "int",
    "float",
    "decimal",
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
    "float32",
    "float64",
]

OUTPUT_TYPES: tuple[str, ...] = get_args(OutputType)


class ConverterSettings(BaseModel):
    """Policy flags for a single encode or decode call.

    Attributes:
        version: Name of the charset to use
        signed: Accept negative integers (encoded with a leading "-")
        little_endian: Process bytes least significant first
        padding: Emit (and expect) padding symbols
        integrity: Reject unknown symbols instead of skipping them
        upper: Upper case output of case insensitive converters
        decimal_mode: Encode real numbers (base phi only)
        number_mode: Pack integers as float64 and decode to float
        header: Frame uuencoded output with begin/end lines
        trim: Write a single fill symbol for a short final Ecoji group
        output_type: Native type produced by decode
        line_wrap: Insert a newline every N output characters (0 = off)
    """

    model_config = {"frozen": True, "extra": "forbid"}

    version: str = "default"
    signed: bool = False
    little_endian: bool = False
    padding: bool = False
    integrity: bool = True
    upper: bool = False
    decimal_mode: bool = False
    number_mode: bool = False
    header: bool = False
    trim: bool = False
    output_type: OutputType = "bytes"
    line_wrap: int = Field(default=0, ge=0)

    def merged(self, **changes: Any) -> ConverterSettings:
        """Return validated settings with ``changes`` applied."""
        if not changes:
            return self
        return ConverterSettings.model_validate({**self.model_dump(), **changes})

    @classmethod
    def option_names(cls) -> frozenset[str]:
        """Names accepted as options."""
        return frozenset(cls.model_fields)
