"""Golden ratio base converter."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.phi import PHI_SYMBOLS, PhiNumeralCodec
from baseex.core.smart_io import compile_output, to_bytes


class BasePhi(Converter):
    """Base phi converter.

    Integers (and bytes, read as one unsigned integer) are written as sums
    of distinct powers of the golden ratio. In decimal mode real numbers
    are accepted and decode returns a float (or a Decimal with
    ``output_type="decimal"``).

    Example:
        >>> BasePhi().encode(2)
        '10.01'
        >>> BasePhi().decode("-10.01", output_type="int")
        -2
    """

    name = "basephi"
    charset_length = 2
    mutable = frozenset({"decimal_mode", "little_endian"})
    has_signed_mode = True

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        codec: PhiNumeralCodec | None = None,
        **options: Any,
    ) -> None:
        table = CharsetTable.from_mapping("default", {"default": PHI_SYMBOLS})
        if version is not None:
            options["version"] = version
        super().__init__(
            codec or PhiNumeralCodec(),
            table,
            ConverterSettings(signed=True),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _to_bytes(self, data: Any, settings: ConverterSettings) -> tuple[Any, bool, str]:
        if not settings.decimal_mode:
            return to_bytes(data, settings.signed, settings.little_endian, settings.number_mode)

        if isinstance(data, bool) or not isinstance(data, (int, float, Decimal, str)):
            raise TypeError(
                f"Decimal mode needs a number, got {type(data).__name__}"
            )
        try:
            value = Decimal(repr(data) if isinstance(data, float) else data)
        except InvalidOperation as e:
            raise ValueError(f"Not a decimal number: {data!r}") from e
        return abs(value), value < 0, "float"

    def _encode_bytes(
        self, payload: Any, charset: Charset, settings: ConverterSettings
    ) -> tuple[str, Any]:
        return self.codec.encode(
            payload, charset.symbols, settings.little_endian, settings.decimal_mode
        )

    def _apply_sign(self, output: str, negative: bool) -> str:
        return f"-{output}" if negative else output

    def _decode_text(self, text: str, charset: Charset, settings: ConverterSettings) -> Any:
        return self.codec.decode(
            text,
            charset.symbols,
            integrity=settings.integrity,
            little_endian=settings.little_endian,
            decimal_mode=settings.decimal_mode,
        )

    def _compile(self, output: Any, settings: ConverterSettings, negative: bool) -> Any:
        if not settings.decimal_mode:
            return compile_output(output, settings.output_type, settings.little_endian, negative)
        value = -output if negative else output
        if settings.output_type == "decimal":
            return value
        return float(value)
