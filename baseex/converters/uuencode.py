"""UUencode converter (uuencode, historical and xxencode alphabets)."""

from __future__ import annotations

import re
from typing import Any

from baseex.components.charset import Charset, CharsetTable
from baseex.components.settings import ConverterSettings
from baseex.converters.template import Converter
from baseex.core.errors import DecodingError
from baseex.core.radix import RadixConverter

_UU_TAIL = "".join(chr(c) for c in range(0x21, 0x60))

CHARSETS = {
    "default": "`" + _UU_TAIL,
    "original": " " + _UU_TAIL,
    "xx": "+-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
}

# A full line carries 45 bytes in 60 symbols
LINE_BYTES = 45
LINE_SYMBOLS = 60

_PERMISSIONS = re.compile(r"[0-7]{3,4}")


def _symbols_for(byte_count: int) -> int:
    return -(-byte_count // 3) * 4


class UUencode(Converter):
    """UUencode converter.

    Every line starts with a length symbol for the number of bytes it
    holds, followed by up to 60 data symbols. A line with the length
    symbol for zero ends the data. With ``header`` the data is framed by
    "begin <mode> <file>" and "end" lines.

    Example:
        >>> UUencode().encode("Cat")
        '#0V%T\\n`'
        >>> UUencode(header=True, file_name="cat.txt").encode("Cat")
        'begin 644 cat.txt\\n#0V%T\\n`\\nend'
    """

    name = "uuencode"
    charset_length = 64
    mutable = frozenset({"header"})

    def __init__(
        self,
        version: str | None = None,
        *,
        charsets: Any = None,
        config_path: str | None = None,
        file_name: str = "untitled.bin",
        permissions: str = "644",
        **options: Any,
    ) -> None:
        """Initialize converter.

        Args:
            version: Charset version ('default', 'original' or 'xx')
            charsets: Additional charsets
            config_path: Configuration file with per-converter defaults
            file_name: File name written to the header line
            permissions: Octal file mode written to the header line
            **options: Default option overrides

        Raises:
            ValueError: If permissions is not an octal mode or file_name
                is empty or spans lines
        """
        if not _PERMISSIONS.fullmatch(permissions):
            raise ValueError(f"permissions must be an octal mode like '644', got {permissions!r}")
        if not file_name or "\n" in file_name:
            raise ValueError(f"Invalid file name {file_name!r}")
        self.file_name = file_name
        self.permissions = permissions

        table = CharsetTable.from_mapping("default", CHARSETS)
        if version is not None:
            options["version"] = version
        super().__init__(
            RadixConverter(64, 3, 4),
            table,
            ConverterSettings(),
            extra_charsets=charsets,
            config_path=config_path,
            **options,
        )

    def _post_encode(self, output: str, **context: Any) -> str:
        charset = context["charset"]
        total = len(context["payload"])

        lines = []
        if context["settings"].header:
            lines.append(f"begin {self.permissions} {self.file_name}")
        for i, start in enumerate(range(0, len(output), LINE_SYMBOLS)):
            count = min(LINE_BYTES, total - i * LINE_BYTES)
            lines.append(charset[count] + output[start : start + LINE_SYMBOLS])
        lines.append(charset[0])
        if context["settings"].header:
            lines.append("end")
        return "\n".join(lines)

    def _wrap(self, output: str, settings: ConverterSettings) -> str:
        # Lines are fixed by the format
        return output

    def decode(self, text: str, **options: Any) -> Any:
        """Decode uuencoded lines.

        A leading "begin" line and everything after the terminating line
        are ignored.

        Args:
            text: Encoded lines
            **options: Per-call option overrides

        Returns:
            Decoded value

        Raises:
            DecodingError: If a symbol is unknown or a line is shorter than
                its length symbol announces
        """
        settings = self.settings(**options)
        charset = self.charsets[settings.version]

        body, cut = self._unframe(str(text), charset, settings.integrity)
        output = self.codec.decode(body, charset.symbols, (), settings.integrity)
        if cut:
            output = output[:-cut]
        return self._compile(output, settings, False)

    @staticmethod
    def _unframe(text: str, charset: Charset, integrity: bool) -> tuple[str, int]:
        lookup = {symbol: i for i, symbol in enumerate(charset.symbols)}
        lines = text.replace("\r", "").strip("\n").split("\n")
        if lines and lines[0].lower().startswith("begin"):
            lines = lines[1:]

        body = []
        cut = 0
        for line in lines:
            count = lookup.get(line[:1], -1)
            if count <= 0:
                break

            expected = _symbols_for(count)
            data = line[1:]
            if len(data) < expected:
                if integrity:
                    raise DecodingError(
                        "", f"Line announces {count} bytes but holds {len(data)} symbols"
                    )
                data = data.ljust(expected, charset[0])
            body.append(data[:expected])

            if count != LINE_BYTES:
                cut = expected // 4 * 3 - count
                break

        return "".join(body), cut
