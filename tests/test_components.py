"""Tests for component types."""

import pytest

from baseex.components.charset import Charset, CharsetTable
from baseex.components.numeral import PhiExponentSet
from baseex.components.settings import OUTPUT_TYPES, ConverterSettings


class TestCharset:
    """Tests for charsets."""

    def test_charset_creation(self) -> None:
        """Test a string is split into symbols."""
        charset = Charset(name="hex", symbols="0123456789abcdef")
        assert len(charset) == 16
        assert charset[10] == "a"
        assert "f" in charset
        assert "g" not in charset
        assert charset.text == "0123456789abcdef"
        assert charset.pad_symbols == ()

    def test_pad_symbols(self) -> None:
        """Test pad symbols are kept apart from data symbols."""
        charset = Charset(name="b64", symbols="AB", pad_symbols="=")
        assert charset.pad_symbols == ("=",)
        assert "=" not in charset

    def test_duplicate_symbols(self) -> None:
        """Test duplicate symbols are rejected."""
        with pytest.raises(ValueError, match="duplicate symbols"):
            Charset(name="bad", symbols="0120")

    def test_pad_overlap(self) -> None:
        """Test pad symbols must not be data symbols."""
        with pytest.raises(ValueError, match="overlap"):
            Charset(name="bad", symbols="01", pad_symbols="1")

    def test_multi_character_symbol(self) -> None:
        """Test symbols must be single characters."""
        with pytest.raises(ValueError, match="single characters"):
            Charset(name="bad", symbols=("0", "10"))

    def test_empty_symbols(self) -> None:
        """Test at least one symbol is required."""
        with pytest.raises(ValueError):
            Charset(name="empty", symbols="")

    def test_frozen(self) -> None:
        """Test charsets are immutable."""
        charset = Charset(name="hex", symbols="0123456789abcdef")
        with pytest.raises(ValueError):
            charset.name = "other"


class TestCharsetTable:
    """Tests for charset tables."""

    def test_from_mapping(self) -> None:
        """Test building a table from plain mappings."""
        table = CharsetTable.from_mapping(
            "a", {"a": "01", "b": "xy"}, pad_symbols={"b": "="}
        )
        assert table.names == ["a", "b"]
        assert table["b"].pad_symbols == ("=",)
        assert "a" in table
        assert "c" not in table

    def test_missing_charset(self) -> None:
        """Test lookup of an unknown name."""
        table = CharsetTable.from_mapping("a", {"a": "01"})
        with pytest.raises(KeyError):
            table["c"]

    def test_default_must_exist(self) -> None:
        """Test the default name must be registered."""
        with pytest.raises(ValueError, match="not registered"):
            CharsetTable.from_mapping("c", {"a": "01"})

    def test_duplicate_names(self) -> None:
        """Test names must be unique."""
        charset = Charset(name="a", symbols="01")
        with pytest.raises(ValueError, match="Duplicate charset names"):
            CharsetTable(default="a", charsets=(charset, charset))

    def test_with_charset_returns_new_table(self) -> None:
        """Test adding a charset leaves the original table untouched."""
        table = CharsetTable.from_mapping("a", {"a": "01"})
        extended = table.with_charset(Charset(name="b", symbols="xy"))

        assert extended.names == ["a", "b"]
        assert table.names == ["a"]

    def test_with_charset_replaces(self) -> None:
        """Test a charset with an existing name replaces the old one."""
        table = CharsetTable.from_mapping("a", {"a": "01"})
        replaced = table.with_charset(Charset(name="a", symbols="xy"))
        assert replaced["a"].text == "xy"
        assert table["a"].text == "01"


class TestConverterSettings:
    """Tests for converter settings."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = ConverterSettings()
        assert settings.version == "default"
        assert not settings.signed
        assert settings.integrity
        assert settings.output_type == "bytes"
        assert settings.line_wrap == 0

    def test_merged(self) -> None:
        """Test merging returns new validated settings."""
        settings = ConverterSettings()
        merged = settings.merged(signed=True, output_type="int")
        assert merged.signed
        assert merged.output_type == "int"
        assert not settings.signed

    def test_merged_without_changes(self) -> None:
        """Test merging nothing returns the same object."""
        settings = ConverterSettings()
        assert settings.merged() is settings

    def test_invalid_output_type(self) -> None:
        """Test output type validation."""
        with pytest.raises(ValueError):
            ConverterSettings(output_type="complex")

    def test_negative_line_wrap(self) -> None:
        """Test line wrap must not be negative."""
        with pytest.raises(ValueError):
            ConverterSettings(line_wrap=-1)

    def test_unknown_field(self) -> None:
        """Test unknown options are rejected."""
        with pytest.raises(ValueError):
            ConverterSettings(colour=True)

    def test_option_names(self) -> None:
        """Test option names cover every field."""
        names = ConverterSettings.option_names()
        assert {"version", "signed", "output_type", "line_wrap"} <= names

    def test_output_types(self) -> None:
        """Test the output type list."""
        assert "bytes" in OUTPUT_TYPES
        assert "uint16" in OUTPUT_TYPES
        assert len(OUTPUT_TYPES) == 16


class TestPhiExponentSet:
    """Tests for phi exponent sets."""

    def test_exponents(self) -> None:
        """Test exponents are joined in decreasing order."""
        exponents = PhiExponentSet(integer_exponents=[3, 1], fraction_exponents=[-2, -4])
        assert exponents.exponents == [3, 1, -2, -4]
        assert not exponents.approximated

    def test_not_decreasing(self) -> None:
        """Test exponents must be strictly decreasing."""
        with pytest.raises(ValueError, match="strictly decreasing"):
            PhiExponentSet(integer_exponents=[1, 1])

    def test_wrong_sign(self) -> None:
        """Test exponents must sit on the right side of the point."""
        with pytest.raises(ValueError, match="non-negative"):
            PhiExponentSet(integer_exponents=[-1])
        with pytest.raises(ValueError, match="negative"):
            PhiExponentSet(fraction_exponents=[0])
