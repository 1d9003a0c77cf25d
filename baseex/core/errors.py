"""Exceptions and warnings raised by baseex codecs and converters.

Every error raised by the package derives from BaseExError, and each one
also derives from the closest built-in exception so that callers catching
ValueError, TypeError or OverflowError keep working.
"""

from __future__ import annotations


class BaseExError(Exception):
    """Root of all baseex exceptions."""


class DecodingError(BaseExError, ValueError):
    """An input symbol is unknown or violates the structure of the encoding.

    Attributes:
        char: The offending symbol (may be empty for structural errors)
    """

    def __init__(self, char: str = "", msg: str | None = None) -> None:
        self.char = char
        if msg is None:
            msg = f"Character '{char}' is not part of the charset."
        super().__init__(msg)


class RangeError(BaseExError, OverflowError):
    """A requested representation is too large to materialize."""


class SignError(BaseExError, TypeError):
    """A negative value was given to a converter that is not set to signed."""

    def __init__(self, msg: str | None = None) -> None:
        if msg is None:
            msg = (
                "The input is signed but the converter is not set to treat "
                "input as signed. Pass signed=True to the encode/decode call "
                "to allow negative values."
            )
        super().__init__(msg)


class CharsetError(BaseExError, ValueError):
    """A charset definition is invalid for the converter it is attached to."""


class PhiApproximationWarning(UserWarning):
    """The golden ratio decomposition stopped before reaching zero."""
