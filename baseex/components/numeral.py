"""Result components of numeral decompositions."""

from pydantic import BaseModel, Field, model_validator


class PhiExponentSet(BaseModel):
    """Powers of the golden ratio that sum up to an encoded value.

    Attributes:
        integer_exponents: Non-negative exponents, most significant first
        fraction_exponents: Negative exponents, starting closest to -1
        approximated: True if the decomposition stopped before the
            remainder reached zero
    """

    model_config = {"frozen": True}

    integer_exponents: list[int] = Field(default_factory=list)
    fraction_exponents: list[int] = Field(default_factory=list)
    approximated: bool = False

    @model_validator(mode="after")
    def _check_order(self) -> "PhiExponentSet":
        if any(e < 0 for e in self.integer_exponents):
            raise ValueError("integer_exponents must be non-negative")
        if any(e >= 0 for e in self.fraction_exponents):
            raise ValueError("fraction_exponents must be negative")
        for name in ("integer_exponents", "fraction_exponents"):
            values = getattr(self, name)
            if any(a <= b for a, b in zip(values, values[1:])):
                raise ValueError(f"{name} must be strictly decreasing")
        return self

    @property
    def exponents(self) -> list[int]:
        """All exponents in decreasing order."""
        return self.integer_exponents + self.fraction_exponents
