"""The canonical big-decimal value.

A ``BigDecimalValue`` is a sign plus two runs of decimal digits. It does no
arithmetic; it only remembers what was typed, in a locale-independent form,
so it can be rendered again under any convention.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from bignumerics.models.locale import LocaleConvention

Digit = Annotated[int, Field(ge=0, le=9)]


class Sign(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class BigDecimalValue(BaseModel):
    """An immutable decimal number of unbounded digit count.

    ``integer_digits`` and ``fractional_digits`` are stored most-significant
    first. The integer run is never empty and carries no leading zero unless
    it is exactly ``(0,)``. Negative zero is kept as parsed.
    """

    model_config = ConfigDict(frozen=True)

    integer_digits: tuple[Digit, ...] = (0,)
    fractional_digits: tuple[Digit, ...] = ()
    sign: Sign = Sign.POSITIVE

    @model_validator(mode="after")
    def _check_canonical(self) -> BigDecimalValue:
        if not self.integer_digits:
            raise ValueError("integer_digits must contain at least one digit")
        if len(self.integer_digits) > 1 and self.integer_digits[0] == 0:
            raise ValueError("integer_digits must not carry leading zeros")
        return self

    @classmethod
    def parse(cls, raw: str, convention: LocaleConvention | None = None) -> BigDecimalValue:
        """Parse *raw* under *convention* (the default convention if omitted)."""
        from bignumerics.international.number_parsing import parse

        return parse(raw, convention)

    def format(self, convention: LocaleConvention | None = None) -> str:
        """Render under *convention* (the default convention if omitted)."""
        from bignumerics.international.number_formatting import format_value

        return format_value(self, convention)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return not any(self.integer_digits) and not any(self.fractional_digits)

    def __str__(self) -> str:
        from bignumerics.international.number_formatting import format_value
        from bignumerics.models.locale import INVARIANT

        return format_value(self, INVARIANT)
