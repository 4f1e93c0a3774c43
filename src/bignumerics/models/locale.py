"""Locale conventions for reading and rendering digit sequences.

A ``LocaleConvention`` is the only locale input the parser and formatter see:
the grouping marker, the decimal marker and the grouping sizes. It is passed
explicitly; :func:`bignumerics.international.conventions.default_convention`
resolves one when the caller does not supply it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Removing a separator must never remove digits or the sign
RESERVED_CHARACTERS = frozenset("0123456789+-")


class LocaleConvention(BaseModel):
    """Describes the number formatting convention of a locale."""

    model_config = ConfigDict(frozen=True)

    group_separator: str = Field(default=",", min_length=1)
    decimal_separator: str = Field(default=".", min_length=1)
    group_size: int = Field(default=3, ge=1)
    # Size of every group after the first, e.g. 2 for "12,34,567".
    secondary_group_size: int | None = Field(default=None, ge=1)
    locale_code: str | None = None

    @model_validator(mode="after")
    def _check_separators(self) -> LocaleConvention:
        group, decimal = self.group_separator, self.decimal_separator
        if group in decimal or decimal in group:
            raise ValueError(
                f"group and decimal separators must not overlap, got {group!r} and {decimal!r}"
            )
        for separator in (group, decimal):
            if set(separator) & RESERVED_CHARACTERS:
                raise ValueError(f"separator {separator!r} must not contain digits or sign characters")
        return self

    @property
    def effective_secondary_group_size(self) -> int:
        return self.secondary_group_size or self.group_size

    @property
    def example(self) -> str:
        """Sample rendering, e.g. ``1,234,567.89``."""
        from bignumerics.international.number_formatting import format_value
        from bignumerics.models.value import BigDecimalValue

        return format_value(
            BigDecimalValue(integer_digits=(1, 2, 3, 4, 5, 6, 7), fractional_digits=(8, 9)),
            self,
        )


EN_US = LocaleConvention(locale_code="en_US")
INVARIANT = LocaleConvention()
