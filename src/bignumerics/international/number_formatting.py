"""Locale-aware rendering of ``BigDecimalValue``."""
from __future__ import annotations

from ..models.locale import LocaleConvention
from ..models.value import BigDecimalValue
from .conventions import default_convention


def group_integer_digits(digits: tuple[int, ...], convention: LocaleConvention) -> str:
    """Render integer digits with group separators between groups.

    Groups are built right to left: the first group holds ``group_size``
    digits, every further one ``effective_secondary_group_size``. No separator
    is emitted before the most-significant group.
    """
    groups: list[str] = []
    end = len(digits)
    size = convention.group_size
    while end > 0:
        start = max(end - size, 0)
        groups.append("".join(str(d) for d in digits[start:end]))
        end = start
        size = convention.effective_secondary_group_size
    return convention.group_separator.join(reversed(groups))


def format_value(value: BigDecimalValue, convention: LocaleConvention | None = None) -> str:
    """Format a value for display.

    - Integer part grouped: (1, 2, 3, 4) → "1,234"
    - Fractional part appended after the decimal marker, never grouped
    - Negative values (negative zero included) get a leading "-"; positive
      values never get "+"
    """
    if convention is None:
        convention = default_convention()

    result = group_integer_digits(value.integer_digits, convention)
    if value.fractional_digits:
        result += convention.decimal_separator + "".join(str(d) for d in value.fractional_digits)
    if value.is_negative:
        result = "-" + result
    return result
