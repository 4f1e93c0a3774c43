"""Locale-aware parsing of human-entered numbers into ``BigDecimalValue``."""
from __future__ import annotations

from typing import NamedTuple

from ..errors import (
    InvalidFractionalDigits,
    InvalidIntegerDigits,
    ParseError,
    TooManyDecimalSeparators,
)
from ..models.locale import LocaleConvention
from ..models.value import BigDecimalValue, Sign
from ..utils.logging import get_logger
from .conventions import default_convention

logger = get_logger(__name__)

DIGITS = frozenset("0123456789")
SIGNS = {"+": Sign.POSITIVE, "-": Sign.NEGATIVE}


class Segments(NamedTuple):
    """Validated pieces of a raw number: digit-only texts plus the sign."""

    integer_text: str
    fractional_text: str
    sign: Sign


def split_segments(raw: str, convention: LocaleConvention) -> Segments:
    """Trim, drop grouping markers, split on the decimal marker and take the sign.

    Raises a ``ParseError`` subclass when the text is not a plain signed
    decimal under *convention*. Group positions are not checked, so
    ``"12,3,456"`` is accepted.
    """
    text = raw.strip()
    text = text.replace(convention.group_separator, "")

    parts = text.split(convention.decimal_separator)
    if len(parts) > 2:
        raise TooManyDecimalSeparators(raw)

    integer_text = parts[0]
    fractional_text = parts[1] if len(parts) == 2 else ""

    sign = Sign.POSITIVE
    if integer_text[:1] in SIGNS:
        sign = SIGNS[integer_text[0]]
        integer_text = integer_text[1:]

    if not set(integer_text) <= DIGITS:
        raise InvalidIntegerDigits(raw)
    if not set(fractional_text) <= DIGITS:
        raise InvalidFractionalDigits(raw)
    # "", "+", "-" and a lone decimal marker carry no digit at all
    if not integer_text and not fractional_text:
        raise InvalidIntegerDigits(raw)

    return Segments(integer_text, fractional_text, sign)


def remove_leading_zeros(integer_text: str) -> str:
    """Strip leading zeros; an all-zero or empty run becomes ``"0"``."""
    return integer_text.lstrip("0") or "0"


def parse(raw: str, convention: LocaleConvention | None = None) -> BigDecimalValue:
    """Parse a locale-formatted number string.

    Handles:
    - Grouping markers anywhere: "1,234,567" → 1234567
    - Explicit sign: "+5", "-5"
    - Leading zeros: "0042" → 42, "000" → 0
    - Missing integer digits: ".5" → 0.5
    - Trailing decimal marker: "12." → 12

    Values are never converted to a numeric type, so any digit count is kept.
    """
    if convention is None:
        convention = default_convention()

    try:
        segments = split_segments(raw, convention)
    except ParseError as e:
        logger.debug(
            "big_decimal_parse_failed",
            error=type(e).__name__,
            part=e.part,
            raw_value=raw,
            locale=convention.locale_code,
        )
        raise

    integer_text = remove_leading_zeros(segments.integer_text)
    return BigDecimalValue(
        integer_digits=tuple(int(c) for c in integer_text),
        fractional_digits=tuple(int(c) for c in segments.fractional_text),
        sign=segments.sign,
    )


def try_parse(
    raw: str, convention: LocaleConvention | None = None
) -> tuple[BigDecimalValue | None, ParseError | None]:
    """Parse without raising.

    Returns ``(value, None)`` on success and ``(None, error)`` on failure.
    """
    try:
        return parse(raw, convention), None
    except ParseError as e:
        return None, e
