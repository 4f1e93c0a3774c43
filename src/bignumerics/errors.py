"""bignumerics exception hierarchy."""

from __future__ import annotations


class BigNumericsError(Exception):
    """Base exception for all bignumerics errors."""


class UnknownLocaleError(BigNumericsError, LookupError):
    """No number convention could be resolved for a locale identifier."""

    def __init__(self, locale_code: str) -> None:
        self.locale_code = locale_code
        super().__init__(f"Unknown locale: {locale_code!r}")


class ParseError(BigNumericsError, ValueError):
    """Raw text could not be parsed into a ``BigDecimalValue``.

    ``part`` names the segment that failed (``"value"``, ``"integer"`` or
    ``"fractional"``) and ``raw_value`` is the untouched input.
    """

    reason = "Unable to parse value."
    part = "value"

    def __init__(self, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(f"{self.reason} (value: {raw_value!r})")


class TooManyDecimalSeparators(ParseError):
    reason = "Too many decimal separators."


class InvalidIntegerDigits(ParseError):
    reason = "Unable to parse value. Unexpected digit(s) in integer part."
    part = "integer"


class InvalidFractionalDigits(ParseError):
    reason = "Unable to parse value. Unexpected digit(s) in decimal part."
    part = "fractional"
