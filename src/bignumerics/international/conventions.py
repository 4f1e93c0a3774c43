"""Resolve number conventions from locale identifiers using CLDR data."""
from __future__ import annotations

import os
from functools import lru_cache

from babel import Locale, UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import get_decimal_symbol, get_group_symbol

from ..config import Settings
from ..errors import UnknownLocaleError
from ..models.locale import EN_US, LocaleConvention
from ..utils.logging import get_logger

logger = get_logger(__name__)

# CLDR patterns without a grouping marker report this sentinel size
_NO_GROUPING = 1000

# POSIX precedence for the numeric category
LOCALE_ENV_VARS = ("LC_ALL", "LC_NUMERIC", "LANG")
POSIX_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale_code(locale_code: str) -> str:
    """Turn ``"de-DE"`` or ``"de_DE.UTF-8@euro"`` into ``"de_DE"``."""
    code = locale_code.strip()
    code = code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


@lru_cache(maxsize=128)
def convention_for_locale(locale_code: str) -> LocaleConvention:
    """Build the convention CLDR defines for *locale_code*.

    Separators come from the locale's number symbols and group sizes from its
    decimal pattern, so ``hi_IN`` yields a primary size of 3 and a secondary
    size of 2.
    """
    code = normalize_locale_code(locale_code)
    try:
        locale = Locale.parse(code)
    except (BabelUnknownLocaleError, ValueError, TypeError) as e:
        raise UnknownLocaleError(locale_code) from e

    primary, secondary = locale.decimal_formats[None].grouping
    if primary >= _NO_GROUPING:
        logger.info("locale_without_grouping", locale=code)
        primary, secondary = EN_US.group_size, EN_US.group_size

    return LocaleConvention(
        group_separator=get_group_symbol(locale),
        decimal_separator=get_decimal_symbol(locale),
        group_size=primary,
        secondary_group_size=secondary if secondary != primary else None,
        locale_code=str(locale),
    )


def environment_locale() -> str | None:
    """Return the numeric locale named by the process environment.

    The first non-empty of ``LC_ALL``, ``LC_NUMERIC`` and ``LANG`` wins.
    ``C`` and ``POSIX`` (with or without an encoding) count as unset.
    """
    for name in LOCALE_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            if normalize_locale_code(value) in POSIX_LOCALES:
                return None
            return value
    return None


def default_convention() -> LocaleConvention:
    """Return the convention used when a caller passes none.

    Resolution order:
    1. ``BIGNUMERICS_LOCALE`` setting
    2. the process locale (``LC_ALL``, ``LC_NUMERIC``, ``LANG``)
    3. ``EN_US``

    A configured locale that cannot be resolved raises ``UnknownLocaleError``;
    an unusable process locale falls through to ``EN_US``.
    """
    settings = Settings()
    if settings.locale:
        return convention_for_locale(settings.locale)

    env_locale = environment_locale()
    if env_locale:
        try:
            return convention_for_locale(env_locale)
        except UnknownLocaleError:
            logger.warning("environment_locale_unknown", locale=env_locale)
    return EN_US
