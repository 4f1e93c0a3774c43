"""Shared test fixtures."""
import pytest
from bignumerics.models.locale import LocaleConvention, EN_US


LOCALE_ENV_VARS = ("BIGNUMERICS_LOCALE", "LANGUAGE", "LC_ALL", "LC_NUMERIC", "LANG")


@pytest.fixture(autouse=True)
def en_us_default(monkeypatch):
    """Pin the default convention to en_US for every test."""
    for name in LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BIGNUMERICS_LOCALE", "en_US")


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove every variable the default convention is resolved from."""
    for name in LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def en_us():
    return EN_US


@pytest.fixture
def de_de():
    return LocaleConvention(group_separator=".", decimal_separator=",", locale_code="de_DE")


@pytest.fixture
def hi_in():
    return LocaleConvention(
        group_separator=",", decimal_separator=".",
        group_size=3, secondary_group_size=2, locale_code="hi_IN",
    )
