"""Library configuration via environment variables with BIGNUMERICS_ prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """bignumerics configuration.

    All settings are read from environment variables prefixed with
    ``BIGNUMERICS_``. Nothing here is cached; callers that resolve a default
    convention construct ``Settings()`` each time so environment changes are
    picked up.
    """

    model_config = SettingsConfigDict(env_prefix="BIGNUMERICS_")

    # ── Locale ───────────────────────────────────────────────────────────
    # Locale identifier ("en_US", "de-DE") used when parse/format get no
    # explicit convention. Empty falls back to the process environment.
    locale: str | None = None

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "WARNING"
