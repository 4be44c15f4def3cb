"""Library-wide settings for funcspec.

Defaults for wrapped functions (strict mode, coercion policy) and for
logging are read from the environment so an application can tighten
behaviour without touching call sites.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked when first loaded
    - **Environment-driven:** Reads ``FUNCSPEC_*`` env vars and ``.env`` files
    - **Wrap-time only:** settings are consulted when a function is wrapped,
      never on each call

Examples:
    >>> from funcspec.core.settings import get_settings
    >>> get_settings().strict
    False

Tags:
    settings, configuration, pydantic, environment, funcspec

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from funcspec.core.coercion import CoercionPolicy
from funcspec.core.errors import ConfigError


class FuncSpecSettings(BaseSettings):
    """Settings shared by every wrapped function.

    Fields
    ──────
    strict      : Raise ``InvalidArgumentError`` instead of substituting defaults
    coercion    : Policy applied on type mismatch (``replace`` or ``convert``)
    log_level   : Structlog log level
    log_format  : ``console`` or ``json``
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCSPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = False
    coercion: CoercionPolicy = Field(
        default=CoercionPolicy.REPLACE,
        description="Policy applied when an argument's type does not match its spec",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"


@lru_cache(maxsize=1)
def get_settings() -> FuncSpecSettings:
    """Return the process-wide settings, loading them on first use."""
    try:
        return FuncSpecSettings()
    except ValidationError as exc:
        first = exc.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise ConfigError(key, first.get("input"), message=str(exc)) from exc


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["FuncSpecSettings", "get_settings", "reset_settings"]
