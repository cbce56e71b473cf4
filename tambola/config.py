"""Environment-based configuration.

Values are read when ``get_config()`` builds the config, so a ``.env`` file
loaded just before that call takes effect.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def env_int(name: str, default: int) -> int:
    """Read an integer env var, falling back to ``default`` when unset or invalid."""

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_optional_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))

    # Ticket assembly gives up (InternalInvariantViolation) after this many attempts.
    TICKET_MAX_RETRIES: int = field(default_factory=lambda: env_int("TAMBOLA_TICKET_MAX_RETRIES", 10_000))

    # Default seed for CLI runs; None means a fresh random source per call.
    RANDOM_SEED: int | None = field(default_factory=lambda: env_optional_int("TAMBOLA_SEED"))


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> BaseConfig:
    """Build the configuration for APP_ENV from the current environment."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig()
    return DevelopmentConfig()
