"""
Tokensword Configuration Module.

Nested settings: each sub-module is an independent concern with its own
environment variable prefix.

Multi-Environment Support:
    Set `TS_ENV` to one of: development, testing, staging, production
    .env files are loaded in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from tokensword.config import settings

    settings.signer.timestamp
    settings.logging.level
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings
from .logging import LoggingSettings
from .signer import SignerSettings


def _get_env_files() -> tuple[str, ...]:
    """Determine which .env files to load based on TS_ENV."""
    env = os.getenv("TS_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """Composite settings aggregating all configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings(_env_file=self.model_config["env_file"])

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=self.environment.env_files)

    @cached_property
    def signer(self) -> SignerSettings:
        return SignerSettings(_env_file=self.environment.env_files)


# Singleton instance
settings = Settings()

__all__ = [
    "EnvironmentSettings",
    "LoggingSettings",
    "Settings",
    "SignerSettings",
    "settings",
]
