"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for chart checking runs.

    Values are read from ``AFFCHECK_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="AFFCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Refuse charts whose timing groups nest deeper than this
    max_group_depth: int = 20

    # Treat warning-level diagnostics as a failed check
    fail_on_warning: bool = False


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper())
