"""
Configuration settings for FunQuizz.

Uses Pydantic Settings for environment variable management with .env file support.
Every setting can be overridden with a FUNQUIZZ_-prefixed environment variable,
e.g. FUNQUIZZ_LOG_LEVEL=DEBUG.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUNQUIZZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Repositories
    # ========================================
    repository_path: Path | None = Field(
        default=None,
        description="Repository file used when a command is given no path",
    )
    default_repository_type: Literal["random", "random_non_repeating", "intelligent"] = Field(
        default="intelligent",
        description="Selection strategy for newly created repositories",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation of saved repository documents",
    )

    # ========================================
    # Randomness
    # ========================================
    rng_seed: int | None = Field(
        default=None,
        description="Seed for answer shuffles and question draws (None = OS entropy)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum loguru level written to stderr",
    )
    log_format: str = Field(
        default="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
        description="Loguru format string for stderr output",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
