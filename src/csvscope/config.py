"""Configuration management.

Uses pydantic-settings so every default can be overridden from the
environment (prefix ``CSVSCOPE_``) or a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CSVSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sample_rows: int = Field(
        default=10, ge=1, description="Data rows read by the type sampler"
    )
    max_sample_values: int = Field(
        default=5, ge=0, description="Representative values kept per column"
    )
    top_values: int = Field(
        default=5, ge=1, description="Frequency rows shown per categorical column"
    )
    log_level: str = Field(default="WARNING", description="Loguru level used by the CLI")


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
