"""
Configuration for the arithmetic calculator.

Values come from environment variables prefixed with ``ARITHMETIC_`` or from
a local ``.env`` file, falling back to the defaults below.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARITHMETIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level of emitted log records")
    log_json: bool = Field(default=False, description="Render log records as JSON lines")
    result_precision: Optional[int] = Field(
        default=None, ge=0, description="Decimal places used when rendering results"
    )

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
