"""Application settings loaded from the environment and a .env file."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings for spelling-variants.

    Values are read from ``SPELLING_VARIANTS_*`` environment variables, falling
    back to a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPELLING_VARIANTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    match_case: bool = True
    locale: str | None = None
    pairs_file: str | None = None
    log_level: str = "WARNING"
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @field_validator("locale", "pairs_file", "log_file")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
