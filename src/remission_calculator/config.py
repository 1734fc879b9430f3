"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from remission_calculator.core.types import EpdPolicy


class Settings(BaseSettings):
    """Environment-driven settings."""

    model_config = SettingsConfigDict(
        env_prefix="REMISSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    short_sentence_epd_policy: EpdPolicy = "equal_lpd"
    enforce_duration_range: bool = True
    display_date_format: str = "%d/%m/%Y"


@lru_cache
def get_settings() -> Settings:
    return Settings()
