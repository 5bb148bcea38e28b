"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SRTSUB_``-prefixed environment variables.

    Attributes:
        strict_time_ranges: Reject minutes/seconds above 59 when parsing
        interchange_indent: Indent width for serialized interchange JSON
        log_level: Minimum level used by ``setup_logging``
    """

    strict_time_ranges: bool = False
    interchange_indent: int = Field(default=2, ge=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SRTSUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Note:
        Settings are cached. Use get_settings.cache_clear() to reload
        settings in tests.
    """
    return Settings()
