"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORLDREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database holding the world_objects table (read-only access)
    database_url: str = "sqlite:///worldref.db"

    # Default JSON world description for the CLI when --world is not given
    world_file: str | None = None

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG when debug mode is on."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
