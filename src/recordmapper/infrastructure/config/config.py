"""Record mapper configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MapperSettings(BaseSettings):
    """Record mapper settings, read from ``RECORDMAPPER_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECORDMAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment (development, staging, production)"
    )

    # Mapping
    copy_values: bool = Field(
        default=True,
        description="Copy records and sequences of identical type instead of sharing them",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level for recordmapper loggers"
    )
    log_json: bool = Field(default=False, description="Render log events as JSON")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache()
def get_settings() -> MapperSettings:
    """Get cached settings instance."""
    return MapperSettings()
