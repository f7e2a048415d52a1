"""Library settings loaded from the environment"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """oaspec settings, read from ``OASPEC_*`` environment variables or ``.env``"""

    model_config = SettingsConfigDict(
        env_prefix="OASPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Version assumed for documents that declare none
    default_version: Literal["2.0", "3.0", "3.1", "3.2"] = "3.1"

    # Target directory of write_schemas() when none is given
    schema_output_dir: str = "./schemas"

    # Application Configuration
    environment: Literal["development", "staging", "production", "test"] = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """
    Apply the configured log level to the ``oaspec`` logger hierarchy.

    Args:
        settings: Settings to apply; the cached settings by default
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{settings.log_level}', falling back to INFO")
        level = logging.INFO
    logging.getLogger("oaspec").setLevel(level)
