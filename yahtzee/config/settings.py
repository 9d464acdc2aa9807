"""
Yahtzee - Application Settings

Loads configuration from environment variables using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Gameplay
    think_time_ms: int = Field(default=500, ge=0, le=1000)
    min_players: int = Field(default=2, ge=1)
    random_seed: int | None = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured log level."""
    settings = get_settings()
    name = (level or ("DEBUG" if settings.debug else settings.log_level)).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
