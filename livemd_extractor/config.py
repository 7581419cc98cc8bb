"""Configuration management for livemd-extractor."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LANGUAGE

load_dotenv()

logger = logging.getLogger(__name__)


class ExtractionConfig(BaseSettings):
    """Code extraction configuration."""

    model_config = SettingsConfigDict(env_prefix="LIVEMD_", extra="allow")

    language: str = Field(
        default=DEFAULT_LANGUAGE, description="Language tag of executable fences"
    )
    max_document_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        description="Largest document in bytes the CLI will read",
    )
    default_extractor: str = Field(
        default="livebook", description="Extractor used by the CLI views"
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="allow")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    max_size: int = 10485760  # 10MB
    backup_count: int = 5


class Settings(BaseSettings):
    """Main application settings."""

    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings with sub-configurations."""
        super().__init__(**kwargs)

        self.extraction = ExtractionConfig()
        self.logging = LoggingConfig()

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        level_name = "DEBUG" if self.debug else self.logging.level.upper()
        log_level = getattr(logging, level_name, logging.WARNING)

        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if self.logging.file:
            Path(self.logging.file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    self.logging.file,
                    maxBytes=self.logging.max_size,
                    backupCount=self.logging.backup_count,
                )
            )

        logging.basicConfig(level=log_level, format=self.logging.format, handlers=handlers)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.setup_logging()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
