"""Codec configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Codec settings, read from READMARK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="READMARK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment: selects the log renderer and default level
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Overrides the environment's default log level
    LOG_LEVEL: LogLevel | None = None

    # Require "@context" and "type" on decoded bookmarks (always emitted on encode)
    STRICT_ENVELOPE: bool = False

    # Emit JSON text without insignificant whitespace
    COMPACT_JSON: bool = True

    @property
    def json_separators(self) -> tuple[str, str]:
        """Item and key separators for json.dumps."""
        if self.COMPACT_JSON:
            return (",", ":")
        return (", ", ": ")

    @property
    def log_level(self) -> int:
        """Effective stdlib log level."""
        if self.LOG_LEVEL is not None:
            return logging.getLevelName(self.LOG_LEVEL)
        if self.ENVIRONMENT == "development":
            return logging.DEBUG
        return logging.INFO


def logging_processors(environment: str) -> list[Callable[..., Any]]:
    """structlog processor chain: JSON lines in production, console output otherwise."""
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """
    Route structlog through stdlib logging on stderr.

    stdout is left to command output (see readmark.cli).
    """
    settings = settings or get_settings()

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=settings.log_level)
    logging.getLogger().setLevel(settings.log_level)

    structlog.configure(
        processors=logging_processors(settings.ENVIRONMENT),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
