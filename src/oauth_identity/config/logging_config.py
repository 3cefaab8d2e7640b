"""Centralized logging configuration for oauth-identity.

Provides consistent logging with configurable level and format. Library
modules only create module loggers; applications call ``setup_logging``
once at startup.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import OAuthIdentitySettings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
        "multipart",
    ]

    @classmethod
    def build_config(
        cls,
        level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.SIMPLE,
    ) -> Dict[str, Any]:
        """Build a ``logging.config.dictConfig`` mapping.

        Args:
            level: Level for the package and root loggers
            log_format: Output format

        Returns:
            Logging configuration dictionary
        """
        level = LogLevel(level)
        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[LogFormat(log_format)],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level.value,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level.value,
                "handlers": ["console"],
            },
            "loggers": {
                "oauth_identity": {
                    "level": level.value,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional["OAuthIdentitySettings"] = None) -> None:
        """Configure logging from settings."""
        if settings is None:
            from .settings import get_settings

            settings = get_settings()

        logging.config.dictConfig(cls.build_config(settings.log_level, settings.log_format))

        logger = logging.getLogger(__name__)
        logger.debug(
            "Logging configured: level=%s, format=%s",
            settings.log_level.value,
            settings.log_format.value,
        )


def setup_logging(settings: Optional["OAuthIdentitySettings"] = None) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring logging in an application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module name."""
    return logging.getLogger(name)
