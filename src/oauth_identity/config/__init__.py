"""Configuration for oauth-identity."""

from .logging_config import LogLevel, LogFormat, LoggingConfig, setup_logging, get_logger
from .settings import OAuthIdentitySettings, get_settings

__all__ = [
    "LogLevel",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
    "OAuthIdentitySettings",
    "get_settings",
]
