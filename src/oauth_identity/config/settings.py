"""Settings for the identity assembly components.

Loaded from environment variables prefixed with ``OAUTH_IDENTITY_`` or from
a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import PARAMETER_SERVICE, HEADER_SERVICE_ALIAS
from .logging_config import LogFormat, LogLevel


class OAuthIdentitySettings(BaseSettings):
    """Identity assembly settings."""

    model_config = SettingsConfigDict(
        env_prefix="OAUTH_IDENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Pass raw profile attributes through to the authentication
    release_protocol_attributes: bool = Field(default=True)

    # Default for callers that do not decide on header override themselves
    use_service_header: bool = Field(default=False)

    service_header_name: str = Field(default=PARAMETER_SERVICE, min_length=1)
    service_header_alias: str = Field(default=HEADER_SERVICE_ALIAS, min_length=1)

    # Profile scope to attributes filter: default | oidc
    attribute_filter: str = Field(default="default")

    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)

    @field_validator("attribute_filter")
    @classmethod
    def normalize_attribute_filter(cls, value: str) -> str:
        """Normalize filter name."""
        return value.strip().lower()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept lower-case log levels."""
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> OAuthIdentitySettings:
    """Get cached settings instance."""
    return OAuthIdentitySettings()
