"""Exception hierarchy for oauth-identity."""

from .base import OAuthIdentityError, ConfigurationError, create_error_response
from .identity import (
    InvalidProfileError,
    InvalidPrincipalError,
    InvalidServiceError,
    AttributeReleaseError,
)

__all__ = [
    "OAuthIdentityError",
    "ConfigurationError",
    "create_error_response",
    "InvalidProfileError",
    "InvalidPrincipalError",
    "InvalidServiceError",
    "AttributeReleaseError",
]
