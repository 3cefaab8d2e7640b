"""Base exceptions for oauth-identity.

All exceptions inherit from OAuthIdentityError and carry an error code and
structured details so callers can render consistent error responses.
"""

from typing import Any, Dict, Optional


class OAuthIdentityError(Exception):
    """Base exception for all oauth-identity errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }


class ConfigurationError(OAuthIdentityError):
    """Raised when the identity components are wired with invalid settings."""
    pass


def create_error_response(exception: OAuthIdentityError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The oauth-identity exception

    Returns:
        Error response dictionary
    """
    return {"error": exception.to_dict()}
