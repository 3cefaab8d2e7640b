"""Identity-specific exceptions.

These represent precondition violations on collaborator data. The identity
assembly step itself never raises them for absent optional input.
"""

from typing import Any, Optional

from .base import OAuthIdentityError


class InvalidProfileError(OAuthIdentityError):
    """Raised when an external profile cannot identify a user."""

    @classmethod
    def blank_identifier(cls, profile_type: str) -> "InvalidProfileError":
        """Create exception for a profile without a usable identifier."""
        return cls(
            "External profile identifier cannot be blank",
            error_code="blank_profile_id",
            details={"profile_type": profile_type},
        )


class InvalidPrincipalError(OAuthIdentityError):
    """Raised when a principal would be built without an identity."""
    pass


class InvalidServiceError(OAuthIdentityError):
    """Raised when a service or registered service has no usable identifier."""

    @classmethod
    def blank_identifier(cls, value: Optional[Any] = None) -> "InvalidServiceError":
        """Create exception for a blank service identifier."""
        return cls(
            "Service identifier cannot be blank",
            error_code="blank_service_id",
            details={"value": value},
        )


class AttributeReleaseError(OAuthIdentityError):
    """Raised by release policies that cannot evaluate their rules."""

    def __init__(self, message: str, *, policy: Optional[str] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.policy = policy
        if policy:
            self.details.setdefault("policy", policy)
