"""Identity domain entities."""

from .external_profile import ExternalProfile, OAuth20Profile, OidcProfile
from .principal import Principal
from .registered_service import RegisteredService
from .handler_result import HandlerResult
from .authentication import Authentication

__all__ = [
    "ExternalProfile",
    "OAuth20Profile",
    "OidcProfile",
    "Principal",
    "RegisteredService",
    "HandlerResult",
    "Authentication",
]
