"""OAuth identity assembly.

Turns a verified external OAuth/OIDC profile and a client registration into
the canonical service identifier and the internal authentication record
consumed by session/ticket issuance.

Architecture:
- core/: Domain objects and collaborator contracts
- application/: Service resolution and authentication assembly
- infrastructure/: Release policies, filters, factories and request adapters
- config/: Settings and logging configuration
- api/: FastAPI dependencies
"""

from .__version__ import __version__

from .core.value_objects import Service, CredentialMetaData, IdentifiableCredential, ProtocolParameters
from .core.entities import (
    ExternalProfile,
    OAuth20Profile,
    OidcProfile,
    Principal,
    RegisteredService,
    HandlerResult,
    Authentication,
)
from .core.exceptions import (
    OAuthIdentityError,
    ConfigurationError,
    InvalidProfileError,
    InvalidPrincipalError,
    InvalidServiceError,
    AttributeReleaseError,
)
from .application import ServiceResolver, OAuthAuthenticationBuilder, AuthenticationBuilder
from .module import IdentityModule

__all__ = [
    "__version__",

    # Value Objects
    "Service",
    "CredentialMetaData",
    "IdentifiableCredential",
    "ProtocolParameters",

    # Entities
    "ExternalProfile",
    "OAuth20Profile",
    "OidcProfile",
    "Principal",
    "RegisteredService",
    "HandlerResult",
    "Authentication",

    # Exceptions
    "OAuthIdentityError",
    "ConfigurationError",
    "InvalidProfileError",
    "InvalidPrincipalError",
    "InvalidServiceError",
    "AttributeReleaseError",

    # Components
    "ServiceResolver",
    "OAuthAuthenticationBuilder",
    "AuthenticationBuilder",
    "IdentityModule",
]
