"""Core identity domain objects.

Components:
- value_objects: Immutable identity value objects
- entities: Profiles, principals, registrations and authentication records
- protocols: Contract definitions for external collaborators
- exceptions: Identity-specific exceptions
"""

from .value_objects import Service, IdentifiableCredential, CredentialMetaData, ProtocolParameters
from .exceptions import (
    OAuthIdentityError,
    ConfigurationError,
    InvalidProfileError,
    InvalidPrincipalError,
    InvalidServiceError,
    AttributeReleaseError,
)
from .protocols import (
    RequestContext,
    AttributeReleasePolicy,
    ProfileScopeToAttributesFilter,
    PrincipalFactory,
    ServiceFactory,
)
from .entities import (
    ExternalProfile,
    OAuth20Profile,
    OidcProfile,
    Principal,
    RegisteredService,
    HandlerResult,
    Authentication,
)

__all__ = [
    # Value Objects
    "Service",
    "IdentifiableCredential",
    "CredentialMetaData",
    "ProtocolParameters",

    # Exceptions
    "OAuthIdentityError",
    "ConfigurationError",
    "InvalidProfileError",
    "InvalidPrincipalError",
    "InvalidServiceError",
    "AttributeReleaseError",

    # Protocols
    "RequestContext",
    "AttributeReleasePolicy",
    "ProfileScopeToAttributesFilter",
    "PrincipalFactory",
    "ServiceFactory",

    # Entities
    "ExternalProfile",
    "OAuth20Profile",
    "OidcProfile",
    "Principal",
    "RegisteredService",
    "HandlerResult",
    "Authentication",
]
