"""Identity assembly use cases.

- ServiceResolver: picks the canonical service for a request
- OAuthAuthenticationBuilder: builds the authentication from a verified profile
- AuthenticationBuilder: collects and builds immutable authentication records
"""

from .service_resolver import ServiceResolver
from .authentication_builder import AuthenticationBuilder
from .oauth_authentication_builder import OAuthAuthenticationBuilder

__all__ = [
    "ServiceResolver",
    "AuthenticationBuilder",
    "OAuthAuthenticationBuilder",
]
