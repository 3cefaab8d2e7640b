"""Identity core protocols.

Contract definitions for the collaborators of the identity assembly step.
Each protocol defines exactly one capability.
"""

from .request_context import RequestContext
from .attribute_release_policy import AttributeReleasePolicy
from .attributes_filter import ProfileScopeToAttributesFilter
from .factories import PrincipalFactory, ServiceFactory

__all__ = [
    "RequestContext",
    "AttributeReleasePolicy",
    "ProfileScopeToAttributesFilter",
    "PrincipalFactory",
    "ServiceFactory",
]
