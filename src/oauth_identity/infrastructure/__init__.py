"""Infrastructure implementations of the identity collaborators.

- policies/: Attribute release policies
- filters/: Profile scope to attributes filters
- factories/: Principal, service and filter factories
- adapters/: Request context adapters
"""

from .policies import (
    ReturnAllAttributeReleasePolicy,
    DenyAllAttributeReleasePolicy,
    ReturnAllowedAttributeReleasePolicy,
    ReturnMappedAttributeReleasePolicy,
)
from .filters import DefaultProfileScopeToAttributesFilter, OidcProfileScopeToAttributesFilter
from .factories import DefaultPrincipalFactory, WebApplicationServiceFactory, create_attributes_filter
from .adapters import MappingRequestContext, StarletteRequestContext

__all__ = [
    "ReturnAllAttributeReleasePolicy",
    "DenyAllAttributeReleasePolicy",
    "ReturnAllowedAttributeReleasePolicy",
    "ReturnMappedAttributeReleasePolicy",
    "DefaultProfileScopeToAttributesFilter",
    "OidcProfileScopeToAttributesFilter",
    "DefaultPrincipalFactory",
    "WebApplicationServiceFactory",
    "create_attributes_filter",
    "MappingRequestContext",
    "StarletteRequestContext",
]
