"""Profile scope to attributes filters."""

from .default_filter import DefaultProfileScopeToAttributesFilter
from .oidc_filter import OidcProfileScopeToAttributesFilter, STANDARD_SCOPE_CLAIMS, SCOPE_OPENID

__all__ = [
    "DefaultProfileScopeToAttributesFilter",
    "OidcProfileScopeToAttributesFilter",
    "STANDARD_SCOPE_CLAIMS",
    "SCOPE_OPENID",
]
