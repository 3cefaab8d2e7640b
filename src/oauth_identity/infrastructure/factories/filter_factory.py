"""Attributes filter factory.

Chooses the profile scope to attributes filter by configured name.
"""

import logging
from typing import Callable, Dict, Optional

from ..filters import DefaultProfileScopeToAttributesFilter, OidcProfileScopeToAttributesFilter
from .principal_factory import DefaultPrincipalFactory
from ...core.exceptions import ConfigurationError
from ...core.protocols import PrincipalFactory, ProfileScopeToAttributesFilter

logger = logging.getLogger(__name__)

FILTER_DEFAULT = "default"
FILTER_OIDC = "oidc"

_FILTERS: Dict[str, Callable[[PrincipalFactory], ProfileScopeToAttributesFilter]] = {
    FILTER_DEFAULT: DefaultProfileScopeToAttributesFilter,
    FILTER_OIDC: OidcProfileScopeToAttributesFilter,
}


def available_filters() -> list:
    """Names of the filters that can be configured."""
    return sorted(_FILTERS)


def create_attributes_filter(
    name: str = FILTER_DEFAULT,
    principal_factory: Optional[PrincipalFactory] = None,
) -> ProfileScopeToAttributesFilter:
    """Create attributes filter by name.

    Args:
        name: Configured filter name (case-insensitive)
        principal_factory: Factory used by the filter to build principals

    Returns:
        Configured filter instance

    Raises:
        ConfigurationError: If the filter name is unknown
    """
    key = (name or "").strip().lower()
    filter_class = _FILTERS.get(key)
    if filter_class is None:
        raise ConfigurationError(
            f"Unknown attributes filter '{name}'",
            error_code="unknown_attributes_filter",
            details={"name": name, "available": available_filters()},
        )

    logger.debug("Creating attributes filter [%s]", key)
    return filter_class(principal_factory or DefaultPrincipalFactory())
