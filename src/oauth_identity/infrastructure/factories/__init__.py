"""Factories for principals, services and attributes filters."""

from .principal_factory import DefaultPrincipalFactory
from .service_factory import WebApplicationServiceFactory
from .filter_factory import (
    FILTER_DEFAULT,
    FILTER_OIDC,
    available_filters,
    create_attributes_filter,
)

__all__ = [
    "DefaultPrincipalFactory",
    "WebApplicationServiceFactory",
    "FILTER_DEFAULT",
    "FILTER_OIDC",
    "available_filters",
    "create_attributes_filter",
]
