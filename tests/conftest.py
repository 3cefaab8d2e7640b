"""Pytest configuration and fixtures for oauth-identity tests."""

from datetime import datetime, timezone

import pytest

from oauth_identity.application import OAuthAuthenticationBuilder, ServiceResolver
from oauth_identity.core.entities import OidcProfile, RegisteredService
from oauth_identity.infrastructure.adapters import MappingRequestContext
from oauth_identity.infrastructure.factories import DefaultPrincipalFactory, WebApplicationServiceFactory
from oauth_identity.infrastructure.filters import DefaultProfileScopeToAttributesFilter
from oauth_identity.infrastructure.policies import (
    ReturnAllAttributeReleasePolicy,
    ReturnAllowedAttributeReleasePolicy,
)


FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed authentication date."""
    return lambda: FIXED_NOW


@pytest.fixture
def principal_factory():
    """Default principal factory."""
    return DefaultPrincipalFactory()


@pytest.fixture
def service_factory():
    """Web application service factory."""
    return WebApplicationServiceFactory()


@pytest.fixture
def service_resolver(service_factory):
    """Service resolver with default header names."""
    return ServiceResolver(service_factory)


@pytest.fixture
def attributes_filter(principal_factory):
    """Filter delegating to the registered service release policy."""
    return DefaultProfileScopeToAttributesFilter(principal_factory)


@pytest.fixture
def make_builder(principal_factory, attributes_filter, fixed_clock):
    """Create an authentication builder with the passthrough flag set."""
    def _make(release_protocol_attributes=True, attributes_filter=attributes_filter):
        return OAuthAuthenticationBuilder(
            principal_factory,
            attributes_filter,
            release_protocol_attributes=release_protocol_attributes,
            clock=fixed_clock,
        )
    return _make


@pytest.fixture
def sample_profile():
    """Verified OIDC profile with identity and operational attributes."""
    return OidcProfile(
        id="casuser",
        attributes={
            "email": "casuser@example.org",
            "given_name": "Cas",
            "family_name": "User",
            "memberOf": ["staff", "faculty"],
            "employee_number": "12345",
        },
        roles=("ROLE_USER", "ROLE_ADMIN"),
        permissions=("read", "write"),
    )


@pytest.fixture
def allow_email_service():
    """Registered service releasing only email and given_name."""
    return RegisteredService(
        client_id="portal-client",
        name="Portal",
        attribute_release_policy=ReturnAllowedAttributeReleasePolicy(["email", "given_name"]),
    )


@pytest.fixture
def release_all_service():
    """Registered service releasing every attribute."""
    return RegisteredService(
        client_id="trusted-client",
        name="Trusted",
        attribute_release_policy=ReturnAllAttributeReleasePolicy(),
    )


@pytest.fixture
def empty_context():
    """Request context without headers or parameters."""
    return MappingRequestContext()
