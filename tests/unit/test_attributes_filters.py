"""Tests for profile scope to attributes filters."""

import pytest

from oauth_identity.core.entities import Principal, RegisteredService
from oauth_identity.core.exceptions import ConfigurationError
from oauth_identity.core.protocols import ProfileScopeToAttributesFilter
from oauth_identity.core.value_objects import Service
from oauth_identity.infrastructure.adapters import MappingRequestContext
from oauth_identity.infrastructure.factories import available_filters, create_attributes_filter
from oauth_identity.infrastructure.filters import (
    DefaultProfileScopeToAttributesFilter,
    OidcProfileScopeToAttributesFilter,
)
from oauth_identity.infrastructure.policies import (
    ReturnAllAttributeReleasePolicy,
    ReturnMappedAttributeReleasePolicy,
)


SERVICE = Service("client")


@pytest.fixture
def candidate():
    return Principal(
        "casuser",
        {
            "email": "casuser@example.org",
            "email_verified": True,
            "given_name": "Cas",
            "phone_number": "555-0100",
            "employee_number": "12345",
        },
    )


@pytest.fixture
def oidc_filter(principal_factory):
    return OidcProfileScopeToAttributesFilter(principal_factory)


def scope_context(scope=None):
    return MappingRequestContext(parameters={"scope": scope} if scope is not None else {})


class TestDefaultFilter:

    def test_applies_release_policy(self, attributes_filter, candidate):
        registered_service = RegisteredService(
            client_id="client",
            attribute_release_policy=ReturnMappedAttributeReleasePolicy({"given_name": "firstName"}),
        )

        principal = attributes_filter.filter(SERVICE, candidate, registered_service, scope_context())

        assert principal.id == "casuser"
        assert dict(principal.attributes) == {"firstName": "Cas"}
        assert principal is not candidate

    def test_satisfies_protocol(self, attributes_filter):
        assert isinstance(attributes_filter, ProfileScopeToAttributesFilter)


class TestOidcFilter:

    def test_no_scope_keeps_policy_result(self, oidc_filter, candidate, release_all_service):
        principal = oidc_filter.filter(SERVICE, candidate, release_all_service, scope_context())

        assert dict(principal.attributes) == dict(candidate.attributes)

    def test_scopes_narrow_released_claims(self, oidc_filter, candidate, release_all_service):
        principal = oidc_filter.filter(SERVICE, candidate, release_all_service, scope_context("openid email"))

        assert dict(principal.attributes) == {
            "email": "casuser@example.org",
            "email_verified": True,
        }

    def test_openid_alone_releases_no_claims(self, oidc_filter, candidate, release_all_service):
        principal = oidc_filter.filter(SERVICE, candidate, release_all_service, scope_context("openid"))

        assert principal.id == "casuser"
        assert dict(principal.attributes) == {}

    def test_unknown_scopes_are_ignored(self, oidc_filter, candidate, release_all_service):
        principal = oidc_filter.filter(
            SERVICE, candidate, release_all_service, scope_context("openid phone payroll")
        )

        assert dict(principal.attributes) == {"phone_number": "555-0100"}

    def test_scopes_cannot_widen_policy(self, oidc_filter, candidate, allow_email_service):
        principal = oidc_filter.filter(
            SERVICE, candidate, allow_email_service, scope_context("openid profile phone")
        )

        assert dict(principal.attributes) == {"given_name": "Cas"}

    def test_registered_scopes_limit_requested_scopes(self, oidc_filter, candidate):
        registered_service = RegisteredService(
            client_id="client",
            scopes=("openid", "email"),
            attribute_release_policy=ReturnAllAttributeReleasePolicy(),
        )

        principal = oidc_filter.filter(
            SERVICE, candidate, registered_service, scope_context("openid email phone")
        )

        assert set(principal.attributes) == {"email", "email_verified"}

    def test_custom_scope_claims(self, principal_factory, candidate, release_all_service):
        custom = OidcProfileScopeToAttributesFilter(
            principal_factory, scope_claims={"hr": ["employee_number"]}
        )

        principal = custom.filter(SERVICE, candidate, release_all_service, scope_context("hr email"))

        assert dict(principal.attributes) == {"employee_number": "12345"}


class TestFilterFactory:

    @pytest.mark.parametrize(
        "name, filter_class",
        [
            ("default", DefaultProfileScopeToAttributesFilter),
            ("OIDC", OidcProfileScopeToAttributesFilter),
            (" oidc ", OidcProfileScopeToAttributesFilter),
        ],
    )
    def test_creates_filter_by_name(self, name, filter_class):
        assert type(create_attributes_filter(name)) is filter_class

    def test_unknown_filter_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            create_attributes_filter("saml")

        assert exc_info.value.error_code == "unknown_attributes_filter"
        assert exc_info.value.details["available"] == available_filters() == ["default", "oidc"]
