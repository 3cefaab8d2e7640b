"""End-to-end tests for the identity module and its FastAPI dependencies."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from oauth_identity import (
    IdentityModule,
    InvalidProfileError,
    OidcProfile,
    RegisteredService,
)
from oauth_identity.api import get_identity_module, get_request_context
from oauth_identity.config import OAuthIdentitySettings
from oauth_identity.core.exceptions import ConfigurationError
from oauth_identity.infrastructure.adapters import MappingRequestContext
from oauth_identity.infrastructure.filters import OidcProfileScopeToAttributesFilter
from oauth_identity.infrastructure.policies import ReturnAllowedAttributeReleasePolicy


REGISTERED_SERVICE = RegisteredService(
    client_id="portal-client",
    name="Portal",
    attribute_release_policy=ReturnAllowedAttributeReleasePolicy(["email", "name"]),
)

PROFILE = OidcProfile(
    id="casuser",
    attributes={"email": "casuser@example.org", "name": "Cas User", "department": "IT"},
    roles=("ROLE_USER",),
    permissions=("read",),
)


def settings(**overrides):
    return OAuthIdentitySettings(_env_file=None, **overrides)


class TestIdentityModule:

    def test_authenticate_with_defaults(self):
        identity = IdentityModule(settings())
        context = MappingRequestContext(
            headers={"service": "https://spoofed.example.org"},
            parameters={"state": "s-1", "nonce": "n-1"},
        )

        service, authentication = identity.authenticate(PROFILE, REGISTERED_SERVICE, context)

        assert service.id == "portal-client"
        assert dict(authentication.principal.attributes) == {
            "email": "casuser@example.org",
            "name": "Cas User",
        }
        assert authentication.attributes["department"] == "IT"
        assert authentication.attributes["state"] == "s-1"
        assert authentication.attributes["nonce"] == "n-1"

    def test_settings_control_header_override_and_passthrough(self):
        identity = IdentityModule(settings(use_service_header=True, release_protocol_attributes=False))
        context = MappingRequestContext(headers={"X-service": "svc-alias"})

        service, authentication = identity.authenticate(PROFILE, REGISTERED_SERVICE, context)

        assert service.id == "svc-alias"
        assert "department" not in authentication.attributes

    def test_caller_can_disable_configured_header_override(self):
        identity = IdentityModule(settings(use_service_header=True))
        context = MappingRequestContext(headers={"service": "svc1"})

        assert identity.resolve_service(REGISTERED_SERVICE, context, use_service_header=False).id == "portal-client"

    def test_oidc_filter_selected_by_settings(self):
        identity = IdentityModule(settings(attribute_filter="oidc"))
        context = MappingRequestContext(parameters={"scope": "openid email"})

        assert isinstance(identity.attributes_filter, OidcProfileScopeToAttributesFilter)
        _, authentication = identity.authenticate(PROFILE, REGISTERED_SERVICE, context)
        assert dict(authentication.principal.attributes) == {"email": "casuser@example.org"}
        assert authentication.attributes["name"] == "Cas User"

    def test_unknown_filter_fails_at_wiring(self):
        with pytest.raises(ConfigurationError):
            IdentityModule(settings(attribute_filter="saml"))

    def test_profile_without_identifier_is_rejected_upstream(self):
        with pytest.raises(InvalidProfileError):
            OidcProfile(id="", attributes={"email": "casuser@example.org"})


@pytest.fixture
def client():
    app = FastAPI()
    identity = IdentityModule(settings(use_service_header=True))
    app.dependency_overrides[get_identity_module] = lambda: identity

    @app.post("/oauth2.0/callbackAuthorize")
    async def callback(
        context=Depends(get_request_context),
        identity: IdentityModule = Depends(get_identity_module),
    ):
        service, authentication = identity.authenticate(PROFILE, REGISTERED_SERVICE, context)
        return {"service": service.id, "authentication": authentication.to_dict()}

    return TestClient(app)


def test_fastapi_callback_assembles_identity(client):
    response = client.post(
        "/oauth2.0/callbackAuthorize",
        headers={"X-service": "https://app.example.org"},
        data={"state": "form-state", "nonce": "form-nonce"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["service"] == "https://app.example.org"
    attributes = body["authentication"]["attributes"]
    assert attributes["state"] == "form-state"
    assert attributes["nonce"] == "form-nonce"
    assert attributes["roles"] == ["ROLE_USER"]
    assert attributes["email"] == "casuser@example.org"
    assert body["authentication"]["successes"] == [
        "oauth_identity.core.entities.external_profile.OidcProfile"
    ]
