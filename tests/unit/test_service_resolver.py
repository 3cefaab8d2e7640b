"""Tests for service resolution."""

from unittest.mock import MagicMock

import pytest

from oauth_identity.application import ServiceResolver
from oauth_identity.core.entities import RegisteredService
from oauth_identity.core.value_objects import Service
from oauth_identity.infrastructure.adapters import MappingRequestContext


@pytest.fixture
def registered_service():
    return RegisteredService(client_id="client-123")


class TestServiceFallback:
    """Client identifier is used when no header may or does override it."""

    @pytest.mark.parametrize("client_id", ["client-123", "https://app.example.org/callback", "a"])
    def test_header_override_disabled_returns_client_id(self, service_resolver, client_id):
        context = MappingRequestContext(headers={"service": "svc1", "X-service": "svc2"})

        service = service_resolver.resolve(RegisteredService(client_id=client_id), context, False)

        assert service == Service(client_id)

    def test_default_disables_header_override(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "svc1"})

        assert service_resolver.resolve(registered_service, context).id == "client-123"

    def test_no_headers_falls_back_to_client_id(self, service_resolver, registered_service, empty_context):
        service = service_resolver.resolve(registered_service, empty_context, True)

        assert service.id == "client-123"

    def test_client_id_is_not_trimmed(self, service_resolver):
        context = MappingRequestContext(headers={"service": "svc1"})

        service = service_resolver.resolve(RegisteredService(client_id=" portal "), context, False)

        assert service.id == " portal "


class TestHeaderPrecedence:
    """Header override when enabled by the caller."""

    def test_primary_header_wins(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "svc1", "X-service": "svc2"})

        assert service_resolver.resolve(registered_service, context, True).id == "svc1"

    def test_header_lookup_is_case_insensitive(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"SERVICE": "svc1"})

        assert service_resolver.resolve(registered_service, context, True).id == "svc1"

    def test_alias_header_used_when_primary_absent(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"X-service": "svc2"})

        assert service_resolver.resolve(registered_service, context, True).id == "svc2"

    def test_alias_header_used_when_primary_blank(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "", "X-service": "svc2"})

        assert service_resolver.resolve(registered_service, context, True).id == "svc2"

    def test_custom_header_names(self, service_factory, registered_service):
        resolver = ServiceResolver(
            service_factory,
            service_header_name="client-service",
            service_header_alias="X-Client-Service",
        )
        context = MappingRequestContext(headers={"service": "ignored", "x-client-service": "svc3"})

        assert resolver.resolve(registered_service, context, True).id == "svc3"


class TestBlankHeaders:
    """Blank or malformed headers behave as absent headers."""

    def test_whitespace_primary_without_alias_falls_back(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "   "})

        assert service_resolver.resolve(registered_service, context, True).id == "client-123"

    def test_both_headers_blank_falls_back(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "\t", "X-service": " "})

        assert service_resolver.resolve(registered_service, context, True).id == "client-123"

    def test_undecodable_header_is_ignored(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": b"\xff\xfe"})

        assert service_resolver.resolve(registered_service, context, True).id == "client-123"

    def test_header_value_is_trimmed(self, service_resolver, registered_service):
        context = MappingRequestContext(headers={"service": "  svc1 "})

        assert service_resolver.resolve(registered_service, context, True).id == "svc1"


def test_resolver_uses_service_factory(registered_service, empty_context):
    factory = MagicMock()
    factory.create_service.return_value = Service("from-factory")
    resolver = ServiceResolver(factory)

    service = resolver.resolve(registered_service, empty_context)

    factory.create_service.assert_called_once_with("client-123")
    assert service.id == "from-factory"
