"""Identity module wiring.

Composes the service resolver and authentication builder from settings.

Usage:
    from oauth_identity import IdentityModule

    identity = IdentityModule()
    service, authentication = identity.authenticate(profile, registered_service, context)
"""

import logging
from typing import Optional, Tuple

from .application import OAuthAuthenticationBuilder, ServiceResolver
from .config import OAuthIdentitySettings, get_settings
from .core.entities import Authentication, ExternalProfile, RegisteredService
from .core.protocols import (
    PrincipalFactory,
    ProfileScopeToAttributesFilter,
    RequestContext,
    ServiceFactory,
)
from .core.value_objects import Service
from .infrastructure.factories import (
    DefaultPrincipalFactory,
    WebApplicationServiceFactory,
    create_attributes_filter,
)

logger = logging.getLogger(__name__)


class IdentityModule:
    """Composition root for the identity assembly step.

    Settings are read once here and passed explicitly to the components;
    the components never read settings themselves.
    """

    def __init__(
        self,
        settings: Optional[OAuthIdentitySettings] = None,
        principal_factory: Optional[PrincipalFactory] = None,
        service_factory: Optional[ServiceFactory] = None,
        attributes_filter: Optional[ProfileScopeToAttributesFilter] = None,
    ):
        """Initialize module.

        Args:
            settings: Settings; cached environment settings when omitted
            principal_factory: Principal factory override
            service_factory: Service factory override
            attributes_filter: Attributes filter override; otherwise chosen by settings

        Raises:
            ConfigurationError: If the configured attributes filter is unknown
        """
        self.settings = settings or get_settings()
        self.principal_factory = principal_factory or DefaultPrincipalFactory()
        self.service_factory = service_factory or WebApplicationServiceFactory()
        self.attributes_filter = attributes_filter or create_attributes_filter(
            self.settings.attribute_filter, self.principal_factory
        )

        self.service_resolver = ServiceResolver(
            self.service_factory,
            service_header_name=self.settings.service_header_name,
            service_header_alias=self.settings.service_header_alias,
        )
        self.authentication_builder = OAuthAuthenticationBuilder(
            self.principal_factory,
            self.attributes_filter,
            release_protocol_attributes=self.settings.release_protocol_attributes,
        )
        logger.debug(
            "Identity module configured: filter=%s, release_protocol_attributes=%s",
            type(self.attributes_filter).__name__,
            self.settings.release_protocol_attributes,
        )

    def resolve_service(
        self,
        registered_service: RegisteredService,
        context: RequestContext,
        use_service_header: Optional[bool] = None,
    ) -> Service:
        """Resolve service, defaulting header override to the configured value."""
        if use_service_header is None:
            use_service_header = self.settings.use_service_header
        return self.service_resolver.resolve(registered_service, context, use_service_header)

    def authenticate(
        self,
        profile: ExternalProfile,
        registered_service: RegisteredService,
        context: RequestContext,
        use_service_header: Optional[bool] = None,
    ) -> Tuple[Service, Authentication]:
        """Resolve the service and build the authentication for it.

        Args:
            profile: Verified external profile
            registered_service: Registration of the requesting client
            context: Current request context
            use_service_header: Whether request headers may override the service

        Returns:
            Resolved service and the assembled authentication
        """
        service = self.resolve_service(registered_service, context, use_service_header)
        authentication = self.authentication_builder.build(profile, registered_service, context, service)
        return service, authentication
