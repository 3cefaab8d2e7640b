"""Authentication assembly from verified OAuth/OIDC profiles."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .authentication_builder import AuthenticationBuilder
from ..core.constants import ATTRIBUTE_PERMISSIONS, ATTRIBUTE_ROLES, STATE, NONCE
from ..core.entities import Authentication, ExternalProfile, HandlerResult, RegisteredService
from ..core.protocols import PrincipalFactory, ProfileScopeToAttributesFilter, RequestContext
from ..core.value_objects import (
    CredentialMetaData,
    IdentifiableCredential,
    ProtocolParameters,
    Service,
)

logger = logging.getLogger(__name__)


class OAuthAuthenticationBuilder:
    """Turn a verified external profile into an internal authentication.

    Handles ONLY identity assembly: attribute filtering, audit credential,
    handler result, protocol parameters and optional raw attribute
    passthrough. Does not validate tokens or issue sessions.

    Attributes approved by the release policy live on the principal.
    Passed-through profile attributes live only on the authentication and
    never replace a principal attribute. They may replace the seeded
    permissions, roles, state and nonce values.
    """

    def __init__(
        self,
        principal_factory: PrincipalFactory,
        attributes_filter: ProfileScopeToAttributesFilter,
        release_protocol_attributes: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize builder.

        Args:
            principal_factory: Factory creating the candidate principal
            attributes_filter: Release policy filter (security boundary)
            release_protocol_attributes: Pass raw profile attributes through
            clock: Source of the authentication date
        """
        self._principal_factory = principal_factory
        self._attributes_filter = attributes_filter
        self.release_protocol_attributes = release_protocol_attributes
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def build(
        self,
        profile: ExternalProfile,
        registered_service: RegisteredService,
        context: RequestContext,
        service: Service,
    ) -> Authentication:
        """Create an authentication from a verified profile.

        Args:
            profile: Verified external profile
            registered_service: Registration of the requesting client
            context: Current request context
            service: Service resolved for this request

        Returns:
            Immutable Authentication

        Raises:
            Any exception raised by the attributes filter, unchanged
        """
        candidate = self._principal_factory.create_principal(profile.id, profile.attributes)
        principal = self._attributes_filter.filter(service, candidate, registered_service, context)
        logger.debug(
            "Created final principal [%r] after filtering attributes based on [%s]",
            principal,
            registered_service,
        )

        authenticator = profile.authenticator
        metadata = CredentialMetaData.from_credential(IdentifiableCredential(profile.id))
        handler_result = HandlerResult(authenticator, metadata, principal, ())

        parameters = ProtocolParameters.from_context(context)
        logger.debug(
            "OAuth [%s] is [%s], and [%s] is [%s]",
            STATE,
            parameters.state,
            NONCE,
            parameters.nonce,
        )

        builder = (
            AuthenticationBuilder.new_instance()
            .add_attribute(ATTRIBUTE_PERMISSIONS, profile.permissions)
            .add_attribute(ATTRIBUTE_ROLES, profile.roles)
            .add_attribute(STATE, parameters.state)
            .add_attribute(NONCE, parameters.nonce)
            .add_credential(metadata)
            .set_principal(principal)
            .set_authentication_date(self._clock())
            .add_success(authenticator, handler_result)
        )

        if self.release_protocol_attributes:
            for name, value in profile.attributes.items():
                if name in principal.attributes:
                    logger.debug("Skipped over attribute [%s] since it's already contained by the principal", name)
                else:
                    logger.debug("Added attribute [%s] to the authentication", name)
                    builder.add_attribute(name, value)

        return builder.build()
