"""OpenID Connect profile scope to attributes filter."""

import logging
from typing import Iterable, Mapping, Optional, Set, Tuple

from .default_filter import DefaultProfileScopeToAttributesFilter
from ...core.constants import SCOPE
from ...core.entities import Principal, RegisteredService
from ...core.protocols import PrincipalFactory, RequestContext
from ...core.value_objects import Service
from ...utils import is_blank

logger = logging.getLogger(__name__)

SCOPE_OPENID = "openid"

# OpenID Connect Core 1.0, section 5.4
STANDARD_SCOPE_CLAIMS: Mapping[str, Tuple[str, ...]] = {
    SCOPE_OPENID: (),
    "profile": (
        "name",
        "family_name",
        "given_name",
        "middle_name",
        "nickname",
        "preferred_username",
        "profile",
        "picture",
        "website",
        "gender",
        "birthdate",
        "zoneinfo",
        "locale",
        "updated_at",
    ),
    "email": ("email", "email_verified"),
    "address": ("address",),
    "phone": ("phone_number", "phone_number_verified"),
}


class OidcProfileScopeToAttributesFilter(DefaultProfileScopeToAttributesFilter):
    """Narrow released attributes to the claims of the requested OIDC scopes.

    The release policy runs first. When the request carries a ``scope``
    parameter, only claims belonging to recognized requested scopes survive.
    A registered service that declares scopes limits what may be requested.
    """

    def __init__(
        self,
        principal_factory: PrincipalFactory,
        scope_claims: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        super().__init__(principal_factory)
        source = STANDARD_SCOPE_CLAIMS if scope_claims is None else scope_claims
        self.scope_claims = {scope: tuple(claims) for scope, claims in source.items()}

    def filter(
        self,
        service: Service,
        principal: Principal,
        registered_service: RegisteredService,
        context: RequestContext,
    ) -> Principal:
        released = super().filter(service, principal, registered_service, context)

        requested = self._requested_scopes(context)
        if requested is None:
            logger.debug("No scopes requested; keeping attributes released by policy")
            return released

        scopes = self._permitted_scopes(requested, registered_service)
        claims = self._claims_for_scopes(scopes)
        attributes = {
            name: value
            for name, value in released.attributes.items()
            if name in claims
        }

        logger.debug(
            "Scopes %s narrowed released attributes to %s",
            sorted(scopes),
            sorted(attributes),
        )
        return self._principal_factory.create_principal(released.id, attributes)

    def _requested_scopes(self, context: RequestContext) -> Optional[Set[str]]:
        """Read requested scopes; None when the request names none."""
        value = context.get_request_parameter(SCOPE)
        if is_blank(value):
            return None
        return set(value.split())

    def _permitted_scopes(
        self, requested: Set[str], registered_service: RegisteredService
    ) -> Set[str]:
        """Drop scopes the registered service does not allow."""
        if not registered_service.scopes:
            return requested

        permitted = requested & set(registered_service.scopes)
        for scope in sorted(requested - permitted):
            logger.debug(
                "Scope [%s] is not allowed for [%s]",
                scope,
                registered_service.display_name,
            )
        return permitted

    def _claims_for_scopes(self, scopes: Set[str]) -> Set[str]:
        """Collect claims granted by recognized scopes."""
        claims: Set[str] = set()
        for scope in scopes:
            if scope not in self.scope_claims:
                logger.debug("Ignoring unrecognized scope [%s]", scope)
                continue
            claims.update(self.scope_claims[scope])
        return claims
