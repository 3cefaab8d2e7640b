"""Default profile scope to attributes filter."""

import logging

from ...core.entities import Principal, RegisteredService
from ...core.protocols import PrincipalFactory, RequestContext
from ...core.value_objects import Service

logger = logging.getLogger(__name__)


class DefaultProfileScopeToAttributesFilter:
    """Filter principal attributes through the registered service's release policy.

    Handles ONLY the delegation to the release policy and principal
    re-creation. Policy failures are not caught.
    """

    def __init__(self, principal_factory: PrincipalFactory):
        """Initialize filter.

        Args:
            principal_factory: Factory used to create the filtered principal
        """
        self._principal_factory = principal_factory

    def filter(
        self,
        service: Service,
        principal: Principal,
        registered_service: RegisteredService,
        context: RequestContext,
    ) -> Principal:
        policy = registered_service.attribute_release_policy
        attributes = policy.get_attributes(principal, service, registered_service)

        logger.debug(
            "Attribute release policy [%r] released %s for [%s]",
            policy,
            sorted(attributes),
            registered_service.display_name,
        )
        return self._principal_factory.create_principal(principal.id, attributes)
