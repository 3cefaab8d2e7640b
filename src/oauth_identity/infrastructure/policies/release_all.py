"""Release policies that do not inspect attribute names."""

import logging
from typing import Any, Dict

from ...core.entities import Principal, RegisteredService
from ...core.value_objects import Service

logger = logging.getLogger(__name__)


class ReturnAllAttributeReleasePolicy:
    """Release every principal attribute to the service."""

    def get_attributes(
        self,
        principal: Principal,
        service: Service,
        registered_service: RegisteredService,
    ) -> Dict[str, Any]:
        logger.debug(
            "Releasing all attributes of [%s] to [%s]",
            principal.id,
            registered_service.display_name,
        )
        return dict(principal.attributes)

    def __repr__(self) -> str:
        return "ReturnAllAttributeReleasePolicy()"


class DenyAllAttributeReleasePolicy:
    """Release no principal attributes to the service."""

    def get_attributes(
        self,
        principal: Principal,
        service: Service,
        registered_service: RegisteredService,
    ) -> Dict[str, Any]:
        logger.debug(
            "Attribute release denied for [%s] to [%s]",
            principal.id,
            registered_service.display_name,
        )
        return {}

    def __repr__(self) -> str:
        return "DenyAllAttributeReleasePolicy()"
