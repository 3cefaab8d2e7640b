"""Allow-list based release policies."""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from ...core.entities import Principal, RegisteredService
from ...core.exceptions import AttributeReleaseError
from ...core.value_objects import Service
from ...utils import is_blank

logger = logging.getLogger(__name__)


class ReturnAllowedAttributeReleasePolicy:
    """Release only the attributes named in an allow-list.

    Names missing from the principal are skipped, never invented.
    """

    def __init__(self, allowed_attributes: Optional[Iterable[str]] = None):
        """Initialize policy.

        Args:
            allowed_attributes: Attribute names the service may receive
        """
        self.allowed_attributes = tuple(allowed_attributes or ())
        for name in self.allowed_attributes:
            if is_blank(name):
                raise AttributeReleaseError(
                    "Allowed attribute names cannot be blank",
                    policy=type(self).__name__,
                )

    def get_attributes(
        self,
        principal: Principal,
        service: Service,
        registered_service: RegisteredService,
    ) -> Dict[str, Any]:
        released: Dict[str, Any] = {}
        for name in self.allowed_attributes:
            if name in principal.attributes:
                released[name] = principal.attributes[name]
            else:
                logger.debug("Allowed attribute [%s] is not available for [%s]", name, principal.id)

        logger.debug(
            "Released attributes %s of [%s] to [%s]",
            sorted(released),
            principal.id,
            registered_service.display_name,
        )
        return released

    def __repr__(self) -> str:
        return f"ReturnAllowedAttributeReleasePolicy(allowed_attributes={list(self.allowed_attributes)})"


class ReturnMappedAttributeReleasePolicy:
    """Release allowed attributes under new names.

    The mapping goes from principal attribute name to released name. Two
    sources may not be released under the same name.
    """

    def __init__(self, allowed_attributes: Optional[Mapping[str, str]] = None):
        """Initialize policy.

        Args:
            allowed_attributes: Source attribute name to released name

        Raises:
            AttributeReleaseError: If a name is blank or released twice
        """
        self.allowed_attributes = dict(allowed_attributes or {})

        released_names = set()
        for source, target in self.allowed_attributes.items():
            if is_blank(source) or is_blank(target):
                raise AttributeReleaseError(
                    "Mapped attribute names cannot be blank",
                    policy=type(self).__name__,
                    details={"source": source, "target": target},
                )
            if target in released_names:
                raise AttributeReleaseError(
                    f"Attribute name '{target}' is released more than once",
                    policy=type(self).__name__,
                    details={"target": target},
                )
            released_names.add(target)

    def get_attributes(
        self,
        principal: Principal,
        service: Service,
        registered_service: RegisteredService,
    ) -> Dict[str, Any]:
        released: Dict[str, Any] = {}
        for source, target in self.allowed_attributes.items():
            if source not in principal.attributes:
                continue
            if source != target:
                logger.debug("Releasing attribute [%s] as [%s]", source, target)
            released[target] = principal.attributes[source]
        return released

    def __repr__(self) -> str:
        return f"ReturnMappedAttributeReleasePolicy(allowed_attributes={self.allowed_attributes})"
