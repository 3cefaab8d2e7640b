"""Attribute release policy protocol contract."""

from typing import Any, Dict, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import Principal, RegisteredService
    from ..value_objects import Service


@runtime_checkable
class AttributeReleasePolicy(Protocol):
    """Protocol for deciding which principal attributes a client may see."""

    def get_attributes(
        self,
        principal: "Principal",
        service: "Service",
        registered_service: "RegisteredService",
    ) -> Dict[str, Any]:
        """Compute the released attributes.

        Args:
            principal: Candidate principal carrying every profile attribute
            service: Resolved target service
            registered_service: Registration of the requesting client

        Returns:
            New mapping of released attributes
        """
        ...
