"""Principal and service factory protocol contracts."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import Principal
    from ..value_objects import Service


@runtime_checkable
class PrincipalFactory(Protocol):
    """Protocol for principal creation."""

    def create_principal(
        self, id: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> "Principal":
        """Create a principal from an identifier and attributes."""
        ...


@runtime_checkable
class ServiceFactory(Protocol):
    """Protocol for service creation."""

    def create_service(self, id: str) -> "Service":
        """Create a service from an identifier."""
        ...
