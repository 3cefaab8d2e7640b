"""Registered service domain entity."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, TYPE_CHECKING

from ..exceptions import InvalidServiceError
from ...utils import is_blank

if TYPE_CHECKING:
    from ..protocols import AttributeReleasePolicy


def _default_release_policy() -> "AttributeReleasePolicy":
    from ...infrastructure.policies import ReturnAllowedAttributeReleasePolicy

    return ReturnAllowedAttributeReleasePolicy()


@dataclass(frozen=True)
class RegisteredService:
    """Client application registration.

    Handles ONLY the read-only registration record owned by the client
    registry. The release policy decides which profile attributes reach the
    principal for this client; by default nothing is released.
    """

    client_id: str
    name: Optional[str] = None
    service_id: Optional[str] = None
    description: Optional[str] = None
    scopes: Tuple[str, ...] = ()
    attribute_release_policy: "AttributeReleasePolicy" = field(
        default_factory=_default_release_policy
    )

    def __post_init__(self) -> None:
        """Validate client identifier."""
        if not isinstance(self.client_id, str) or is_blank(self.client_id):
            raise InvalidServiceError(
                "Registered service client identifier cannot be blank",
                error_code="blank_client_id",
                details={"name": self.name},
            )
        object.__setattr__(self, "scopes", tuple(self.scopes))

    @property
    def display_name(self) -> str:
        """Get name for logs, falling back to client identifier."""
        return self.name or self.client_id

    def __str__(self) -> str:
        """String representation."""
        return f"RegisteredService(client_id={self.client_id}, name={self.display_name})"
