"""Service value object."""

from dataclasses import dataclass

from ..exceptions import InvalidServiceError
from ...utils import is_blank


@dataclass(frozen=True)
class Service:
    """Target service identifier a user is authenticating to.

    Handles ONLY the resolved identifier of the client application.
    Does not decide where the identifier comes from - that's handled by
    the service resolver.
    """

    id: str

    def __post_init__(self) -> None:
        """Validate service identifier."""
        if not isinstance(self.id, str):
            raise TypeError("Service identifier must be a string")

        if is_blank(self.id):
            raise InvalidServiceError.blank_identifier(self.id)

    def matches(self, other: "Service") -> bool:
        """Check if another service designates the same target."""
        return isinstance(other, Service) and other.id == self.id

    def __str__(self) -> str:
        """String representation."""
        return self.id
