"""Principal domain entity."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..exceptions import InvalidPrincipalError
from ...utils import is_blank, freeze_attributes


@dataclass(frozen=True)
class Principal:
    """Policy-approved internal identity attached to a session.

    Handles ONLY the filtered identity. Attributes reaching a principal have
    passed the registered service's release policy.
    """

    id: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate identifier and freeze attributes."""
        if not isinstance(self.id, str) or is_blank(self.id):
            raise InvalidPrincipalError(
                "Principal identifier cannot be blank",
                error_code="blank_principal_id",
            )
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))

    def has_attribute(self, name: str) -> bool:
        """Check if attribute was released to the principal."""
        return name in self.attributes

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get released attribute value with default."""
        return self.attributes.get(name, default)

    def __str__(self) -> str:
        """String representation."""
        return self.id

    def __repr__(self) -> str:
        """Debug representation (attribute names only)."""
        return f"Principal(id={self.id!r}, attributes={sorted(self.attributes)})"
