"""Default principal factory."""

from typing import Any, Mapping, Optional

from ...core.entities import Principal


class DefaultPrincipalFactory:
    """Create principals from identifiers and attribute mappings."""

    def create_principal(
        self, id: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> Principal:
        """Create principal.

        Args:
            id: Principal identifier
            attributes: Attribute mapping, copied into the principal

        Returns:
            New immutable Principal

        Raises:
            InvalidPrincipalError: If identifier is blank
        """
        return Principal(id=id, attributes=dict(attributes or {}))
