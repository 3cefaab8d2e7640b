"""Builder for immutable authentication records."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..core.entities import Authentication, HandlerResult, Principal
from ..core.exceptions import InvalidPrincipalError
from ..core.value_objects import CredentialMetaData


class AuthenticationBuilder:
    """Collects the parts of an authentication and builds the record once.

    Principal attributes are always carried into the built attribute
    mapping; they take precedence over attributes added to the builder.
    """

    def __init__(self, principal: Optional[Principal] = None):
        self._principal = principal
        self._attributes: Dict[str, Any] = {}
        self._credentials: List[CredentialMetaData] = []
        self._successes: Dict[str, HandlerResult] = {}
        self._authentication_date: Optional[datetime] = None

    @classmethod
    def new_instance(cls) -> "AuthenticationBuilder":
        """Create an empty builder."""
        return cls()

    def set_principal(self, principal: Principal) -> "AuthenticationBuilder":
        self._principal = principal
        return self

    def set_authentication_date(self, authentication_date: datetime) -> "AuthenticationBuilder":
        self._authentication_date = authentication_date
        return self

    def add_attribute(self, name: str, value: Any) -> "AuthenticationBuilder":
        self._attributes[name] = value
        return self

    def add_attributes(self, attributes: Mapping[str, Any]) -> "AuthenticationBuilder":
        self._attributes.update(attributes)
        return self

    def add_credential(self, metadata: CredentialMetaData) -> "AuthenticationBuilder":
        self._credentials.append(metadata)
        return self

    def add_success(self, name: str, result: HandlerResult) -> "AuthenticationBuilder":
        self._successes[name] = result
        return self

    def build(self) -> Authentication:
        """Build authentication record.

        Returns:
            Immutable Authentication

        Raises:
            InvalidPrincipalError: If no principal was set
        """
        if self._principal is None:
            raise InvalidPrincipalError(
                "Authentication requires a principal",
                error_code="missing_principal",
            )

        attributes = dict(self._attributes)
        attributes.update(self._principal.attributes)

        return Authentication(
            principal=self._principal,
            authentication_date=self._authentication_date or datetime.now(timezone.utc),
            attributes=attributes,
            credentials=tuple(self._credentials),
            successes=dict(self._successes),
        )
