"""External profile entities produced by the OAuth/OIDC exchange."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ..exceptions import InvalidProfileError
from ...utils import is_blank, freeze_attributes, unique_values


@dataclass(frozen=True)
class ExternalProfile:
    """Verified identity obtained from an external identity provider.

    Handles ONLY the representation of an already verified profile.
    Does not perform token validation or profile retrieval - that's handled
    by the OAuth exchange upstream.

    The concrete profile class is the authentication mechanism tag: subclasses
    distinguish OAuth 2.0 and OIDC logins in handler results.
    """

    id: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    roles: Tuple[str, ...] = ()
    permissions: Tuple[str, ...] = ()
    client_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate identifier and freeze collections."""
        if not isinstance(self.id, str) or is_blank(self.id):
            raise InvalidProfileError.blank_identifier(self.type_name())

        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))
        object.__setattr__(self, "roles", unique_values(self.roles))
        object.__setattr__(self, "permissions", unique_values(self.permissions))

    @classmethod
    def type_name(cls) -> str:
        """Fully qualified name of the profile class."""
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def authenticator(self) -> str:
        """Name of the authentication mechanism that produced this profile."""
        return self.type_name()

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get a raw profile attribute."""
        return self.attributes.get(name, default)

    def __str__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(id={self.id}, attributes={len(self.attributes)})"


@dataclass(frozen=True)
class OAuth20Profile(ExternalProfile):
    """Profile of a user authenticated through an OAuth 2.0 provider."""


@dataclass(frozen=True)
class OidcProfile(ExternalProfile):
    """Profile of a user authenticated through an OpenID Connect provider."""

    @property
    def email(self) -> Optional[str]:
        """Get email claim."""
        return self.attributes.get("email")

    @property
    def preferred_username(self) -> Optional[str]:
        """Get preferred_username claim."""
        return self.attributes.get("preferred_username")
