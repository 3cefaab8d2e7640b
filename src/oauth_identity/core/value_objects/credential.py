"""Credential value objects kept for the authentication audit trail."""

from dataclasses import dataclass

from ..exceptions import InvalidProfileError
from ...utils import is_blank


@dataclass(frozen=True)
class IdentifiableCredential:
    """Credential that only references an external identifier.

    Holds no secret material and no attributes.
    """

    id: str

    def __post_init__(self) -> None:
        """Validate credential identifier."""
        if is_blank(self.id):
            raise InvalidProfileError(
                "Credential identifier cannot be blank",
                error_code="blank_credential_id",
            )

    def __str__(self) -> str:
        """String representation."""
        return self.id


@dataclass(frozen=True)
class CredentialMetaData:
    """Metadata describing a credential that took part in authentication."""

    id: str
    credential_class: str

    @classmethod
    def from_credential(cls, credential: IdentifiableCredential) -> "CredentialMetaData":
        """Create metadata from a credential.

        Args:
            credential: Credential to describe

        Returns:
            CredentialMetaData carrying the identifier and credential type
        """
        credential_type = type(credential)
        return cls(
            id=credential.id,
            credential_class=f"{credential_type.__module__}.{credential_type.__qualname__}",
        )
