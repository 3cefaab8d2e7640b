"""Authentication domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Tuple

from .principal import Principal
from .handler_result import HandlerResult
from ..value_objects import CredentialMetaData
from ...utils import freeze_attributes


@dataclass(frozen=True)
class Authentication:
    """Finalized authentication record consumed by session/ticket issuance.

    Handles ONLY the assembled identity and its metadata.
    Does not issue sessions or tickets - that's handled downstream.

    The attribute mapping always contains every principal attribute with the
    same value; it may carry more (protocol attributes and raw profile
    attributes), never a contradicting value.
    """

    principal: Principal
    authentication_date: datetime
    attributes: Mapping[str, Any] = field(default_factory=dict)
    credentials: Tuple[CredentialMetaData, ...] = ()
    successes: Mapping[str, HandlerResult] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate attribute superset and freeze collections."""
        if self.authentication_date.tzinfo is None:
            object.__setattr__(
                self,
                "authentication_date",
                self.authentication_date.replace(tzinfo=timezone.utc),
            )

        for name, value in self.principal.attributes.items():
            if name not in self.attributes or not _same_value(self.attributes[name], value):
                raise ValueError(
                    f"Authentication attribute '{name}' must match the principal attribute"
                )

        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))
        object.__setattr__(self, "successes", freeze_attributes(self.successes))
        object.__setattr__(self, "credentials", tuple(self.credentials))

    @property
    def handler_names(self) -> Tuple[str, ...]:
        """Names of the mechanisms that succeeded."""
        return tuple(self.successes)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get authentication attribute value with default."""
        return self.attributes.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert authentication to dictionary representation."""
        return {
            "principal": {
                "id": self.principal.id,
                "attributes": dict(self.principal.attributes),
            },
            "authentication_date": self.authentication_date.isoformat(),
            "attributes": dict(self.attributes),
            "credentials": [
                {"id": metadata.id, "credential_class": metadata.credential_class}
                for metadata in self.credentials
            ],
            "successes": list(self.successes),
        }

    def __repr__(self) -> str:
        """Debug representation (attribute names only)."""
        return (
            f"Authentication(principal={self.principal.id!r}, "
            f"date={self.authentication_date.isoformat()}, "
            f"attributes={sorted(self.attributes)}, successes={list(self.successes)})"
        )


def _same_value(candidate: Any, expected: Any) -> bool:
    return candidate is expected or bool(candidate == expected)
