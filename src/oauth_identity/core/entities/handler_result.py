"""Handler result domain entity."""

from dataclasses import dataclass
from typing import Tuple

from .principal import Principal
from ..value_objects import CredentialMetaData


@dataclass(frozen=True)
class HandlerResult:
    """Assertion that one authentication mechanism succeeded for a principal."""

    handler_name: str
    credential_metadata: CredentialMetaData
    principal: Principal
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Freeze warnings."""
        object.__setattr__(self, "warnings", tuple(self.warnings))
