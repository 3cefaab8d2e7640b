"""OAuth/OIDC request-correlation parameters."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import STATE, NONCE
from ...utils import default_if_blank

if TYPE_CHECKING:
    from ..protocols import RequestContext


@dataclass(frozen=True)
class ProtocolParameters:
    """State and nonce values captured from the current request.

    Both are opaque tokens passed through unchanged; the caller validates them.
    Absent or blank values are represented by an empty string.
    """

    state: str = ""
    nonce: str = ""

    @classmethod
    def from_context(cls, context: "RequestContext") -> "ProtocolParameters":
        """Read state and nonce from request parameters.

        Args:
            context: Request context to read parameters from

        Returns:
            ProtocolParameters with each value defaulted independently
        """
        return cls(
            state=default_if_blank(context.get_request_parameter(STATE)),
            nonce=default_if_blank(context.get_request_parameter(NONCE)),
        )
