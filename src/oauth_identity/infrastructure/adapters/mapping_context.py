"""In-memory request context adapter."""

from typing import Any, Mapping, Optional

from ...utils import to_text


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class MappingRequestContext:
    """Request context backed by plain mappings.

    Header names are matched case-insensitively. Multi-valued parameters
    return their first value. Values that are not text are reported as absent.
    """

    def __init__(
        self,
        headers: Optional[Mapping[str, Any]] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ):
        self._headers = {name.lower(): value for name, value in (headers or {}).items()}
        self._parameters = dict(parameters or {})

    def get_request_header(self, name: str) -> Optional[str]:
        return to_text(_first(self._headers.get(name.lower())))

    def get_request_parameter(self, name: str) -> Optional[str]:
        return to_text(_first(self._parameters.get(name)))

    def __repr__(self) -> str:
        return (
            f"MappingRequestContext(headers={sorted(self._headers)}, "
            f"parameters={sorted(self._parameters)})"
        )
