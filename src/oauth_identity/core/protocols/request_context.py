"""Request context protocol contract."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RequestContext(Protocol):
    """Protocol for read-only access to the current request.

    Defines ONLY header and parameter lookup by name.
    Implementations adapt a concrete web framework request.
    """

    def get_request_header(self, name: str) -> Optional[str]:
        """Get request header value.

        Args:
            name: Header name

        Returns:
            Header value, or None when absent or not decodable as text
        """
        ...

    def get_request_parameter(self, name: str) -> Optional[str]:
        """Get request parameter value.

        Args:
            name: Parameter name

        Returns:
            First parameter value, or None when absent
        """
        ...
