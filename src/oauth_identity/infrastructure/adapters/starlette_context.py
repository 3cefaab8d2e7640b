"""Starlette/FastAPI request context adapter."""

import logging
from typing import Any, List, Mapping, Optional

from starlette.datastructures import FormData
from starlette.requests import Request

from ...utils import to_text

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class StarletteRequestContext:
    """Request context over a Starlette request.

    Parameters are looked up in the query string first, then in the parsed
    form body when one was supplied. A repeated parameter yields its first
    value. Header values that cannot be decoded are reported as absent.
    """

    def __init__(self, request: Request, form: Optional[Mapping[str, Any]] = None):
        """Initialize adapter.

        Args:
            request: Current request
            form: Parsed form body, if any
        """
        self._request = request
        self._form = form

    @classmethod
    async def from_request(cls, request: Request) -> "StarletteRequestContext":
        """Create adapter and parse a form body when the request carries one.

        Args:
            request: Current request

        Returns:
            Adapter with query and form parameters available
        """
        form: Optional[FormData] = None
        content_type = request.headers.get("content-type", "").lower()
        if request.method in ("POST", "PUT", "PATCH") and content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            logger.debug("Parsed form body with %d fields", len(form))
        return cls(request, form)

    def get_request_header(self, name: str) -> Optional[str]:
        for key, value in self._request.headers.raw:
            if key.decode("latin-1").lower() == name.lower():
                return to_text(value)
        return None

    def get_request_parameter(self, name: str) -> Optional[str]:
        value = _first(self._request.query_params.getlist(name))
        if value is None and self._form is not None:
            if hasattr(self._form, "getlist"):
                value = _first(self._form.getlist(name))
            else:
                value = self._form.get(name)
        return to_text(value)


def _first(values: List[Any]) -> Optional[Any]:
    return values[0] if values else None
