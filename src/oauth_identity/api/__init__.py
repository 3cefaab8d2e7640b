"""Reusable FastAPI components."""

from .dependencies import get_identity_module, get_request_context

__all__ = [
    "get_identity_module",
    "get_request_context",
]
