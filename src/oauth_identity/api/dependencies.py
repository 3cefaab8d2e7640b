"""FastAPI dependencies for the identity assembly step."""

from functools import lru_cache

from fastapi import Request

from ..infrastructure.adapters import StarletteRequestContext
from ..module import IdentityModule


@lru_cache()
def get_identity_module() -> IdentityModule:
    """Get identity module configured from environment settings."""
    return IdentityModule()


async def get_request_context(request: Request) -> StarletteRequestContext:
    """Get request context with query and form parameters."""
    return await StarletteRequestContext.from_request(request)
