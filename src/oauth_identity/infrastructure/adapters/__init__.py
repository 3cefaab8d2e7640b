"""Request context adapters."""

from .mapping_context import MappingRequestContext
from .starlette_context import StarletteRequestContext

__all__ = [
    "MappingRequestContext",
    "StarletteRequestContext",
]
