"""Utility helpers for oauth-identity."""

from .strings import is_blank, to_text, default_if_blank
from .attributes import freeze_attributes, unique_values

__all__ = [
    "is_blank",
    "to_text",
    "default_if_blank",
    "freeze_attributes",
    "unique_values",
]
