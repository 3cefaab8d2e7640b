"""Helpers for attribute mappings carried by profiles and principals."""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple


def freeze_attributes(attributes: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return a read-only shallow copy of an attribute mapping."""
    return MappingProxyType(dict(attributes or {}))


def unique_values(values: Optional[Iterable[Any]]) -> Tuple[Any, ...]:
    """Return values as a tuple without duplicates, preserving order."""
    if values is None:
        return ()
    if isinstance(values, (str, bytes)):
        return (values,)
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return tuple(seen)

