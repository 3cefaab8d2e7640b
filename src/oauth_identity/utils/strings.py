"""String helpers for optional request and collaborator values."""

from typing import Any, Optional


def is_blank(value: Any) -> bool:
    """Check whether a value is None, non-text, empty, or whitespace only.

    Raw header bytes are decoded as UTF-8 first; undecodable bytes count as
    blank.
    """
    text = to_text(value)
    return text is None or not text.strip()


def to_text(value: Any) -> Optional[str]:
    """Return a value as text, or None when it has no text form."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def default_if_blank(value: Any, default: str = "") -> str:
    """Return the text value, or ``default`` when it is blank."""
    if is_blank(value):
        return default
    return to_text(value)
