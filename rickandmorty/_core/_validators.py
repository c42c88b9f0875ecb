"""Validation helpers used when decoding and mapping payloads."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence
from urllib.parse import urlsplit

_URL_SCHEMES = ("http", "https")


def require_fields(mapping: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Raise ``ValueError`` if any of *keys* are missing or null in *mapping*."""
    missing = [k for k in keys if mapping.get(k) is None]
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")


def require_type(value: Any, expected: type, name: str) -> None:
    """Raise ``ValueError`` unless *value* is an instance of *expected*."""
    # bool is an int subclass, but never a valid id
    if isinstance(value, bool) and expected is not bool:
        raise ValueError(f"{name} must be of type {expected.__name__}")
    if not isinstance(value, expected):
        raise ValueError(f"{name} must be of type {expected.__name__}")


def optional_str(mapping: Mapping[str, Any], key: str) -> Optional[str]:
    """Return ``mapping[key]`` when it is a string, ``None`` when absent or null."""
    value = mapping.get(key)
    if value is None:
        return None
    require_type(value, str, key)
    return value


def parse_url(text: Optional[str]) -> Optional[str]:
    """Parse *text* as an absolute http(s) URL.

    Returns:
        The URL, or ``None`` if *text* is absent or is not a well-formed
        absolute URL. Never raises.
    """
    if not text or not isinstance(text, str):
        return None
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        return None
    try:
        parts = urlsplit(text)
        # accessing port validates it
        parts.port
    except ValueError:
        return None
    if parts.scheme.lower() not in _URL_SCHEMES or not parts.hostname:
        return None
    return text
