"""Common utility functions."""

import re
from typing import Any


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def get_string(obj: Any, key: str) -> str | None:
    """Get a string value from dict or object attribute.

    Anything that is not a string (numbers, booleans, maps) counts as absent.
    """
    value = get_value(obj, key)
    if isinstance(value, str):
        return value
    return None


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, or whitespace-only strings."""
    return not value or not value.strip()


def humanize_enum(value: str | None, default: str = "Unknown") -> str:
    """Render an enum-style value as title-cased words.

    FINANCIAL_SERVICES -> Financial Services
    """
    if not value:
        return default
    words = value.replace("_", " ").lower()
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), words)
