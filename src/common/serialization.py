"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime
from decimal import Decimal
from typing import Any


def _to_plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings and Decimals to numbers."""
    return _to_plain(asdict(obj))
