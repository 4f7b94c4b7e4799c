"""Shared serialization utilities for report sinks."""

from collections.abc import Mapping, Set
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass to a dict with proper serialization.

    Uses ``dataclasses.fields()`` + ``getattr`` rather than ``asdict()``,
    which deep-copies every value.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_key(key: Any) -> str:
    """Serialize a mapping key to a JSON object key."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, Enum):
        return key.name if isinstance(key.value, int) else str(key.value)
    return str(key)


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, Mapping):
        return {serialize_key(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, Set):
        return sorted(serialize_value(v) for v in value)
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
