"""Shared serialization utilities for sinks."""

import uuid
from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return entity_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def entity_to_dict(obj: Any) -> dict:
    """Convert an entity dataclass to a JSON-ready dict.

    Private fields are published under their public names (``_id`` as
    ``id``, ``_balance`` as ``balance``) and no deep copy is made.
    """
    result = {}
    for f in fields(obj):
        result[f.name.lstrip("_")] = serialize_value(getattr(obj, f.name))
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, uuid.UUID):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
