"""Serialization helpers for API responses."""

from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a flat dataclass to a JSON-ready dict.

    Uses ``dataclasses.fields()`` + ``getattr`` rather than ``asdict()``,
    which deep-copies every value.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
