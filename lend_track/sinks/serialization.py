"""Record serialization shared by the sinks.

Loans, payments and MOI entries become plain JSON-ready dicts. Money stays
exact by travelling as a decimal string; enums travel as their value and
dates as ISO 8601.
"""

from dataclasses import asdict, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Turn one record into a JSON-ready dict."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Flatten a dataclass, nested payments included."""
    return {key: serialize_value(value) for key, value in asdict(obj).items()}


def serialize_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    # datetime is a date subclass
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value
