"""Plain-dict views of domain objects for structured logs."""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from cashpoint.models import Banknote, Withdrawal
from cashpoint.store import MoneyDeposit


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, MoneyDeposit):
        return deposit_to_dict(obj)
    elif isinstance(obj, Withdrawal):
        return {
            "currency": obj.currency,
            "total": obj.total_value(),
            "packs": [serialize_value(pack) for pack in obj.packs],
        }
    elif is_dataclass(obj):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def deposit_to_dict(deposit: MoneyDeposit) -> dict:
    """Counts keyed by face value, plus currency and total."""
    return {
        "currency": deposit.currency,
        "total": deposit.total_value(),
        "counts": {pack.banknote.face_value: pack.count for pack in deposit.packs},
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Banknote):
        return value.name
    elif isinstance(value, Enum):
        return value.value
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
