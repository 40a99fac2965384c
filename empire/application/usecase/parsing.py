"""Conversion of raw request values into domain types.

Failures raise the domain ``ValidationError`` so the API answers 400 for
malformed input the same way everywhere.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from empire.domain.error import ValidationError
from empire.domain.value import Currency, ItemType

E = TypeVar("E", bound=Enum)


def parse_uuid(value: str | None, field: str) -> UUID:
    if not value:
        raise ValidationError(f"Missing {field}")
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}")


def parse_optional_uuid(value: str | None, field: str) -> Optional[UUID]:
    return parse_uuid(value, field) if value else None


def parse_enum(enum_cls: Type[E], value: str | None, field: str) -> E:
    if not value:
        raise ValidationError(f"Missing {field}")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {field}: expected one of {allowed}")


def parse_item_type(value: str | None) -> ItemType:
    return parse_enum(ItemType, value, "item_type")


def parse_currency(value: str | None, default: str) -> Currency:
    return parse_enum(Currency, (value or default).lower(), "currency")


def parse_timestamp(value: str | None, field: str) -> Optional[datetime]:
    """ISO-8601 timestamp; a trailing ``Z`` is accepted."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"Invalid {field}")


M = TypeVar("M", bound=BaseModel)


def build_model(model_cls: Type[M], data: dict) -> M:
    """Validate ``data`` into a domain model, reporting errors as 400s."""
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        messages = "; ".join(_describe(err) for err in e.errors())
        raise ValidationError(messages)


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]
