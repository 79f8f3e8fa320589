from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

MAX_DATE_FIELDS = 7


class NoArguments(BaseModel):
    model_config = ConfigDict(frozen=True)


class SingleValue(BaseModel):
    """One value: a timestamp, a date string or a zone id, after coercion."""

    value: Any
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class PositionalFields(BaseModel):
    """Year, month, day, hours, minutes, seconds, ms read as local time, plus an optional zone."""

    fields: Tuple[Any, ...]
    zone_id: Optional[str] = None
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_field_count(self) -> "PositionalFields":
        if not self.fields:
            raise ValueError("At least one date field is required")
        if len(self.fields) > MAX_DATE_FIELDS:
            raise ValueError(f"At most {MAX_DATE_FIELDS} date fields are accepted, got {len(self.fields)}")
        return self


ConstructorArguments = Union[NoArguments, SingleValue, PositionalFields]


def classify(args: Sequence[Any]) -> ConstructorArguments:
    """Map a raw argument list onto one of the constructor shapes.

    With two or more arguments a trailing string is the zone id and everything
    before it is a date field.
    """
    if not args:
        return NoArguments()
    if len(args) == 1:
        return SingleValue(value=args[0])
    if isinstance(args[-1], str):
        return PositionalFields(fields=tuple(args[:-1]), zone_id=args[-1])
    return PositionalFields(fields=tuple(args))
