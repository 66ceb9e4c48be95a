"""
SuperApp Backend — Habit Schemas
==================================

What:  Habit definition input, completion inputs, and records.

`target_count` only means something for counted habits; it is cleared for
boolean habits so a stale target never survives a type change.
"""

import uuid
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from superapp.schemas.common import FormInput, parse_number

HabitType = Literal["boolean", "counted"]


class HabitInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"name": "Habit name is required"}

    name: str
    description: Optional[str] = None
    category: str = "other"
    type: HabitType = "boolean"
    target_count: Optional[int] = Field(default=None, ge=1)
    color: Optional[str] = None
    is_active: bool = True

    @model_validator(mode="after")
    def target_only_for_counted(self) -> "HabitInput":
        if self.type != "counted":
            self.target_count = None
        return self


class CompletionToggleInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"completion_date": "Date is required"}

    completion_date: date


class CompletionValueInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {
        "completion_date": "Date is required",
        "value": "Valid value is required",
    }

    completion_date: date
    value: float

    @field_validator("value", mode="before")
    @classmethod
    def value_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Valid value is required")


class HabitRecord(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    category: str
    type: str
    target_count: Optional[int] = None
    color: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CompletionRecord(BaseModel):
    id: uuid.UUID
    habit_id: uuid.UUID
    completion_date: date
    value: float

    model_config = ConfigDict(from_attributes=True)


class ToggleResponse(BaseModel):
    """Result of a toggle: whether the habit is now marked for that day."""
    completed: bool
