"""
SuperApp Backend — Wellness Schemas
=====================================
"""

import uuid
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from superapp.schemas.common import FormInput, parse_tag_list

MOOD_MESSAGE = "Valid mood (1-5) is required"


class MoodEntryUpdateInput(FormInput):
    """Edit an existing entry. The day it belongs to never changes."""

    required_fields: ClassVar[Dict[str, str]] = {"mood": MOOD_MESSAGE}

    mood: int
    energy_level: Optional[int] = Field(default=None, ge=1, le=5)
    sleep_quality: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("mood", mode="before")
    @classmethod
    def mood_in_range(cls, v: Any) -> int:
        try:
            mood = int(v)
        except (TypeError, ValueError):
            mood = 0
        if not 1 <= mood <= 5:
            raise PydanticCustomError("mood_range", MOOD_MESSAGE)
        return mood

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> List[str]:
        return parse_tag_list(v)


class MoodEntryInput(MoodEntryUpdateInput):
    """Check in for a day. Omitted date means today."""

    entry_date: date = Field(default_factory=date.today)


class MoodEntryRecord(BaseModel):
    id: uuid.UUID
    mood: int
    energy_level: Optional[int] = None
    sleep_quality: Optional[int] = None
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    entry_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
