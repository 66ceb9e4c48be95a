"""
SuperApp Backend — Travel Schemas
===================================

What:  Inputs and records for trips, their activities and their expenses.

Create inputs for activities and expenses carry `trip_id`; the update inputs
do not, because an activity or expense never moves between trips.
"""

import uuid
from datetime import date, datetime, time
from typing import Any, ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from superapp.schemas.common import FormInput, parse_number, parse_tag_list

TripStatus = Literal["planning", "booked", "in_progress", "completed"]


class TripInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"destination": "Destination is required"}

    destination: str
    description: Optional[str] = None
    status: TripStatus = "planning"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = None
    currency: str = Field(default="USD", min_length=3, max_length=3)
    cover_color: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("destination")
    @classmethod
    def trim_destination(cls, v: str) -> str:
        return v.strip()

    @field_validator("budget", mode="before")
    @classmethod
    def budget_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Budget must be a number")

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> List[str]:
        return parse_tag_list(v)


class ActivityUpdateInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"title": "Title is required"}

    title: str
    description: Optional[str] = None
    activity_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: Optional[str] = None
    category: str = "other"
    cost: Optional[float] = None
    is_booked: bool = False

    @field_validator("title")
    @classmethod
    def trim_title(cls, v: str) -> str:
        return v.strip()

    @field_validator("cost", mode="before")
    @classmethod
    def cost_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Cost must be a number")


class ActivityInput(ActivityUpdateInput):
    required_fields: ClassVar[Dict[str, str]] = {
        "trip_id": "Trip and title are required",
        "title": "Trip and title are required",
    }

    trip_id: uuid.UUID


class ExpenseUpdateInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {
        "title": "Title and amount are required",
        "amount": "Title and amount are required",
    }

    title: str
    amount: float
    category: str = "other"
    expense_date: date = Field(default_factory=date.today)
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def trim_title(cls, v: str) -> str:
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Valid amount is required")


class ExpenseInput(ExpenseUpdateInput):
    required_fields: ClassVar[Dict[str, str]] = {
        "trip_id": "Trip, title, and amount are required",
        "title": "Trip, title, and amount are required",
        "amount": "Trip, title, and amount are required",
    }

    trip_id: uuid.UUID


# ── Records ───────────────────────────────────────────────────────────────

class TripRecord(BaseModel):
    id: uuid.UUID
    destination: str
    description: Optional[str] = None
    status: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = None
    currency: str
    cover_color: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityRecord(BaseModel):
    id: uuid.UUID
    trip_id: uuid.UUID
    title: str
    description: Optional[str] = None
    activity_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: Optional[str] = None
    category: str
    cost: Optional[float] = None
    is_booked: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ExpenseRecord(BaseModel):
    id: uuid.UUID
    trip_id: uuid.UUID
    title: str
    amount: float
    category: str
    expense_date: date
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
