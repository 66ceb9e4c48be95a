"""
SuperApp Backend — Fitness & Meal Schemas
===========================================
"""

import uuid
from datetime import date, datetime
from typing import ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from superapp.schemas.common import FormInput

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class WorkoutInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"exercise_name": "Exercise name is required"}

    exercise_name: str
    category: str = "strength"
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    weight_lbs: Optional[float] = Field(default=None, ge=0)
    duration_minutes: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    workout_date: date = Field(default_factory=date.today)


class MealInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {"meal_name": "Meal name is required"}

    meal_name: str
    meal_type: MealType = "lunch"
    calories: Optional[float] = Field(default=None, ge=0)
    protein_g: Optional[float] = Field(default=None, ge=0)
    carbs_g: Optional[float] = Field(default=None, ge=0)
    fat_g: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    meal_date: date = Field(default_factory=date.today)


class WorkoutRecord(BaseModel):
    id: uuid.UUID
    exercise_name: str
    category: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight_lbs: Optional[float] = None
    duration_minutes: Optional[float] = None
    notes: Optional[str] = None
    workout_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MealRecord(BaseModel):
    id: uuid.UUID
    meal_name: str
    meal_type: str
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None
    notes: Optional[str] = None
    meal_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
