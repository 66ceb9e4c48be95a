"""
SuperApp Backend — Fitness & Meal Models
==========================================

What:  `workouts` and `meals`, the two daily logging tables.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Float, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class Workout(OwnedRecordMixin, Base):
    """One exercise entry. Strength work uses sets/reps/weight; cardio uses duration."""

    __tablename__ = "workouts"

    exercise_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default="strength", server_default=text("'strength'")
    )
    sets: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    reps: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    weight_lbs: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    duration_minutes: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    workout_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=text("CURRENT_DATE")
    )


class Meal(OwnedRecordMixin, Base):
    """One meal with optional macro breakdown."""

    __tablename__ = "meals"

    meal_name: Mapped[str] = mapped_column(String(200), nullable=False)
    meal_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="lunch", server_default=text("'lunch'")
    )
    calories: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    protein_g: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    carbs_g: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fat_g: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    meal_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=text("CURRENT_DATE")
    )
