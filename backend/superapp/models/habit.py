"""
SuperApp Backend — Habit Models
=================================

What:  `habits` and their per-day `habit_completions`.

Completion rows are keyed by (habit_id, completion_date). A boolean habit is
"done" for a day when a row exists; a counted habit stores the count in
`value`. There is never more than one row per habit per day.
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class Habit(OwnedRecordMixin, Base):
    """A habit definition. `target_count` only applies to counted habits."""

    __tablename__ = "habits"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default="other", server_default=text("'other'")
    )
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="boolean", server_default=text("'boolean'")
    )
    target_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )


class HabitCompletion(OwnedRecordMixin, Base):
    """A habit marked (or counted) on a given day."""

    __tablename__ = "habit_completions"

    habit_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("habits.id", ondelete="CASCADE"),
        nullable=False,
    )
    completion_date: Mapped[date] = mapped_column(Date, nullable=False)
    value: Mapped[float] = mapped_column(
        Float, nullable=False, default=1, server_default=text("1")
    )

    __table_args__ = (
        UniqueConstraint("habit_id", "completion_date", name="uq_habit_completions_habit_date"),
    )

    CONFLICT_KEY = ("habit_id", "completion_date")
