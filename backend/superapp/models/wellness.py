"""
SuperApp Backend — Wellness Model
===================================

What:  `mood_entries`, one journal entry per user per day.

Creating an entry for a day that already has one replaces it
(upsert on user_id + entry_date).
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import CheckConstraint, Date, Integer, Text, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class MoodEntry(OwnedRecordMixin, Base):
    """Daily mood (1-5) with optional energy, sleep quality, notes and tags."""

    __tablename__ = "mood_entries"

    mood: Mapped[int] = mapped_column(Integer, nullable=False)
    energy_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    sleep_quality: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[List[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list, server_default=text("'{}'")
    )
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "entry_date", name="uq_mood_entries_user_date"),
        CheckConstraint("mood BETWEEN 1 AND 5", name="ck_mood_entries_mood_range"),
    )

    CONFLICT_KEY = ("user_id", "entry_date")
