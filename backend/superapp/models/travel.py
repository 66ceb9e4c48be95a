"""
SuperApp Backend — Travel Models
==================================

What:  `trips` and the `trip_activities` / `trip_expenses` they own.
       Deleting a trip cascades to its activities and expenses.
"""

import uuid
from datetime import date, time
from typing import List, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, String, Text, Time, text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class Trip(OwnedRecordMixin, Base):
    """A planned, booked or completed trip."""

    __tablename__ = "trips"

    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="planning", server_default=text("'planning'")
    )
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    budget: Mapped[Optional[float]] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, default="USD", server_default=text("'USD'")
    )
    cover_color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    tags: Mapped[List[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list, server_default=text("'{}'")
    )


class TripActivity(OwnedRecordMixin, Base):
    """A scheduled activity within a trip."""

    __tablename__ = "trip_activities"

    trip_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    activity_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    start_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    end_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default="other", server_default=text("'other'")
    )
    cost: Mapped[Optional[float]] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    is_booked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )


class TripExpense(OwnedRecordMixin, Base):
    """Money spent on a trip."""

    __tablename__ = "trip_expenses"

    trip_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default="other", server_default=text("'other'")
    )
    expense_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=text("CURRENT_DATE")
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
