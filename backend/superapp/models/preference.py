"""
SuperApp Backend — User Preference Model
==========================================

What:  `user_preferences`, one row per user holding UI state that must follow
       the user across devices (currently the sidebar display mode).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base

SIDEBAR_MODES = ("expanded", "icons", "hidden")


class UserPreference(Base):
    """Per-user preferences, keyed by user id."""

    __tablename__ = "user_preferences"

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    sidebar_mode: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="expanded",
        server_default=text("'expanded'"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
