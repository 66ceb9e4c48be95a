"""
SuperApp Backend — Contact & Task Models
==========================================

What:  ORM models for the CRM module: `contacts` and the `tasks` that may
       reference them.
Who:   Used by ContactService, TaskService, DemoSeedService and the
       store-backed data source.
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class Contact(OwnedRecordMixin, Base):
    """
    A person in the user's CRM.

    Status values: lead (default), active, inactive.
    """

    __tablename__ = "contacts"

    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    role: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="lead",
        server_default=text("'lead'"),
    )

    __table_args__ = (
        Index("idx_contacts_user_created_at", "user_id", "created_at"),
    )

    @property
    def full_name(self) -> str:
        """'First Last', or just the first name when there is no last name."""
        return f"{self.first_name} {self.last_name}" if self.last_name else self.first_name

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name='{self.full_name}', status='{self.status}')>"


class Task(OwnedRecordMixin, Base):
    """
    A to-do item, optionally linked to a contact.

    Deleting the contact keeps the task and clears `contact_id`.
    """

    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default="medium", server_default=text("'medium'")
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="todo", server_default=text("'todo'")
    )
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    contact_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("contacts.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    contact: Mapped[Optional[Contact]] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, status='{self.status}', priority='{self.priority}')>"
