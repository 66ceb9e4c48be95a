"""
SuperApp Backend — Contact & Task Schemas
===========================================

What:  Typed inputs for contact and task mutations, and the records returned
       by the projects page and the contact detail view.
"""

import uuid
from datetime import date, datetime
from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from superapp.schemas.common import FormInput

ContactStatus = Literal["lead", "active", "inactive"]
TaskPriority = Literal["low", "medium", "high"]
TaskStatus = Literal["todo", "in_progress", "done"]


# ── Inputs ────────────────────────────────────────────────────────────────

class ContactInput(FormInput):
    """Create or replace a contact."""

    required_fields: ClassVar[Dict[str, str]] = {"first_name": "First name is required"}

    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    notes: Optional[str] = None
    status: ContactStatus = "lead"


class TaskInput(FormInput):
    """Create a task, optionally linked to a contact."""

    required_fields: ClassVar[Dict[str, str]] = {"title": "Title is required"}

    title: str
    description: Optional[str] = None
    priority: TaskPriority = "medium"
    status: TaskStatus = "todo"
    due_date: Optional[date] = None
    contact_id: Optional[uuid.UUID] = None


class TaskStatusInput(FormInput):
    """Move a task to another column."""

    required_fields: ClassVar[Dict[str, str]] = {"status": "Status is required"}

    status: TaskStatus


# ── Records ───────────────────────────────────────────────────────────────

class ContactRecord(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskRecord(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    priority: str
    status: str
    due_date: Optional[date] = None
    contact_id: Optional[uuid.UUID] = None
    contact_name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactOption(BaseModel):
    """Compact contact reference for task assignment pickers."""
    id: uuid.UUID
    name: str


class ContactDetailResponse(BaseModel):
    """GET /api/contacts/{id}: a contact and the tasks linked to it."""
    contact: ContactRecord
    tasks: List[TaskRecord]
