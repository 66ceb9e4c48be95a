"""
SuperApp Backend — Contact Service
====================================

What:  CRUD for CRM contacts plus the two reads the UI needs (list and detail).
Who:   Called by routes/contacts.py and by the store-backed data source.

Every write is one owner-scoped statement and marks `/projects` stale; an
update also marks that contact's detail view.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.exceptions import NotFoundError
from superapp.middleware.view_invalidation import mark_stale
from superapp.models.contact import Contact, Task
from superapp.schemas.contacts import (
    ContactDetailResponse,
    ContactInput,
    ContactOption,
    ContactRecord,
    TaskRecord,
)
from superapp.services.store import delete_owned, insert_returning_id, run_statement, update_owned

logger = logging.getLogger(__name__)

PROJECTS_VIEW = "/projects"


def contact_detail_view(contact_id: uuid.UUID) -> str:
    return f"/projects/contacts/{contact_id}"


class ContactService:
    """Owner-scoped contact operations."""

    async def create(
        self, db: AsyncSession, user_id: uuid.UUID, payload: ContactInput
    ) -> uuid.UUID:
        contact_id = await insert_returning_id(
            db, Contact, {**payload.values(), "user_id": user_id}
        )
        logger.info("Contact %s created (status=%s)", contact_id, payload.status)
        mark_stale(PROJECTS_VIEW)
        return contact_id

    async def update(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        contact_id: uuid.UUID,
        payload: ContactInput,
    ) -> None:
        await update_owned(db, Contact, contact_id, user_id, payload.values())
        mark_stale(PROJECTS_VIEW, contact_detail_view(contact_id))

    async def delete(self, db: AsyncSession, user_id: uuid.UUID, contact_id: uuid.UUID) -> None:
        # Linked tasks keep existing; the FK clears their contact_id
        await delete_owned(db, Contact, contact_id, user_id)
        mark_stale(PROJECTS_VIEW)

    async def list_contacts(self, db: AsyncSession, user_id: uuid.UUID) -> List[ContactRecord]:
        """All of the caller's contacts, newest first."""
        result = await run_statement(
            db,
            select(Contact)
            .where(Contact.user_id == user_id)
            .order_by(Contact.created_at.desc()),
        )
        return [ContactRecord.model_validate(c) for c in result.scalars().all()]

    @staticmethod
    def options(contacts: List[ContactRecord]) -> List[ContactOption]:
        """Picker entries ("First Last") for assigning tasks."""
        return [
            ContactOption(
                id=c.id,
                name=f"{c.first_name} {c.last_name}" if c.last_name else c.first_name,
            )
            for c in contacts
        ]

    async def get_detail(
        self, db: AsyncSession, user_id: uuid.UUID, contact_id: uuid.UUID
    ) -> ContactDetailResponse:
        """
        A contact and the tasks linked to it.

        Raises:
            NotFoundError: no such contact for this caller (→ 404)
        """
        result = await run_statement(
            db,
            select(Contact).where(Contact.id == contact_id, Contact.user_id == user_id),
        )
        contact = result.scalar_one_or_none()
        if contact is None:
            raise NotFoundError(resource="contact", resource_id=str(contact_id))

        task_result = await run_statement(
            db,
            select(Task)
            .where(Task.contact_id == contact_id, Task.user_id == user_id)
            .order_by(Task.due_date.asc().nulls_last(), Task.created_at.desc()),
        )
        name = contact.full_name
        tasks = [
            TaskRecord.model_validate(t).model_copy(update={"contact_name": name})
            for t in task_result.scalars().all()
        ]
        return ContactDetailResponse(contact=ContactRecord.model_validate(contact), tasks=tasks)


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = ContactService()
