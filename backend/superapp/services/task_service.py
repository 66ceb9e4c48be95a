"""
SuperApp Backend — Task Service
=================================

What:  Create tasks, move them between status columns, delete them, and list
       them with the linked contact's display name.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.middleware.view_invalidation import mark_stale
from superapp.models.contact import Contact, Task
from superapp.schemas.contacts import TaskInput, TaskRecord, TaskStatusInput
from superapp.services.contact_service import PROJECTS_VIEW
from superapp.services.store import delete_owned, insert_returning_id, run_statement, update_owned

logger = logging.getLogger(__name__)


class TaskService:
    """Owner-scoped task operations."""

    async def create(self, db: AsyncSession, user_id: uuid.UUID, payload: TaskInput) -> uuid.UUID:
        task_id = await insert_returning_id(db, Task, {**payload.values(), "user_id": user_id})
        logger.info("Task %s created (priority=%s)", task_id, payload.priority)
        mark_stale(PROJECTS_VIEW)
        return task_id

    async def update_status(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        payload: TaskStatusInput,
    ) -> None:
        await update_owned(db, Task, task_id, user_id, {"status": payload.status})
        mark_stale(PROJECTS_VIEW)

    async def delete(self, db: AsyncSession, user_id: uuid.UUID, task_id: uuid.UUID) -> None:
        await delete_owned(db, Task, task_id, user_id)
        mark_stale(PROJECTS_VIEW)

    async def list_tasks(self, db: AsyncSession, user_id: uuid.UUID) -> List[TaskRecord]:
        """All tasks, soonest due first, each with its contact's name (if any)."""
        result = await run_statement(
            db,
            select(Task, Contact.first_name, Contact.last_name)
            .outerjoin(Contact, Task.contact_id == Contact.id)
            .where(Task.user_id == user_id)
            .order_by(Task.due_date.asc().nulls_last(), Task.created_at.desc()),
        )
        records = []
        for task, first_name, last_name in result.all():
            name = None
            if first_name:
                name = f"{first_name} {last_name}" if last_name else first_name
            records.append(
                TaskRecord.model_validate(task).model_copy(update={"contact_name": name})
            )
        return records


# ── Singleton Instance ────────────────────────────────────────────────────
task_service = TaskService()
