"""
SuperApp Backend — Habit Service
==================================

What:  Habit definitions (create/update/delete) and per-day completions.

Completions:
    toggle_completion():    boolean habits. The current state is READ from
                            the store, never trusted from the client: an
                            existing row is deleted, a missing one is
                            inserted with value 1.
    set_completion_value(): counted habits. value <= 0 deletes the day's row;
                            value > 0 upserts on (habit_id, completion_date).

At most one completion row exists per habit per day (unique constraint).
"""

import logging
import uuid
from datetime import date
from typing import List

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.exceptions import NotFoundError
from superapp.middleware.view_invalidation import mark_stale
from superapp.models.habit import Habit, HabitCompletion
from superapp.schemas.habits import CompletionRecord, HabitInput, HabitRecord
from superapp.services.store import (
    delete_owned,
    insert_returning_id,
    run_statement,
    update_owned,
    upsert,
)

logger = logging.getLogger(__name__)

HABITS_VIEW = "/habits"


class HabitService:
    """Owner-scoped habit and completion operations."""

    # ── Habits ────────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, user_id: uuid.UUID, payload: HabitInput) -> uuid.UUID:
        habit_id = await insert_returning_id(db, Habit, {**payload.values(), "user_id": user_id})
        logger.info("Habit %s created (type=%s)", habit_id, payload.type)
        mark_stale(HABITS_VIEW, "/projects")
        return habit_id

    async def update(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        habit_id: uuid.UUID,
        payload: HabitInput,
    ) -> None:
        await update_owned(db, Habit, habit_id, user_id, payload.values())
        mark_stale(HABITS_VIEW, "/projects")

    async def delete(self, db: AsyncSession, user_id: uuid.UUID, habit_id: uuid.UUID) -> None:
        # Completions go with it (ON DELETE CASCADE)
        await delete_owned(db, Habit, habit_id, user_id)
        mark_stale(HABITS_VIEW, "/projects")

    # ── Completions ───────────────────────────────────────────────────────

    async def toggle_completion(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        habit_id: uuid.UUID,
        completion_date: date,
    ) -> bool:
        """
        Flip a boolean habit for `completion_date`.

        Returns:
            True if the habit is now marked for that day, False if unmarked.

        Raises:
            NotFoundError: the caller owns no habit with this id
        """
        result = await run_statement(
            db,
            select(Habit.id, HabitCompletion.id)
            .outerjoin(
                HabitCompletion,
                and_(
                    HabitCompletion.habit_id == Habit.id,
                    HabitCompletion.completion_date == completion_date,
                ),
            )
            .where(Habit.id == habit_id, Habit.user_id == user_id),
        )
        row = result.first()
        if row is None:
            raise NotFoundError(resource="habit", resource_id=str(habit_id))

        existing_completion_id = row[1]
        if existing_completion_id is not None:
            await run_statement(
                db,
                delete(HabitCompletion).where(
                    HabitCompletion.id == existing_completion_id,
                    HabitCompletion.user_id == user_id,
                ),
            )
            completed = False
        else:
            await insert_returning_id(
                db,
                HabitCompletion,
                {
                    "habit_id": habit_id,
                    "user_id": user_id,
                    "completion_date": completion_date,
                    "value": 1,
                },
            )
            completed = True

        logger.info(
            "Habit %s %s for %s",
            habit_id,
            "marked" if completed else "unmarked",
            completion_date.isoformat(),
        )
        mark_stale(HABITS_VIEW)
        return completed

    async def set_completion_value(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        habit_id: uuid.UUID,
        completion_date: date,
        value: float,
    ) -> None:
        """Record the count for a counted habit; zero or less clears the day."""
        if value <= 0:
            await run_statement(
                db,
                delete(HabitCompletion).where(
                    HabitCompletion.habit_id == habit_id,
                    HabitCompletion.completion_date == completion_date,
                    HabitCompletion.user_id == user_id,
                ),
            )
        else:
            await upsert(
                db,
                HabitCompletion,
                {
                    "habit_id": habit_id,
                    "user_id": user_id,
                    "completion_date": completion_date,
                    "value": value,
                },
                conflict_key=HabitCompletion.CONFLICT_KEY,
                update_fields=["value"],
            )
        mark_stale(HABITS_VIEW)

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list_habits(self, db: AsyncSession, user_id: uuid.UUID) -> List[HabitRecord]:
        result = await run_statement(
            db,
            select(Habit).where(Habit.user_id == user_id).order_by(Habit.created_at.asc()),
        )
        return [HabitRecord.model_validate(h) for h in result.scalars().all()]

    async def list_completions(
        self, db: AsyncSession, user_id: uuid.UUID
    ) -> List[CompletionRecord]:
        result = await run_statement(
            db,
            select(HabitCompletion)
            .where(HabitCompletion.user_id == user_id)
            .order_by(HabitCompletion.completion_date.desc()),
        )
        return [CompletionRecord.model_validate(c) for c in result.scalars().all()]


# ── Singleton Instance ────────────────────────────────────────────────────
habit_service = HabitService()
