"""
SuperApp Backend — Wellness Service
=====================================

What:  Daily mood journal. One entry per user per day: logging a second entry
       for the same day replaces the first via
       INSERT ... ON CONFLICT (user_id, entry_date) DO UPDATE.
       Edits by id change the scores, notes and tags; an entry never moves
       to another day.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.middleware.view_invalidation import mark_stale
from superapp.models.wellness import MoodEntry
from superapp.schemas.wellness import MoodEntryInput, MoodEntryRecord, MoodEntryUpdateInput
from superapp.services.store import build_upsert, delete_owned, run_statement, update_owned

logger = logging.getLogger(__name__)

WELLNESS_VIEW = "/wellness"


class WellnessService:
    """Owner-scoped mood entry operations."""

    def upsert_statement(self, user_id: uuid.UUID, payload: MoodEntryInput):
        return build_upsert(
            MoodEntry,
            {**payload.values(), "user_id": user_id},
            conflict_key=MoodEntry.CONFLICT_KEY,
        )

    async def upsert_entry(
        self, db: AsyncSession, user_id: uuid.UUID, payload: MoodEntryInput
    ) -> None:
        await run_statement(db, self.upsert_statement(user_id, payload))
        logger.info("Mood entry saved for %s (mood=%d)", payload.entry_date.isoformat(), payload.mood)
        mark_stale(WELLNESS_VIEW)

    async def update_entry(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        entry_id: uuid.UUID,
        payload: MoodEntryUpdateInput,
    ) -> None:
        await update_owned(db, MoodEntry, entry_id, user_id, payload.values())
        mark_stale(WELLNESS_VIEW)

    async def delete_entry(self, db: AsyncSession, user_id: uuid.UUID, entry_id: uuid.UUID) -> None:
        await delete_owned(db, MoodEntry, entry_id, user_id)
        mark_stale(WELLNESS_VIEW)

    async def list_entries(self, db: AsyncSession, user_id: uuid.UUID) -> List[MoodEntryRecord]:
        result = await run_statement(
            db,
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id)
            .order_by(MoodEntry.entry_date.desc()),
        )
        return [MoodEntryRecord.model_validate(e) for e in result.scalars().all()]


# ── Singleton Instance ────────────────────────────────────────────────────
wellness_service = WellnessService()
