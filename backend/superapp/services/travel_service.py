"""
SuperApp Backend — Travel Service
===================================

What:  Trips and the activities/expenses that belong to them. All writes mark
       `/travel` stale. Deleting a trip cascades to its children in the store.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.middleware.view_invalidation import mark_stale
from superapp.models.travel import Trip, TripActivity, TripExpense
from superapp.schemas.travel import (
    ActivityInput,
    ActivityRecord,
    ActivityUpdateInput,
    ExpenseInput,
    ExpenseRecord,
    ExpenseUpdateInput,
    TripInput,
    TripRecord,
)
from superapp.services.store import delete_owned, insert_returning_id, run_statement, update_owned

logger = logging.getLogger(__name__)

TRAVEL_VIEW = "/travel"


class TravelService:
    """Owner-scoped trip, activity and expense operations."""

    # ── Trips ─────────────────────────────────────────────────────────────

    async def create_trip(self, db: AsyncSession, user_id: uuid.UUID, payload: TripInput) -> uuid.UUID:
        trip_id = await insert_returning_id(db, Trip, {**payload.values(), "user_id": user_id})
        logger.info("Trip %s created (%s)", trip_id, payload.status)
        mark_stale(TRAVEL_VIEW)
        return trip_id

    async def update_trip(
        self, db: AsyncSession, user_id: uuid.UUID, trip_id: uuid.UUID, payload: TripInput
    ) -> None:
        await update_owned(db, Trip, trip_id, user_id, payload.values())
        mark_stale(TRAVEL_VIEW)

    async def delete_trip(self, db: AsyncSession, user_id: uuid.UUID, trip_id: uuid.UUID) -> None:
        await delete_owned(db, Trip, trip_id, user_id)
        mark_stale(TRAVEL_VIEW)

    # ── Activities ────────────────────────────────────────────────────────

    async def create_activity(
        self, db: AsyncSession, user_id: uuid.UUID, payload: ActivityInput
    ) -> uuid.UUID:
        activity_id = await insert_returning_id(
            db, TripActivity, {**payload.values(), "user_id": user_id}
        )
        mark_stale(TRAVEL_VIEW)
        return activity_id

    async def update_activity(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        activity_id: uuid.UUID,
        payload: ActivityUpdateInput,
    ) -> None:
        await update_owned(db, TripActivity, activity_id, user_id, payload.values())
        mark_stale(TRAVEL_VIEW)

    async def delete_activity(
        self, db: AsyncSession, user_id: uuid.UUID, activity_id: uuid.UUID
    ) -> None:
        await delete_owned(db, TripActivity, activity_id, user_id)
        mark_stale(TRAVEL_VIEW)

    # ── Expenses ──────────────────────────────────────────────────────────

    async def create_expense(
        self, db: AsyncSession, user_id: uuid.UUID, payload: ExpenseInput
    ) -> uuid.UUID:
        expense_id = await insert_returning_id(
            db, TripExpense, {**payload.values(), "user_id": user_id}
        )
        mark_stale(TRAVEL_VIEW)
        return expense_id

    async def update_expense(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        expense_id: uuid.UUID,
        payload: ExpenseUpdateInput,
    ) -> None:
        await update_owned(db, TripExpense, expense_id, user_id, payload.values())
        mark_stale(TRAVEL_VIEW)

    async def delete_expense(
        self, db: AsyncSession, user_id: uuid.UUID, expense_id: uuid.UUID
    ) -> None:
        await delete_owned(db, TripExpense, expense_id, user_id)
        mark_stale(TRAVEL_VIEW)

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list_trips(self, db: AsyncSession, user_id: uuid.UUID) -> List[TripRecord]:
        result = await run_statement(
            db,
            select(Trip)
            .where(Trip.user_id == user_id)
            .order_by(Trip.start_date.desc().nulls_last(), Trip.created_at.desc()),
        )
        return [TripRecord.model_validate(t) for t in result.scalars().all()]

    async def list_activities(self, db: AsyncSession, user_id: uuid.UUID) -> List[ActivityRecord]:
        result = await run_statement(
            db,
            select(TripActivity)
            .where(TripActivity.user_id == user_id)
            .order_by(
                TripActivity.activity_date.asc().nulls_last(),
                TripActivity.start_time.asc().nulls_last(),
            ),
        )
        return [ActivityRecord.model_validate(a) for a in result.scalars().all()]

    async def list_expenses(self, db: AsyncSession, user_id: uuid.UUID) -> List[ExpenseRecord]:
        result = await run_statement(
            db,
            select(TripExpense)
            .where(TripExpense.user_id == user_id)
            .order_by(TripExpense.expense_date.desc()),
        )
        return [ExpenseRecord.model_validate(e) for e in result.scalars().all()]


# ── Singleton Instance ────────────────────────────────────────────────────
travel_service = TravelService()
