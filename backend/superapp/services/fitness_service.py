"""
SuperApp Backend — Fitness & Meal Services
============================================

What:  Daily logs: workouts and meals. Create, delete and list only; entries
       are re-logged rather than edited.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.middleware.view_invalidation import mark_stale
from superapp.models.fitness import Meal, Workout
from superapp.schemas.fitness import MealInput, MealRecord, WorkoutInput, WorkoutRecord
from superapp.services.store import delete_owned, insert_returning_id, run_statement

logger = logging.getLogger(__name__)


class WorkoutService:
    async def create(self, db: AsyncSession, user_id: uuid.UUID, payload: WorkoutInput) -> uuid.UUID:
        workout_id = await insert_returning_id(db, Workout, {**payload.values(), "user_id": user_id})
        logger.info("Workout %s logged (%s)", workout_id, payload.category)
        mark_stale("/fitness", "/projects")
        return workout_id

    async def delete(self, db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID) -> None:
        await delete_owned(db, Workout, workout_id, user_id)
        mark_stale("/fitness", "/projects")

    async def list_workouts(self, db: AsyncSession, user_id: uuid.UUID) -> List[WorkoutRecord]:
        result = await run_statement(
            db,
            select(Workout)
            .where(Workout.user_id == user_id)
            .order_by(Workout.workout_date.desc(), Workout.created_at.desc()),
        )
        return [WorkoutRecord.model_validate(w) for w in result.scalars().all()]


class MealService:
    async def create(self, db: AsyncSession, user_id: uuid.UUID, payload: MealInput) -> uuid.UUID:
        meal_id = await insert_returning_id(db, Meal, {**payload.values(), "user_id": user_id})
        logger.info("Meal %s logged (%s)", meal_id, payload.meal_type)
        mark_stale("/meals", "/projects")
        return meal_id

    async def delete(self, db: AsyncSession, user_id: uuid.UUID, meal_id: uuid.UUID) -> None:
        await delete_owned(db, Meal, meal_id, user_id)
        mark_stale("/meals", "/projects")

    async def list_meals(self, db: AsyncSession, user_id: uuid.UUID) -> List[MealRecord]:
        result = await run_statement(
            db,
            select(Meal)
            .where(Meal.user_id == user_id)
            .order_by(Meal.meal_date.desc(), Meal.created_at.desc()),
        )
        return [MealRecord.model_validate(m) for m in result.scalars().all()]


# ── Singleton Instances ───────────────────────────────────────────────────
workout_service = WorkoutService()
meal_service = MealService()
