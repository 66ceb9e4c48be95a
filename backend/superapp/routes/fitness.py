"""
SuperApp Backend — Fitness & Meal Route Handlers
==================================================

What:  Log and delete workouts and meals.
Who:   Called by the frontend Fitness and Meals pages.

Both logs are append-only from the UI's point of view: there is no edit
endpoint, a wrong entry is deleted and logged again.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.fitness import MealInput, WorkoutInput
from superapp.services.fitness_service import meal_service, workout_service

router = APIRouter(prefix="/api", tags=["Fitness"])


# ── Workouts ──────────────────────────────────────────────────────────────

@router.post(
    "/workouts",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing exercise name", "model": ErrorResponse}},
    summary="Log a workout",
)
async def create_workout(
    payload: WorkoutInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await workout_service.create(db, identity.id, payload))


@router.delete(
    "/workouts/{workout_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a workout",
)
async def delete_workout(
    workout_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await workout_service.delete(db, identity.id, workout_id)


# ── Meals ─────────────────────────────────────────────────────────────────

@router.post(
    "/meals",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing meal name", "model": ErrorResponse}},
    summary="Log a meal",
)
async def create_meal(
    payload: MealInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await meal_service.create(db, identity.id, payload))


@router.delete(
    "/meals/{meal_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a meal",
)
async def delete_meal(
    meal_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await meal_service.delete(db, identity.id, meal_id)
