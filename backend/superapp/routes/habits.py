"""
SuperApp Backend — Habit Route Handlers
=========================================

What:  Habit CRUD plus the two ways of recording a day:
         - POST /api/habits/{id}/toggle       boolean habits (done / not done)
         - PUT  /api/habits/{id}/completions  counted habits (glasses, steps)
How:   The toggle reads the current state from the store, so two clicks on
       the same day always end where they started.
Who:   Called by the frontend Habits page.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.habits import (
    CompletionToggleInput,
    CompletionValueInput,
    HabitInput,
    ToggleResponse,
)
from superapp.services.habit_service import habit_service

router = APIRouter(prefix="/api", tags=["Habits"])


@router.post(
    "/habits",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing habit name", "model": ErrorResponse}},
    summary="Create a habit",
)
async def create_habit(
    payload: HabitInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await habit_service.create(db, identity.id, payload))


@router.put(
    "/habits/{habit_id}",
    status_code=204,
    response_class=Response,
    summary="Update a habit",
)
async def update_habit(
    habit_id: uuid.UUID,
    payload: HabitInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await habit_service.update(db, identity.id, habit_id, payload)


@router.delete(
    "/habits/{habit_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a habit and its history",
)
async def delete_habit(
    habit_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await habit_service.delete(db, identity.id, habit_id)


@router.post(
    "/habits/{habit_id}/toggle",
    response_model=ToggleResponse,
    responses={404: {"description": "Habit not found", "model": ErrorResponse}},
    summary="Toggle a day's completion",
)
async def toggle_completion(
    habit_id: uuid.UUID,
    payload: CompletionToggleInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> ToggleResponse:
    """Returns `completed: true` when the day is now marked done."""
    completed = await habit_service.toggle_completion(
        db, identity.id, habit_id, payload.completion_date
    )
    return ToggleResponse(completed=completed)


@router.put(
    "/habits/{habit_id}/completions",
    status_code=204,
    response_class=Response,
    summary="Set a day's count",
    description="A value of zero or less clears the day.",
)
async def set_completion_value(
    habit_id: uuid.UUID,
    payload: CompletionValueInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await habit_service.set_completion_value(
        db, identity.id, habit_id, payload.completion_date, payload.value
    )
