"""
SuperApp Backend — Wellness Route Handlers
============================================

What:  Daily mood check-ins. One entry per user per day.
How:   `PUT /api/mood-entries` is an upsert on (user, entry_date): checking in
       twice on the same day replaces the first entry. Editing an older entry
       by id goes through `PUT /api/mood-entries/{id}`.
Who:   Called by the frontend Wellness page.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import ErrorResponse
from superapp.schemas.wellness import MoodEntryInput, MoodEntryUpdateInput
from superapp.services.wellness_service import wellness_service

router = APIRouter(prefix="/api", tags=["Wellness"])


@router.put(
    "/mood-entries",
    status_code=204,
    response_class=Response,
    responses={400: {"description": "Mood missing or outside 1-5", "model": ErrorResponse}},
    summary="Check in for a day",
)
async def upsert_mood_entry(
    payload: MoodEntryInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await wellness_service.upsert_entry(db, identity.id, payload)


@router.put(
    "/mood-entries/{entry_id}",
    status_code=204,
    response_class=Response,
    summary="Edit a mood entry",
    description="Changes the scores, notes and tags. The entry keeps its date.",
)
async def update_mood_entry(
    entry_id: uuid.UUID,
    payload: MoodEntryUpdateInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await wellness_service.update_entry(db, identity.id, entry_id, payload)


@router.delete(
    "/mood-entries/{entry_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a mood entry",
)
async def delete_mood_entry(
    entry_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await wellness_service.delete_entry(db, identity.id, entry_id)
