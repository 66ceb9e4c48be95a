"""
SuperApp Backend — Travel Route Handlers
==========================================

What:  Trips, their itinerary activities, and their expenses.
How:   Three resources with the same shape (create / update / delete). An
       activity or expense names its trip on create; updates never move it
       to another trip. Deleting a trip removes its activities and expenses.
Who:   Called by the frontend Travel page.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.travel import (
    ActivityInput,
    ActivityUpdateInput,
    ExpenseInput,
    ExpenseUpdateInput,
    TripInput,
)
from superapp.services.travel_service import travel_service

router = APIRouter(prefix="/api", tags=["Travel"])


# ── Trips ─────────────────────────────────────────────────────────────────

@router.post(
    "/trips",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing destination", "model": ErrorResponse}},
    summary="Plan a trip",
)
async def create_trip(
    payload: TripInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await travel_service.create_trip(db, identity.id, payload))


@router.put("/trips/{trip_id}", status_code=204, response_class=Response, summary="Update a trip")
async def update_trip(
    trip_id: uuid.UUID,
    payload: TripInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.update_trip(db, identity.id, trip_id, payload)


@router.delete("/trips/{trip_id}", status_code=204, response_class=Response, summary="Delete a trip")
async def delete_trip(
    trip_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.delete_trip(db, identity.id, trip_id)


# ── Activities ────────────────────────────────────────────────────────────

@router.post(
    "/trip-activities",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing trip or title", "model": ErrorResponse}},
    summary="Add an itinerary activity",
)
async def create_activity(
    payload: ActivityInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await travel_service.create_activity(db, identity.id, payload))


@router.put(
    "/trip-activities/{activity_id}",
    status_code=204,
    response_class=Response,
    summary="Update an activity",
)
async def update_activity(
    activity_id: uuid.UUID,
    payload: ActivityUpdateInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.update_activity(db, identity.id, activity_id, payload)


@router.delete(
    "/trip-activities/{activity_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an activity",
)
async def delete_activity(
    activity_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.delete_activity(db, identity.id, activity_id)


# ── Expenses ──────────────────────────────────────────────────────────────

@router.post(
    "/trip-expenses",
    status_code=201,
    response_model=CreatedResponse,
    responses={400: {"description": "Missing trip, title or amount", "model": ErrorResponse}},
    summary="Record a trip expense",
)
async def create_expense(
    payload: ExpenseInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await travel_service.create_expense(db, identity.id, payload))


@router.put(
    "/trip-expenses/{expense_id}",
    status_code=204,
    response_class=Response,
    summary="Update an expense",
)
async def update_expense(
    expense_id: uuid.UUID,
    payload: ExpenseUpdateInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.update_expense(db, identity.id, expense_id, payload)


@router.delete(
    "/trip-expenses/{expense_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an expense",
)
async def delete_expense(
    expense_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await travel_service.delete_expense(db, identity.id, expense_id)
