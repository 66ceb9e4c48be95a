"""
SuperApp Backend — Demo Data Route
====================================

What:  POST /api/demo/seed fills an empty account with sample contacts and tasks.
Who:   Called by the "Load demo data" button on an empty Projects page.

Seeding is one-shot: a caller who already owns a contact gets 400 and
nothing is inserted.
"""

from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import ErrorResponse
from superapp.services.seed_service import seed_service

router = APIRouter(prefix="/api", tags=["Demo"])


@router.post(
    "/demo/seed",
    status_code=201,
    response_model=Dict[str, int],
    responses={
        400: {"description": "Caller already has contacts", "model": ErrorResponse},
        401: {"description": "Not authenticated", "model": ErrorResponse},
    },
    summary="Seed demo contacts and tasks",
)
async def seed_demo_data(
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, int]:
    return await seed_service.seed(db, identity.id)
