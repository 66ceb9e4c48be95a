"""
SuperApp Backend — Task Route Handlers
========================================

What:  Create tasks, move them between todo / in_progress / done, delete them.
Who:   Called by the frontend Projects board.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.contacts import TaskInput, TaskStatusInput
from superapp.services.task_service import task_service

router = APIRouter(prefix="/api", tags=["Tasks"])


@router.post(
    "/tasks",
    status_code=201,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Missing title", "model": ErrorResponse},
        401: {"description": "Not authenticated", "model": ErrorResponse},
    },
    summary="Create a task",
)
async def create_task(
    payload: TaskInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return CreatedResponse(id=await task_service.create(db, identity.id, payload))


@router.patch(
    "/tasks/{task_id}/status",
    status_code=204,
    response_class=Response,
    summary="Change a task's status",
)
async def update_task_status(
    task_id: uuid.UUID,
    payload: TaskStatusInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await task_service.update_status(db, identity.id, task_id, payload)


@router.delete(
    "/tasks/{task_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a task",
)
async def delete_task(
    task_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await task_service.delete(db, identity.id, task_id)
