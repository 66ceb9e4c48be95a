"""
SuperApp Backend — Contact Route Handlers
===========================================

What:  CRUD for CRM contacts, the contact list used by pickers, and the
       contact detail view (a contact plus its linked tasks).
How:   Validates the body against ContactInput, resolves the caller, and
       delegates to ContactService. Handlers stay thin.
Who:   Called by the frontend Projects page and contact detail page.

Auth:
    Every endpoint here needs a session. Mutations fail with 401 before any
    store access. `GET /api/contacts` is the exception in shape only: it
    always answers with a JSON array, so a picker never has to branch on an
    error body.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, get_identity, require_identity
from superapp.database import get_db_session
from superapp.exceptions import SuperAppError
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.contacts import ContactDetailResponse, ContactInput, ContactRecord
from superapp.services.contact_service import contact_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Contacts"])


@router.post(
    "/contacts",
    status_code=201,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Missing or invalid field", "model": ErrorResponse},
        401: {"description": "Not authenticated", "model": ErrorResponse},
    },
    summary="Create a contact",
)
async def create_contact(
    payload: ContactInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    contact_id = await contact_service.create(db, identity.id, payload)
    return CreatedResponse(id=contact_id)


@router.get(
    "/contacts",
    response_model=list[ContactRecord],
    summary="List the caller's contacts",
    description=(
        "Always returns a JSON array. Without a session the array is empty and the "
        "status is 401; on a store failure it is empty and the status is 500."
    ),
)
async def list_contacts(
    identity: Identity | None = Depends(get_identity),
    db: AsyncSession = Depends(get_db_session),
):
    if identity is None:
        return JSONResponse(status_code=401, content=[])

    try:
        contacts = await contact_service.list_contacts(db, identity.id)
    except SuperAppError as e:
        logger.error("Listing contacts failed: %s", e.message)
        return JSONResponse(status_code=500, content=[])

    return contacts


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactDetailResponse,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
    },
    summary="Get a contact and its tasks",
)
async def get_contact(
    contact_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> ContactDetailResponse:
    return await contact_service.get_detail(db, identity.id, contact_id)


@router.put(
    "/contacts/{contact_id}",
    status_code=204,
    response_class=Response,
    summary="Update a contact",
)
async def update_contact(
    contact_id: uuid.UUID,
    payload: ContactInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await contact_service.update(db, identity.id, contact_id, payload)


@router.delete(
    "/contacts/{contact_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a contact",
    description="Linked tasks are kept and unassigned. Deleting a missing id is a no-op.",
)
async def delete_contact(
    contact_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await contact_service.delete(db, identity.id, contact_id)
