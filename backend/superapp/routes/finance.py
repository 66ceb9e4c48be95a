"""
SuperApp Backend — Finance Route Handlers
===========================================

What:  Income/expense transactions and monthly budgets.
How:   Transactions are plain inserts. Budgets are keyed by
       (user, category, month), so `PUT /api/budgets` is an upsert: setting
       the same month and category twice replaces the limit.
Who:   Called by the frontend Finance page.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import CreatedResponse, ErrorResponse
from superapp.schemas.finance import BudgetInput, TransactionInput
from superapp.services.finance_service import finance_service

router = APIRouter(prefix="/api", tags=["Finance"])


@router.post(
    "/transactions",
    status_code=201,
    response_model=CreatedResponse,
    responses={
        400: {"description": "Missing description or invalid amount", "model": ErrorResponse},
        401: {"description": "Not authenticated", "model": ErrorResponse},
    },
    summary="Record a transaction",
)
async def create_transaction(
    payload: TransactionInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    transaction_id = await finance_service.create_transaction(db, identity.id, payload)
    return CreatedResponse(id=transaction_id)


@router.delete(
    "/transactions/{transaction_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a transaction",
)
async def delete_transaction(
    transaction_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await finance_service.delete_transaction(db, identity.id, transaction_id)


@router.put(
    "/budgets",
    status_code=204,
    response_class=Response,
    responses={400: {"description": "Invalid budget amount", "model": ErrorResponse}},
    summary="Set a monthly budget",
    description=(
        "Creates or replaces the limit for a category and month. Use category "
        "'overall' (or omit it) for the whole-month budget."
    ),
)
async def upsert_budget(
    payload: BudgetInput,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await finance_service.upsert_budget(db, identity.id, payload)


@router.delete(
    "/budgets/{budget_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a budget",
)
async def delete_budget(
    budget_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await finance_service.delete_budget(db, identity.id, budget_id)
