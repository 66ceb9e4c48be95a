"""
SuperApp Backend — Finance Service
====================================

What:  Transactions (create/delete) and monthly budgets (upsert/delete).

Budgets are written with a single INSERT ... ON CONFLICT on the natural key
(user_id, category, budget_month); setting the same budget twice changes
its limit instead of creating a duplicate.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.middleware.view_invalidation import mark_stale
from superapp.models.finance import Budget, Transaction
from superapp.schemas.finance import (
    BudgetInput,
    BudgetRecord,
    TransactionInput,
    TransactionRecord,
)
from superapp.services.store import delete_owned, insert_returning_id, run_statement, upsert

logger = logging.getLogger(__name__)

FINANCE_VIEW = "/finance"


class FinanceService:
    """Owner-scoped finance operations."""

    async def create_transaction(
        self, db: AsyncSession, user_id: uuid.UUID, payload: TransactionInput
    ) -> uuid.UUID:
        transaction_id = await insert_returning_id(
            db, Transaction, {**payload.values(), "user_id": user_id}
        )
        logger.info("Transaction %s created (%s %.2f)", transaction_id, payload.type, payload.amount)
        # Projects dashboard shows the monthly totals
        mark_stale(FINANCE_VIEW, "/projects")
        return transaction_id

    async def delete_transaction(
        self, db: AsyncSession, user_id: uuid.UUID, transaction_id: uuid.UUID
    ) -> None:
        await delete_owned(db, Transaction, transaction_id, user_id)
        mark_stale(FINANCE_VIEW, "/projects")

    async def upsert_budget(
        self, db: AsyncSession, user_id: uuid.UUID, payload: BudgetInput
    ) -> None:
        await upsert(
            db,
            Budget,
            {**payload.values(), "user_id": user_id},
            conflict_key=Budget.CONFLICT_KEY,
            update_fields=["monthly_limit"],
        )
        logger.info(
            "Budget set for %s (%s): %.2f",
            payload.budget_month.isoformat(),
            payload.category or "overall",
            payload.monthly_limit,
        )
        mark_stale(FINANCE_VIEW)

    async def delete_budget(
        self, db: AsyncSession, user_id: uuid.UUID, budget_id: uuid.UUID
    ) -> None:
        await delete_owned(db, Budget, budget_id, user_id)
        mark_stale(FINANCE_VIEW)

    async def list_transactions(
        self, db: AsyncSession, user_id: uuid.UUID
    ) -> List[TransactionRecord]:
        result = await run_statement(
            db,
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.transaction_date.desc(), Transaction.created_at.desc()),
        )
        return [TransactionRecord.model_validate(t) for t in result.scalars().all()]

    async def list_budgets(self, db: AsyncSession, user_id: uuid.UUID) -> List[BudgetRecord]:
        result = await run_statement(
            db,
            select(Budget)
            .where(Budget.user_id == user_id)
            .order_by(Budget.budget_month.desc()),
        )
        return [BudgetRecord.model_validate(b) for b in result.scalars().all()]


# ── Singleton Instance ────────────────────────────────────────────────────
finance_service = FinanceService()
