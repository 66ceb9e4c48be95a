"""
SuperApp Backend — Finance Models
===================================

What:  `transactions` (income/expense ledger) and `budgets` (monthly limits).

Budgets are keyed by a natural composite key (user, category, month) and are
written with upsert-on-conflict, never by surrogate id. A NULL category is
the overall monthly budget; NULLS NOT DISTINCT makes it unique per month too.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Numeric, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from superapp.database import Base
from superapp.models.base import OwnedRecordMixin


class Transaction(OwnedRecordMixin, Base):
    """A single income or expense entry."""

    __tablename__ = "transactions"

    description: Mapped[str] = mapped_column(String(300), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="expense", server_default=text("'expense'")
    )
    category: Mapped[str] = mapped_column(
        String(50), nullable=False, default="other", server_default=text("'other'")
    )
    transaction_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=text("CURRENT_DATE")
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Budget(OwnedRecordMixin, Base):
    """Monthly spending limit, overall (category NULL) or per category."""

    __tablename__ = "budgets"

    category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    monthly_limit: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    budget_month: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "category",
            "budget_month",
            name="uq_budgets_user_category_month",
            postgresql_nulls_not_distinct=True,
        ),
    )

    # Natural key used as the ON CONFLICT target
    CONFLICT_KEY = ("user_id", "category", "budget_month")
