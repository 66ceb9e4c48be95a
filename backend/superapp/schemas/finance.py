"""
SuperApp Backend — Finance Schemas
====================================

What:  Transaction and budget inputs plus their records.

Budget category:
    The form sends "overall" for the total monthly budget. It is stored as
    NULL so the unique (user, category, month) key treats it as one slot.
"""

import uuid
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from superapp.schemas.common import FormInput, parse_number

TransactionType = Literal["income", "expense"]


def first_of_month(today: Optional[date] = None) -> date:
    today = today or date.today()
    return today.replace(day=1)


class TransactionInput(FormInput):
    required_fields: ClassVar[Dict[str, str]] = {
        "description": "Description is required",
        "amount": "Valid amount is required",
    }

    description: str
    amount: float
    type: TransactionType = "expense"
    category: str = "other"
    transaction_date: date = Field(default_factory=date.today)
    notes: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def amount_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Valid amount is required")


class BudgetInput(FormInput):
    """Upsert a monthly budget. Omitted month means the current one."""

    required_fields: ClassVar[Dict[str, str]] = {
        "monthly_limit": "Valid budget amount is required",
    }

    category: Optional[str] = None
    monthly_limit: float
    budget_month: date = Field(default_factory=first_of_month)

    @field_validator("monthly_limit", mode="before")
    @classmethod
    def limit_is_number(cls, v: Any) -> Any:
        return parse_number(v, "Valid budget amount is required")

    @field_validator("category")
    @classmethod
    def overall_is_null(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v.strip().lower() == "overall":
            return None
        return v

    @field_validator("budget_month")
    @classmethod
    def normalize_month(cls, v: date) -> date:
        return v.replace(day=1)


class TransactionRecord(BaseModel):
    id: uuid.UUID
    description: str
    amount: float
    type: str
    category: str
    transaction_date: date
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BudgetRecord(BaseModel):
    id: uuid.UUID
    category: Optional[str] = None
    monthly_limit: float
    budget_month: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
