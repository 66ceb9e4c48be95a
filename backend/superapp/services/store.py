"""
SuperApp Backend — Store Statement Helpers
============================================

What:  The handful of statement shapes every module service issues: insert,
       owner-scoped update, owner-scoped delete, and upsert on a natural key.
How:   Each helper builds exactly ONE statement and runs it through
       `run_statement`, which turns any SQLAlchemyError into StoreError with
       the driver's own message.
Who:   Used by every CRUD service and by the saver/seed services.

Owner scoping:
    Updates and deletes always filter on BOTH the record id and user_id.
    A row owned by someone else is indistinguishable from a missing row,
    and both are a silent no-op.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, Optional, Sequence, Type

from sqlalchemy import delete, insert, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from superapp.exceptions import StoreError

logger = logging.getLogger(__name__)


def store_message(exc: SQLAlchemyError) -> str:
    """The driver's error text, without SQLAlchemy's statement/parameter dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def run_statement(db: AsyncSession, statement: Executable) -> Result:
    """
    Execute one statement, mapping store failures to StoreError.

    Raises:
        StoreError: message is the store's error text, verbatim
    """
    try:
        return await db.execute(statement)
    except SQLAlchemyError as e:
        message = store_message(e)
        logger.error("Store statement failed: %s", message)
        raise StoreError(message=message, context={"error_type": type(e).__name__})


async def insert_returning_id(
    db: AsyncSession,
    model: Type[Any],
    values: Dict[str, Any],
) -> uuid.UUID:
    """INSERT one row and return its server-generated id."""
    statement = insert(model).values(**values).returning(model.id)
    result = await run_statement(db, statement)
    return result.scalar_one()


async def update_owned(
    db: AsyncSession,
    model: Type[Any],
    record_id: uuid.UUID,
    user_id: uuid.UUID,
    values: Dict[str, Any],
) -> int:
    """UPDATE one owned row; returns the number of rows changed (0 or 1)."""
    statement = (
        update(model)
        .where(model.id == record_id, model.user_id == user_id)
        .values(**values)
    )
    result = await run_statement(db, statement)
    return result.rowcount


async def delete_owned(
    db: AsyncSession,
    model: Type[Any],
    record_id: uuid.UUID,
    user_id: uuid.UUID,
) -> int:
    """DELETE one owned row. Deleting a missing id is a no-op returning 0."""
    statement = delete(model).where(model.id == record_id, model.user_id == user_id)
    result = await run_statement(db, statement)
    return result.rowcount


def build_upsert(
    model: Type[Any],
    values: Dict[str, Any],
    conflict_key: Sequence[str],
    update_fields: Optional[Iterable[str]] = None,
):
    """
    INSERT ... ON CONFLICT (<conflict_key>) DO UPDATE SET <update_fields>.

    `update_fields` defaults to every supplied column outside the key.
    """
    statement = pg_insert(model).values(**values)
    fields = update_fields if update_fields is not None else [
        name for name in values if name not in conflict_key
    ]
    return statement.on_conflict_do_update(
        index_elements=list(conflict_key),
        set_={name: statement.excluded[name] for name in fields},
    )


async def upsert(
    db: AsyncSession,
    model: Type[Any],
    values: Dict[str, Any],
    conflict_key: Sequence[str],
    update_fields: Optional[Iterable[str]] = None,
) -> None:
    """Run the single upsert statement produced by `build_upsert`."""
    await run_statement(db, build_upsert(model, values, conflict_key, update_fields))
