"""
SuperApp Backend — Saver Service (Universal Saver Orchestrator)
=================================================================

What:  Turns pasted free text into a categorized, embedded `saved_items` row,
       and serves the saver's list/count/delete operations.
How:   Composes the LLM service (categorize + embed) and one INSERT.
Who:   Called by routes/saver.py and the store-backed data source.

Save Flow (POST /api/saver/items):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ Validate │───▶│  Categorize  │───▶│    Embed     │───▶│  INSERT  │
    │  (local) │    │   (Gemini)   │    │   (Gemini)   │    │  (store) │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘

    Validate fails    → ValidationError (400), no model call made
    Categorize fails  → CategorizationError (502), nothing persisted
    Anything else     → SaveFailedError (500), nothing persisted

    The INSERT is the only write, so a failure at any step leaves no row.
"""

import logging
import time
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.config import settings
from superapp.exceptions import CategorizationError, SaveFailedError, ValidationError
from superapp.middleware.view_invalidation import mark_stale
from superapp.models.saved_item import SavedItem
from superapp.schemas.saver import Categorization, SavedItemListResponse, SavedItemRecord
from superapp.services.llm_base import TASK_DOCUMENT, LLMService
from superapp.services.store import delete_owned, insert_returning_id, run_statement

logger = logging.getLogger(__name__)

SAVER_VIEWS = ("/saver", "/saved")


def build_embedding_input(categorization: Categorization, raw_text: str) -> str:
    """Title, summary and the head of the raw text, newline separated."""
    head = raw_text[: settings.embedding_input_chars]
    return f"{categorization.title}\n{categorization.summary}\n{head}"


class SaverService:
    """Business logic for the Universal Saver."""

    def validate_raw_text(self, raw_text: Optional[str]) -> str:
        """
        Reject blank or oversized input before any external call.

        Exactly `saver_max_chars` characters is accepted.
        """
        text = raw_text or ""
        if not text.strip():
            raise ValidationError("Please enter some content to save", field="raw_text")
        if len(text) > settings.saver_max_chars:
            raise ValidationError(
                f"Content is too long. Please limit to {settings.saver_max_chars:,} characters.",
                field="raw_text",
                context={"length": len(text)},
            )
        return text

    async def save_item(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        raw_text: Optional[str],
        llm: LLMService,
    ) -> SavedItemRecord:
        """
        Categorize, embed and persist `raw_text`.

        Returns:
            The stored item (without its embedding).

        Raises:
            ValidationError: blank or too long (nothing called, nothing stored)
            CategorizationError: model reply missing or non-conforming
            SaveFailedError: embedding or insert failed
        """
        text = self.validate_raw_text(raw_text)
        start_time = time.time()

        try:
            categorization = await llm.categorize(text)
            vector = await llm.embed(build_embedding_input(categorization, text), TASK_DOCUMENT)

            values = {
                "user_id": user_id,
                "raw_text": text,
                "title": categorization.title,
                "summary": categorization.summary,
                "category": categorization.category,
                "tags": categorization.tags,
                "item_metadata": categorization.metadata.model_dump(),
                "embedding": vector,
            }
            item_id = await insert_returning_id(db, SavedItem, values)
        except CategorizationError:
            raise
        except Exception as e:
            logger.error("Saving item failed: %s", str(e), exc_info=True)
            raise SaveFailedError(context={"error_type": type(e).__name__})

        logger.info(
            "Saved item %s as '%s' in %.0fms",
            item_id,
            categorization.category,
            (time.time() - start_time) * 1000,
        )
        mark_stale(*SAVER_VIEWS)

        return SavedItemRecord(
            id=item_id,
            raw_text=text,
            title=categorization.title,
            summary=categorization.summary,
            category=categorization.category,
            tags=categorization.tags,
            metadata=values["item_metadata"],
            created_at=datetime.now().astimezone(),
        )

    async def delete_item(self, db: AsyncSession, user_id: uuid.UUID, item_id: uuid.UUID) -> None:
        await delete_owned(db, SavedItem, item_id, user_id)
        mark_stale(*SAVER_VIEWS)

    async def list_items(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        category: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: int = 20,
    ) -> SavedItemListResponse:
        """
        Newest-first page of saved items.

        Pagination is cursor-based on created_at: the client passes back
        `next_cursor` (ISO datetime of the last item) to get the next page.
        An unparseable cursor starts from the beginning.
        """
        query = select(SavedItem).where(SavedItem.user_id == user_id)

        if category and category != "all":
            query = query.where(SavedItem.category == category)

        if cursor:
            try:
                cursor_dt = datetime.fromisoformat(cursor)
            except ValueError:
                cursor_dt = None
            if cursor_dt:
                query = query.where(SavedItem.created_at < cursor_dt)

        # One extra row tells us whether another page exists
        query = query.order_by(SavedItem.created_at.desc()).limit(limit + 1)

        result = await run_statement(db, query)
        rows = list(result.scalars().all())

        has_more = len(rows) > limit
        rows = rows[:limit]
        next_cursor = rows[-1].created_at.isoformat() if has_more and rows else None

        return SavedItemListResponse(
            items=[SavedItemRecord.from_row(row) for row in rows],
            next_cursor=next_cursor,
            has_more=has_more,
        )

    async def recent_items(
        self, db: AsyncSession, user_id: uuid.UUID, limit: int = 5
    ) -> List[SavedItemRecord]:
        page = await self.list_items(db, user_id, limit=limit)
        return page.items

    async def all_items(self, db: AsyncSession, user_id: uuid.UUID) -> List[SavedItemRecord]:
        result = await run_statement(
            db,
            select(SavedItem)
            .where(SavedItem.user_id == user_id)
            .order_by(SavedItem.created_at.desc()),
        )
        return [SavedItemRecord.from_row(row) for row in result.scalars().all()]

    async def category_counts(self, db: AsyncSession, user_id: uuid.UUID) -> Dict[str, int]:
        """Number of saved items per category (categories with none are omitted)."""
        result = await run_statement(
            db,
            select(SavedItem.category, func.count(SavedItem.id))
            .where(SavedItem.user_id == user_id)
            .group_by(SavedItem.category),
        )
        return {category: count for category, count in result.all()}


# ── Singleton Instance ────────────────────────────────────────────────────
saver_service = SaverService()
