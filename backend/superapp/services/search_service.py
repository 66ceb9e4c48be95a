"""
SuperApp Backend — Search Service (Semantic Search over Saved Items)
======================================================================

What:  Finds the caller's saved items most similar to a free-text query.
How:   Embeds the query with the SAME model used at save time, then calls the
       store function `search_saved_items`, which ranks by cosine similarity
       (1 - (embedding <=> q)), drops rows under the threshold and caps the
       count.

Category filter:
    Applied AFTER the store returns its capped, ranked list, preserving order.
    A category whose items all rank below the top `match_count` overall
    therefore returns nothing even when matches exist further down.

Errors:
    Missing, non-string or blank query → ValidationError "Query is required"
    Anything after validation          → SearchFailedError "Search failed"
"""

import logging
import time
import uuid
from typing import Any, List, Optional

from pgvector.sqlalchemy import Vector
from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.config import settings
from superapp.exceptions import SearchFailedError, ValidationError
from superapp.schemas.saver import SearchResponse, SearchResult
from superapp.services.llm_base import TASK_QUERY, LLMService

logger = logging.getLogger(__name__)

SEARCH_SQL = text(
    "SELECT id, raw_text, title, summary, category, tags, metadata, created_at, similarity "
    "FROM search_saved_items(:query_embedding, :match_user_id, :match_count, :match_threshold)"
).bindparams(bindparam("query_embedding", type_=Vector(settings.embedding_dimensions)))


def filter_by_category(results: List[SearchResult], category: Optional[str]) -> List[SearchResult]:
    """Keep results in `category`, in their ranked order. None or "all" keeps everything."""
    if not category or category == "all":
        return list(results)
    return [r for r in results if r.category == category]


class SearchService:
    """Semantic search over the caller's saved items."""

    async def search(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        query: Any,
        category: Optional[str],
        llm: LLMService,
    ) -> SearchResponse:
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("Query is required", field="query")

        start_time = time.time()
        try:
            vector = await llm.embed(query, TASK_QUERY)
            result = await db.execute(
                SEARCH_SQL,
                {
                    "query_embedding": vector,
                    "match_user_id": user_id,
                    "match_count": settings.search_match_count,
                    "match_threshold": settings.search_match_threshold,
                },
            )
            ranked = [SearchResult(**row) for row in result.mappings().all()]
        except Exception as e:
            logger.error("Search failed: %s", str(e), exc_info=True)
            raise SearchFailedError(context={"error_type": type(e).__name__})

        results = filter_by_category(ranked, category)
        logger.info(
            "Search returned %d/%d results (category=%s) in %.0fms",
            len(results),
            len(ranked),
            category or "all",
            (time.time() - start_time) * 1000,
        )
        return SearchResponse(results=results)


# ── Singleton Instance ────────────────────────────────────────────────────
search_service = SearchService()
