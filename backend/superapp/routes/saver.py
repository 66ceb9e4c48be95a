"""
SuperApp Backend — Universal Saver Route Handlers
===================================================

What:  Save free text (the model picks title, category, tags and metadata),
       browse saved items, delete them, and search them by meaning.
How:   Thin handlers over SaverService and SearchService. The LLM service is
       injected so tests can substitute a fake.
Who:   Called by the frontend Universal Saver page and the search box on
       the Saved page.

Request Flow (POST /api/saver/items):
    1. Validate length (1..50,000 chars), before any external call
    2. Categorize with Gemini (structured JSON reply)
    3. Embed "title\\nsummary\\ntext" with the embedding model
    4. Insert one row; return it (201)

Error responses (handled by global exception handlers):
    HTTP 400: blank or too-long text / blank search query
    HTTP 401: no session
    HTTP 502: model reply did not match the categorization schema
    HTTP 500: anything else ("An unexpected error occurred. Please try again.")
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.auth import Identity, require_identity
from superapp.database import get_db_session
from superapp.schemas.common import ErrorResponse
from superapp.schemas.saver import (
    SavedItemListResponse,
    SavedItemRecord,
    SaveItemRequest,
    SearchRequest,
    SearchResponse,
)
from superapp.services.gemini_service import get_llm_service
from superapp.services.llm_base import LLMService
from superapp.services.saver_service import saver_service
from superapp.services.search_service import search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Universal Saver"])


@router.post(
    "/saver/items",
    status_code=201,
    response_model=SavedItemRecord,
    responses={
        400: {"description": "Empty or too-long content", "model": ErrorResponse},
        401: {"description": "Not authenticated", "model": ErrorResponse},
        502: {"description": "Categorization failed", "model": ErrorResponse},
        500: {"description": "Save failed", "model": ErrorResponse},
    },
    summary="Save and auto-categorize a piece of text",
)
async def save_item(
    payload: SaveItemRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    llm: LLMService = Depends(get_llm_service),
) -> SavedItemRecord:
    logger.info("Received save request: %d chars", len(payload.raw_text))
    return await saver_service.save_item(db, identity.id, payload.raw_text, llm)


@router.get(
    "/saver/items",
    response_model=SavedItemListResponse,
    summary="List saved items with pagination",
)
async def list_items(
    category: str | None = Query(
        default=None, description="Only this category ('all' or omitted for every category)"
    ),
    cursor: str | None = Query(
        default=None,
        description="ISO 8601 created_at of the last item from the previous page",
    ),
    limit: int = Query(default=20, ge=1, le=100),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> SavedItemListResponse:
    """
    Example client usage (infinite scroll):
        Page 1: GET /api/saver/items?limit=20
        Page 2: GET /api/saver/items?limit=20&cursor=2026-01-15T12:00:00+00:00
    """
    return await saver_service.list_items(
        db, identity.id, category=category, cursor=cursor, limit=limit
    )


@router.delete(
    "/saver/items/{item_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a saved item",
)
async def delete_item(
    item_id: uuid.UUID,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
) -> None:
    await saver_service.delete_item(db, identity.id, item_id)


@router.post(
    "/saved-items/search",
    response_model=SearchResponse,
    responses={
        400: {"description": "Query is required", "model": ErrorResponse},
        500: {"description": "Search failed", "model": ErrorResponse},
    },
    summary="Semantic search over saved items",
    description=(
        "Embeds the query and returns up to 20 saved items with cosine similarity "
        "of at least 0.3, best match first. A category other than 'all' filters "
        "that ranked list."
    ),
)
async def search_items(
    payload: SearchRequest,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db_session),
    llm: LLMService = Depends(get_llm_service),
) -> SearchResponse:
    return await search_service.search(db, identity.id, payload.query, payload.category, llm)
