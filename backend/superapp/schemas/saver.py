"""
SuperApp Backend — Universal Saver Schemas
============================================

What:  The structured object the categorization model must return, plus the
       request/response shapes of the save, list and search endpoints.
How:   `Categorization` is both the validation target for the model's JSON
       reply and the source of truth for the response schema sent to Gemini
       (see GeminiService.RESPONSE_SCHEMA, which mirrors it field for field).
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SavedItemCategory = Literal[
    "person", "task", "note", "link", "idea", "meeting", "project", "reference", "general",
]

TITLE_MAX_CHARS = 80


# ══════════════════════════════════════════════════════════════════════════
# Categorization: the model's structured output
# ══════════════════════════════════════════════════════════════════════════


class CategorizationMetadata(BaseModel):
    content_type: str = Field(description="e.g. 'email', 'meeting notes', 'recipe'")
    sentiment: Optional[Literal["positive", "neutral", "negative"]] = None
    urgency: Optional[Literal["high", "medium", "low"]] = None
    entities: List[str] = Field(default_factory=list)


class Categorization(BaseModel):
    """
    Validated reply of the categorization call.

    Titles longer than 80 characters are clamped instead of rejected; every
    other constraint (category enum, 3-6 tags, metadata enums) is strict.
    """

    title: str = Field(min_length=1)
    summary: str
    category: SavedItemCategory
    tags: List[str] = Field(min_length=3, max_length=6)
    metadata: CategorizationMetadata

    @field_validator("title")
    @classmethod
    def clamp_title(cls, v: str) -> str:
        return v.strip()[:TITLE_MAX_CHARS]


# ══════════════════════════════════════════════════════════════════════════
# Requests
# ══════════════════════════════════════════════════════════════════════════


class SaveItemRequest(BaseModel):
    # Length and blankness are checked by SaverService so the messages match
    raw_text: str = ""


class SearchRequest(BaseModel):
    # Any JSON value is accepted here; SearchService rejects non-strings
    query: Any = None
    category: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Responses
# ══════════════════════════════════════════════════════════════════════════


class SavedItemRecord(BaseModel):
    id: uuid.UUID
    raw_text: str
    title: str
    summary: str
    category: str
    tags: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, row: Any) -> "SavedItemRecord":
        """Build from an ORM SavedItem, whose metadata attribute is `item_metadata`."""
        return cls(
            id=row.id,
            raw_text=row.raw_text,
            title=row.title,
            summary=row.summary,
            category=row.category,
            tags=list(row.tags or []),
            metadata=dict(row.item_metadata or {}),
            created_at=row.created_at,
        )


class SearchResult(SavedItemRecord):
    similarity: float = Field(description="Cosine similarity, 1 - cosine distance")


class SearchResponse(BaseModel):
    results: List[SearchResult]


class SavedItemListResponse(BaseModel):
    items: List[SavedItemRecord]
    next_cursor: Optional[str] = None
    has_more: bool = False
