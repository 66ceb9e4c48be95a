"""
SuperApp Backend — Saved Item Model (Universal Saver)
=======================================================

What:  ORM model for `saved_items`: free text the user pasted, the structured
       metadata the model extracted from it, and its embedding vector.
How:   The embedding column is a pgvector `vector(N)`; N comes from
       EMBEDDING_DIMENSIONS and must match the migration.
Who:   Written by SaverService; read by the store-backed data source. Similarity
       search goes through the `search_saved_items` SQL function instead of
       the ORM (see SearchService).

Lifecycle:
    1. Created once, after categorization and embedding both succeed
    2. Never updated; deleting is the only mutation
"""

from typing import Any, Dict, List, Optional

from pgvector.sqlalchemy import Vector
from sqlalchemy import Index, String, Text, text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from superapp.config import settings
from superapp.database import Base
from superapp.models.base import OwnedRecordMixin

# Fixed taxonomy the categorization model must choose from
SAVED_ITEM_CATEGORIES = (
    "person",
    "task",
    "note",
    "link",
    "idea",
    "meeting",
    "project",
    "reference",
    "general",
)


class SavedItem(OwnedRecordMixin, Base):
    """A categorized, embedded piece of saved text."""

    __tablename__ = "saved_items"

    raw_text: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(String(80), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    tags: Mapped[List[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list, server_default=text("'{}'")
    )

    # "metadata" is reserved on declarative classes; the column keeps its name
    item_metadata: Mapped[Dict[str, Any]] = mapped_column(
        "metadata", JSONB, nullable=False, default=dict, server_default=text("'{}'::jsonb")
    )

    embedding: Mapped[Optional[List[float]]] = mapped_column(
        Vector(settings.embedding_dimensions), nullable=True
    )

    __table_args__ = (
        Index("idx_saved_items_user_created_at", "user_id", "created_at"),
        Index("idx_saved_items_user_category", "user_id", "category"),
    )

    def __repr__(self) -> str:
        return f"<SavedItem(id={self.id}, category='{self.category}', title='{self.title[:30]}')>"
