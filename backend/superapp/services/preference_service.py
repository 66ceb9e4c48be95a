"""
SuperApp Backend — Preference Service
=======================================

What:  Sidebar display mode as explicit application state behind an injected
       persistence boundary.
How:   `PreferenceStore` is the abstract boundary; `DatabasePreferenceStore`
       keeps one `user_preferences` row per user (upsert on user_id).
       `PreferenceService` holds the rules: default mode, valid modes, and the
       cycle order expanded → icons → hidden → expanded.
Who:   routes/preferences.py obtains a store through `get_preference_store`
       (overridable in tests).
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.database import get_db_session
from superapp.exceptions import ValidationError
from superapp.models.preference import SIDEBAR_MODES, UserPreference
from superapp.services.store import run_statement, upsert

logger = logging.getLogger(__name__)

DEFAULT_SIDEBAR_MODE = "expanded"


class PreferenceStore(ABC):
    """Persistence boundary for per-user preferences."""

    @abstractmethod
    async def get_sidebar_mode(self, user_id: uuid.UUID) -> Optional[str]:
        """Stored mode, or None when the user never chose one."""
        ...

    @abstractmethod
    async def set_sidebar_mode(self, user_id: uuid.UUID, mode: str) -> None:
        ...


class DatabasePreferenceStore(PreferenceStore):
    """PreferenceStore backed by the `user_preferences` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_sidebar_mode(self, user_id: uuid.UUID) -> Optional[str]:
        result = await run_statement(
            self.db,
            select(UserPreference.sidebar_mode).where(UserPreference.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def set_sidebar_mode(self, user_id: uuid.UUID, mode: str) -> None:
        await upsert(
            self.db,
            UserPreference,
            {
                "user_id": user_id,
                "sidebar_mode": mode,
                "updated_at": datetime.now(timezone.utc),
            },
            conflict_key=("user_id",),
        )


def get_preference_store(db: AsyncSession = Depends(get_db_session)) -> PreferenceStore:
    """FastAPI dependency for the preference persistence boundary."""
    return DatabasePreferenceStore(db)


def next_sidebar_mode(mode: str) -> str:
    """expanded → icons → hidden → expanded; unknown modes restart the cycle."""
    if mode not in SIDEBAR_MODES:
        return DEFAULT_SIDEBAR_MODE
    return SIDEBAR_MODES[(SIDEBAR_MODES.index(mode) + 1) % len(SIDEBAR_MODES)]


class PreferenceService:
    """Sidebar mode rules over any PreferenceStore."""

    async def get_sidebar_mode(
        self, store: PreferenceStore, user_id: Optional[uuid.UUID]
    ) -> str:
        # Guests always see the default
        if user_id is None:
            return DEFAULT_SIDEBAR_MODE
        mode = await store.get_sidebar_mode(user_id)
        return mode if mode in SIDEBAR_MODES else DEFAULT_SIDEBAR_MODE

    async def set_sidebar_mode(
        self, store: PreferenceStore, user_id: uuid.UUID, mode: str
    ) -> str:
        if mode not in SIDEBAR_MODES:
            raise ValidationError(
                f"Sidebar mode must be one of: {', '.join(SIDEBAR_MODES)}", field="mode"
            )
        await store.set_sidebar_mode(user_id, mode)
        logger.info("Sidebar mode for %s set to %s", user_id, mode)
        return mode

    async def cycle_sidebar_mode(self, store: PreferenceStore, user_id: uuid.UUID) -> str:
        current = await self.get_sidebar_mode(store, user_id)
        return await self.set_sidebar_mode(store, user_id, next_sidebar_mode(current))


# ── Singleton Instance ────────────────────────────────────────────────────
preference_service = PreferenceService()
