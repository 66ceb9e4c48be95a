"""
SuperApp Backend — Sidebar Preference Tests
=============================================

What we test:
    ✅ The cycle order expanded → icons → hidden → expanded
    ✅ Guests and first-time users see the default mode
    ✅ Unknown modes are rejected before anything is stored
    ✅ Cycling persists the next mode through the store boundary
"""

import uuid
from typing import Dict, Optional

import pytest

from superapp.exceptions import ValidationError
from superapp.services.preference_service import (
    DEFAULT_SIDEBAR_MODE,
    PreferenceStore,
    next_sidebar_mode,
    preference_service,
)


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self):
        self.modes: Dict[uuid.UUID, str] = {}

    async def get_sidebar_mode(self, user_id: uuid.UUID) -> Optional[str]:
        return self.modes.get(user_id)

    async def set_sidebar_mode(self, user_id: uuid.UUID, mode: str) -> None:
        self.modes[user_id] = mode


@pytest.fixture
def store():
    return InMemoryPreferenceStore()


@pytest.mark.parametrize(
    "current, expected",
    [
        ("expanded", "icons"),
        ("icons", "hidden"),
        ("hidden", "expanded"),
        ("sideways", "expanded"),
    ],
)
def test_next_sidebar_mode(current, expected):
    assert next_sidebar_mode(current) == expected


async def test_guest_sees_default(store):
    assert await preference_service.get_sidebar_mode(store, None) == DEFAULT_SIDEBAR_MODE


async def test_unset_mode_is_default(store, user_id):
    assert await preference_service.get_sidebar_mode(store, user_id) == "expanded"


async def test_invalid_mode_is_rejected(store, user_id):
    with pytest.raises(ValidationError) as exc_info:
        await preference_service.set_sidebar_mode(store, user_id, "floating")

    assert exc_info.value.field == "mode"
    assert store.modes == {}


async def test_cycle_persists_each_step(store, user_id):
    seen = [await preference_service.cycle_sidebar_mode(store, user_id) for _ in range(3)]

    assert seen == ["icons", "hidden", "expanded"]
    assert store.modes[user_id] == "expanded"
