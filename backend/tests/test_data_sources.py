"""
SuperApp Backend — Page Data Source Tests
===========================================

What:  The read boundary behind GET /api/<module>.
How:   StaticDataSource is exercised directly. StoreDataSource gets a fake
       session factory and patched service reads, so no database is needed.

What we test:
    ✅ One source per request: guests get static data, identities the store
    ✅ Static bundles are flagged is_guest and link records by stable ids
    ✅ Store reads run owner-scoped, each on its own session
    ✅ A failing store read surfaces instead of falling back to guest data
"""

from contextlib import asynccontextmanager
from datetime import date
from unittest.mock import AsyncMock

import pytest

from superapp.exceptions import StoreError
from superapp.services import guest_data
from superapp.services.contact_service import contact_service
from superapp.services.data_sources import (
    RECENT_ITEMS_LIMIT,
    StaticDataSource,
    StoreDataSource,
    select_data_source,
    static_data_source,
)
from superapp.services.saver_service import saver_service
from superapp.services.task_service import task_service


@pytest.fixture
def sessions():
    return []


@pytest.fixture
def session_factory(sessions):
    """Stands in for async_sessionmaker: each call yields a fresh mock session."""

    @asynccontextmanager
    async def factory():
        session = AsyncMock()
        sessions.append(session)
        yield session

    return factory


# ══════════════════════════════════════════════════════════════════════════
# Source selection
# ══════════════════════════════════════════════════════════════════════════


async def test_guest_gets_static_source():
    source = await select_data_source(identity=None)

    assert source is static_data_source
    assert source.is_guest is True


async def test_identity_gets_store_source(identity, user_id):
    source = await select_data_source(identity=identity)

    assert isinstance(source, StoreDataSource)
    assert source.user_id == user_id
    assert source.is_guest is False


# ══════════════════════════════════════════════════════════════════════════
# Static data
# ══════════════════════════════════════════════════════════════════════════


class TestStaticDataSource:

    async def test_projects_link_tasks_to_contacts(self):
        page = await StaticDataSource().projects()

        assert page.is_guest is True
        contact_ids = {c.id for c in page.contacts}
        linked = [t for t in page.tasks if t.contact_id is not None]
        assert linked
        assert all(t.contact_id in contact_ids for t in linked)
        assert all(t.contact_name for t in linked)
        assert len(page.contact_options) == len(page.contacts)

    async def test_saver_counts_match_items(self):
        page = await StaticDataSource().saver()

        assert sum(page.category_counts.values()) == len(page.items)
        assert len(page.recent_items) <= RECENT_ITEMS_LIMIT
        created = [item.created_at for item in page.items]
        assert created == sorted(created, reverse=True)

    async def test_habit_completions_reference_habits(self):
        page = await StaticDataSource().habits()

        habit_ids = {h.id for h in page.habits}
        assert page.completions
        assert {c.habit_id for c in page.completions} <= habit_ids

    async def test_travel_children_reference_trips(self):
        page = await StaticDataSource().travel()

        trip_ids = {t.id for t in page.trips}
        assert {a.trip_id for a in page.activities} <= trip_ids
        assert {e.trip_id for e in page.expenses} <= trip_ids

    def test_guest_ids_are_stable(self):
        assert guest_data.guest_id("c1") == guest_data.guest_id("c1")
        assert guest_data.contacts()[0].id == guest_data.contacts()[0].id

    def test_mood_entries_are_in_range(self):
        entries = guest_data.mood_entries(today=date(2026, 3, 1))

        assert len(entries) == 60
        assert entries[0].entry_date == date(2026, 3, 1)
        assert all(1 <= e.mood <= 5 for e in entries)


# ══════════════════════════════════════════════════════════════════════════
# Store-backed data
# ══════════════════════════════════════════════════════════════════════════


class TestStoreDataSource:

    async def test_projects_reads_each_on_own_session(
        self, monkeypatch, session_factory, sessions, user_id
    ):
        list_tasks = AsyncMock(return_value=guest_data.tasks())
        list_contacts = AsyncMock(return_value=guest_data.contacts())
        monkeypatch.setattr(task_service, "list_tasks", list_tasks)
        monkeypatch.setattr(contact_service, "list_contacts", list_contacts)

        page = await StoreDataSource(user_id, session_factory).projects()

        assert page.is_guest is False
        assert len(page.tasks) == len(guest_data.tasks())
        assert len(sessions) == 2
        assert list_tasks.call_args.args[1] == user_id
        assert list_contacts.call_args.args[1] == user_id
        assert list_tasks.call_args.args[0] is not list_contacts.call_args.args[0]

    async def test_saver_passes_recent_limit(
        self, monkeypatch, session_factory, user_id
    ):
        recent = AsyncMock(return_value=[])
        monkeypatch.setattr(saver_service, "recent_items", recent)
        monkeypatch.setattr(saver_service, "all_items", AsyncMock(return_value=[]))
        monkeypatch.setattr(
            saver_service, "category_counts", AsyncMock(return_value={"idea": 2})
        )

        page = await StoreDataSource(user_id, session_factory).saver()

        assert page.category_counts == {"idea": 2}
        assert recent.call_args.args[2] == RECENT_ITEMS_LIMIT

    async def test_store_failure_is_not_masked(
        self, monkeypatch, session_factory, user_id
    ):
        monkeypatch.setattr(
            task_service, "list_tasks", AsyncMock(side_effect=StoreError("relation does not exist"))
        )
        monkeypatch.setattr(contact_service, "list_contacts", AsyncMock(return_value=[]))

        with pytest.raises(StoreError):
            await StoreDataSource(user_id, session_factory).projects()
