"""
SuperApp Backend — Module CRUD Service Tests
==============================================

What:  The statement-level contract shared by every module service.
How:   Mocked AsyncSession; upserts are compiled with the PostgreSQL dialect
       to check the exact SQL shape.

What we test:
    ✅ One statement per write
    ✅ Deleting a missing id is a silent no-op
    ✅ Store errors surface their original message
    ✅ Mood entries upsert on (user_id, entry_date)
    ✅ Habit toggles read state from the store (on, then off)
    ✅ Updates are owner-scoped and never move a record to another day or trip
    ✅ Writes mark the right views stale
"""

import uuid
from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from superapp.exceptions import NotFoundError, StoreError
from superapp.middleware.view_invalidation import stale_views
from superapp.schemas.contacts import ContactInput, TaskStatusInput
from superapp.schemas.finance import BudgetInput, TransactionInput
from superapp.schemas.habits import HabitInput
from superapp.schemas.travel import ActivityUpdateInput, ExpenseUpdateInput, TripInput
from superapp.schemas.wellness import MoodEntryInput, MoodEntryUpdateInput
from superapp.services.contact_service import contact_service
from superapp.services.finance_service import finance_service
from superapp.services.habit_service import habit_service
from superapp.services.store import build_upsert
from superapp.services.task_service import task_service
from superapp.services.travel_service import travel_service
from superapp.services.wellness_service import wellness_service


_SERVICE_MODULES = (
    "contact_service",
    "task_service",
    "finance_service",
    "habit_service",
    "wellness_service",
    "travel_service",
)


def _compile(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


def _executed_update(session):
    """The last UPDATE the service ran: its SQL and the columns it sets."""
    compiled = session.execute.call_args.args[0].compile(dialect=postgresql.dialect())
    return str(compiled), compiled.params


@pytest.fixture
def view_tracking(monkeypatch):
    """Collect the views each service marks stale."""
    views = set()
    for module in _SERVICE_MODULES:
        monkeypatch.setattr(
            f"superapp.services.{module}.mark_stale", lambda *paths: views.update(paths)
        )
    return views


class TestContactService:

    async def test_create_runs_one_insert(self, mock_db_session, user_id, view_tracking):
        new_id = uuid.uuid4()
        mock_db_session.execute.return_value.scalar_one.return_value = new_id

        contact_id = await contact_service.create(
            mock_db_session, user_id, ContactInput(first_name="Ada")
        )

        assert contact_id == new_id
        mock_db_session.execute.assert_awaited_once()
        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert sql.startswith("INSERT INTO contacts")
        assert "RETURNING contacts.id" in sql
        assert view_tracking == {"/projects"}

    async def test_delete_missing_id_is_noop(self, mock_db_session, user_id):
        mock_db_session.execute.return_value.rowcount = 0

        await contact_service.delete(mock_db_session, user_id, uuid.uuid4())

        mock_db_session.execute.assert_awaited_once()
        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert sql.startswith("DELETE FROM contacts")
        assert "contacts.user_id" in sql

    async def test_update_is_owner_scoped(self, mock_db_session, user_id, view_tracking):
        contact_id = uuid.uuid4()

        await contact_service.update(
            mock_db_session, user_id, contact_id, ContactInput(first_name="Ada", status="active")
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE contacts SET")
        assert "contacts.user_id" in sql
        assert params["status"] == "active"
        assert "user_id" not in params
        assert view_tracking == {"/projects", f"/projects/contacts/{contact_id}"}

    async def test_store_error_message_is_verbatim(self, mock_db_session, user_id):
        mock_db_session.execute.side_effect = IntegrityError(
            "INSERT INTO contacts ...",
            {},
            Exception('null value in column "first_name" violates not-null constraint'),
        )

        with pytest.raises(StoreError) as exc_info:
            await contact_service.create(mock_db_session, user_id, ContactInput(first_name="Ada"))

        assert exc_info.value.message == (
            'null value in column "first_name" violates not-null constraint'
        )

    async def test_get_detail_missing_raises(self, mock_db_session, user_id):
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = None

        with pytest.raises(NotFoundError):
            await contact_service.get_detail(mock_db_session, user_id, uuid.uuid4())

    def test_options_use_full_name(self):
        contacts = [
            MagicMock(id=uuid.uuid4(), first_name="Ada", last_name="Lovelace"),
            MagicMock(id=uuid.uuid4(), first_name="Cher", last_name=None),
        ]

        options = contact_service.options(contacts)

        assert [o.name for o in options] == ["Ada Lovelace", "Cher"]


class TestTaskService:

    async def test_status_update_is_owner_scoped(self, mock_db_session, user_id):
        await task_service.update_status(
            mock_db_session, user_id, uuid.uuid4(), TaskStatusInput(status="done")
        )

        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert sql.startswith("UPDATE tasks SET status=")
        assert "tasks.user_id" in sql


class TestFinanceService:

    async def test_transaction_marks_finance_and_projects(
        self, mock_db_session, user_id, view_tracking
    ):
        await finance_service.create_transaction(
            mock_db_session, user_id, TransactionInput(description="Coffee", amount="4.50")
        )

        assert view_tracking == {"/finance", "/projects"}

    async def test_budget_upsert_updates_only_limit(self, mock_db_session, user_id):
        await finance_service.upsert_budget(
            mock_db_session, user_id, BudgetInput(category="food", monthly_limit=500)
        )

        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert "ON CONFLICT (user_id, category, budget_month) DO UPDATE" in sql
        assert "SET monthly_limit = excluded.monthly_limit" in sql


class TestWellnessService:

    def test_mood_upsert_is_single_on_conflict_statement(self, user_id):
        payload = MoodEntryInput(mood=4, entry_date=date(2026, 1, 5), tags="calm, rested")

        sql = _compile(wellness_service.upsert_statement(user_id, payload))

        assert sql.startswith("INSERT INTO mood_entries")
        assert "ON CONFLICT (user_id, entry_date) DO UPDATE" in sql
        assert "mood = excluded.mood" in sql

    async def test_upsert_entry_runs_one_statement(self, mock_db_session, user_id, view_tracking):
        await wellness_service.upsert_entry(mock_db_session, user_id, MoodEntryInput(mood=3))

        mock_db_session.execute.assert_awaited_once()
        assert view_tracking == {"/wellness"}

    async def test_update_keeps_entry_date(self, mock_db_session, user_id, view_tracking):
        await wellness_service.update_entry(
            mock_db_session,
            user_id,
            uuid.uuid4(),
            MoodEntryUpdateInput(mood="4", notes="edited later", tags="calm"),
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE mood_entries SET")
        assert "mood_entries.user_id" in sql
        assert "entry_date" not in params
        assert params["mood"] == 4
        assert params["notes"] == "edited later"
        assert view_tracking == {"/wellness"}

    def test_update_input_ignores_entry_date(self):
        payload = MoodEntryUpdateInput.model_validate({"mood": 2, "entry_date": "2026-01-05"})

        assert "entry_date" not in payload.values()


class TestHabitService:

    async def test_update_is_owner_scoped(self, mock_db_session, user_id, view_tracking):
        await habit_service.update(
            mock_db_session,
            user_id,
            uuid.uuid4(),
            HabitInput(name="Read", type="boolean", target_count=3),
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE habits SET")
        assert "habits.user_id" in sql
        assert params["target_count"] is None
        assert view_tracking == {"/habits", "/projects"}


class TestHabitCompletions:

    async def test_toggle_on_then_off_leaves_no_row(self, mock_db_session, user_id):
        """
        Simulates the store across two toggles of the same day:
        first no completion exists (insert), then one does (delete).
        """
        habit_id = uuid.uuid4()
        completion_id = uuid.uuid4()
        day = date(2026, 2, 3)

        no_completion = MagicMock()
        no_completion.first.return_value = (habit_id, None)
        inserted = MagicMock()
        inserted.scalar_one.return_value = completion_id
        with_completion = MagicMock()
        with_completion.first.return_value = (habit_id, completion_id)
        deleted = MagicMock(rowcount=1)
        mock_db_session.execute.side_effect = [no_completion, inserted, with_completion, deleted]

        first = await habit_service.toggle_completion(mock_db_session, user_id, habit_id, day)
        second = await habit_service.toggle_completion(mock_db_session, user_id, habit_id, day)

        assert first is True
        assert second is False
        statements = [_compile(call.args[0]) for call in mock_db_session.execute.call_args_list]
        assert statements[1].startswith("INSERT INTO habit_completions")
        assert statements[3].startswith("DELETE FROM habit_completions")

    async def test_toggle_unknown_habit_raises(self, mock_db_session, user_id):
        mock_db_session.execute.return_value.first.return_value = None

        with pytest.raises(NotFoundError):
            await habit_service.toggle_completion(
                mock_db_session, user_id, uuid.uuid4(), date(2026, 2, 3)
            )

        mock_db_session.execute.assert_awaited_once()

    async def test_zero_value_deletes(self, mock_db_session, user_id):
        await habit_service.set_completion_value(
            mock_db_session, user_id, uuid.uuid4(), date(2026, 2, 3), 0
        )

        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert sql.startswith("DELETE FROM habit_completions")

    async def test_positive_value_upserts(self, mock_db_session, user_id):
        await habit_service.set_completion_value(
            mock_db_session, user_id, uuid.uuid4(), date(2026, 2, 3), 6
        )

        sql = _compile(mock_db_session.execute.call_args.args[0])
        assert "ON CONFLICT (habit_id, completion_date) DO UPDATE" in sql


class TestTravelService:

    async def test_trip_update_is_owner_scoped(self, mock_db_session, user_id, view_tracking):
        await travel_service.update_trip(
            mock_db_session, user_id, uuid.uuid4(), TripInput(destination=" Porto ", budget="900")
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE trips SET")
        assert "trips.user_id" in sql
        assert params["destination"] == "Porto"
        assert params["budget"] == 900.0
        assert view_tracking == {"/travel"}

    async def test_activity_update_keeps_its_trip(self, mock_db_session, user_id):
        await travel_service.update_activity(
            mock_db_session, user_id, uuid.uuid4(), ActivityUpdateInput(title="Louvre", cost="22")
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE trip_activities SET")
        assert "trip_activities.user_id" in sql
        assert "trip_id" not in params
        assert params["cost"] == 22.0

    async def test_expense_update_keeps_its_trip(self, mock_db_session, user_id):
        await travel_service.update_expense(
            mock_db_session,
            user_id,
            uuid.uuid4(),
            ExpenseUpdateInput(title="Taxi", amount="18.5", expense_date=date(2026, 4, 16)),
        )

        sql, params = _executed_update(mock_db_session)
        assert sql.startswith("UPDATE trip_expenses SET")
        assert "trip_id" not in params
        assert params["expense_date"] == date(2026, 4, 16)


class TestBuildUpsert:

    def test_default_update_fields_exclude_key(self):
        from superapp.models.preference import UserPreference

        statement = build_upsert(
            UserPreference,
            {"user_id": uuid.uuid4(), "sidebar_mode": "icons"},
            conflict_key=("user_id",),
        )

        sql = _compile(statement)
        assert "ON CONFLICT (user_id) DO UPDATE SET sidebar_mode = excluded.sidebar_mode" in sql


def test_stale_views_empty_outside_request():
    assert stale_views() == set()
