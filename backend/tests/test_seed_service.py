"""
SuperApp Backend — Demo Seed Service Tests
============================================

What we test:
    ✅ Seeding is refused when the caller already has contacts
    ✅ Contacts are committed before the task insert runs
    ✅ Tasks link to the contact named in their template
"""

import uuid
from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from superapp.exceptions import StoreError, ValidationError
from superapp.services.seed_service import (
    ALREADY_SEEDED_MESSAGE,
    DEMO_CONTACTS,
    DEMO_TASKS,
    seed_service,
    task_rows,
)


def _inserted_contacts():
    result = MagicMock()
    result.all.return_value = [
        (uuid.uuid4(), first, last) for first, last, *_ in DEMO_CONTACTS
    ]
    return result


def _no_contacts():
    result = MagicMock()
    result.first.return_value = None
    return result


async def test_refuses_when_contacts_exist(mock_db_session, user_id):
    mock_db_session.execute.return_value.first.return_value = (uuid.uuid4(),)

    with pytest.raises(ValidationError) as exc_info:
        await seed_service.seed(mock_db_session, user_id)

    assert exc_info.value.message == ALREADY_SEEDED_MESSAGE
    mock_db_session.execute.assert_awaited_once()
    mock_db_session.commit.assert_not_awaited()


async def test_seeds_contacts_then_tasks(mock_db_session, user_id):
    mock_db_session.execute.side_effect = [_no_contacts(), _inserted_contacts(), MagicMock()]

    counts = await seed_service.seed(mock_db_session, user_id)

    assert counts == {"contacts": 8, "tasks": 10}
    assert mock_db_session.execute.await_count == 3
    mock_db_session.commit.assert_awaited_once()


async def test_task_failure_keeps_committed_contacts(mock_db_session, user_id):
    mock_db_session.execute.side_effect = [
        _no_contacts(),
        _inserted_contacts(),
        OperationalError("INSERT INTO tasks ...", {}, Exception("connection reset")),
    ]

    with pytest.raises(StoreError) as exc_info:
        await seed_service.seed(mock_db_session, user_id)

    assert exc_info.value.message == "connection reset"
    mock_db_session.commit.assert_awaited_once()


def test_task_rows_resolve_contacts_by_name(user_id):
    sarah = uuid.uuid4()
    today = date(2026, 4, 10)

    rows = task_rows(user_id, {"Sarah Chen": sarah}, today=today)

    assert len(rows) == len(DEMO_TASKS)
    by_title = {row["title"]: row for row in rows}
    proposal = by_title["Send proposal to Acme Corp"]
    assert proposal["contact_id"] == sarah
    assert proposal["due_date"] == today + timedelta(days=2)
    # Unknown names and unlinked templates both leave contact_id empty
    assert by_title["Schedule API demo for Bright Labs"]["contact_id"] is None
    assert by_title["Update CRM data export feature"]["contact_id"] is None
    assert all(row["user_id"] == user_id for row in rows)
