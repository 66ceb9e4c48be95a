"""
SuperApp Backend — API Route Tests
====================================

What:  End-to-end HTTP behaviour through the real app, with the session,
       identity and LLM dependencies overridden (see conftest.py).

What we test:
    ✅ Mutations without a session → 401 before any store access
    ✅ Missing required fields → 400 with the field's message, no store access
    ✅ GET /api/contacts always answers with an array
    ✅ Successful writes report stale views in X-Invalidated-Views
    ✅ Editing a mood entry never changes its day
    ✅ Guests get static page bundles; sessions get their identity back
    ✅ Blank search query → 400 "Query is required"
"""

import uuid

from sqlalchemy.dialects import postgresql

from superapp.middleware.view_invalidation import INVALIDATED_VIEWS_HEADER


class TestAuthGate:

    async def test_create_without_session_is_401(self, guest_client, mock_db_session):
        response = await guest_client.post("/api/contacts", json={"first_name": "Ada"})

        assert response.status_code == 401
        assert response.json()["message"] == "Not authenticated"
        mock_db_session.execute.assert_not_awaited()

    async def test_guest_contact_list_is_empty_array(self, guest_client):
        response = await guest_client.get("/api/contacts")

        assert response.status_code == 401
        assert response.json() == []

    async def test_guest_session_is_anonymous(self, guest_client):
        response = await guest_client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["authenticated"] is False


class TestMutations:

    async def test_missing_required_field_is_400(self, auth_client, mock_db_session):
        response = await auth_client.post("/api/tasks", json={"description": "no title"})

        assert response.status_code == 400
        assert response.json()["message"] == "Title is required"
        mock_db_session.execute.assert_not_awaited()

    async def test_create_contact_reports_stale_views(self, auth_client, mock_db_session):
        new_id = uuid.uuid4()
        mock_db_session.execute.return_value.scalar_one.return_value = new_id

        response = await auth_client.post(
            "/api/contacts", json={"first_name": "Ada", "last_name": "Lovelace"}
        )

        assert response.status_code == 201
        assert response.json() == {"id": str(new_id)}
        assert response.headers[INVALIDATED_VIEWS_HEADER] == "/projects"

    async def test_delete_is_204(self, auth_client, mock_db_session):
        mock_db_session.execute.return_value.rowcount = 0

        response = await auth_client.delete(f"/api/transactions/{uuid.uuid4()}")

        assert response.status_code == 204
        assert response.content == b""

    async def test_failed_write_reports_no_views(self, auth_client):
        response = await auth_client.put("/api/mood-entries", json={"mood": 9})

        assert response.status_code == 400
        assert response.json()["message"] == "Valid mood (1-5) is required"
        assert INVALIDATED_VIEWS_HEADER not in response.headers

    async def test_mood_edit_keeps_its_day(self, auth_client, mock_db_session):
        response = await auth_client.put(
            f"/api/mood-entries/{uuid.uuid4()}",
            json={"mood": 4, "notes": "edited later", "entry_date": "2026-01-05"},
        )

        assert response.status_code == 204
        assert response.headers[INVALIDATED_VIEWS_HEADER] == "/wellness"
        statement = mock_db_session.execute.call_args.args[0]
        params = statement.compile(dialect=postgresql.dialect()).params
        assert "entry_date" not in params
        assert params["notes"] == "edited later"


class TestPages:

    async def test_guest_projects_page_is_static(self, guest_client, mock_db_session):
        response = await guest_client.get("/api/projects")

        assert response.status_code == 200
        body = response.json()
        assert body["is_guest"] is True
        assert body["contacts"]
        assert response.headers["Cache-Control"] == "private, no-cache"
        mock_db_session.execute.assert_not_awaited()

    async def test_signed_in_session_is_reported(self, auth_client, identity):
        response = await auth_client.get("/api/auth/me")

        body = response.json()
        assert body["authenticated"] is True
        assert body["user"]["id"] == str(identity.id)


class TestSearch:

    async def test_blank_query_is_400(self, auth_client, mock_llm):
        response = await auth_client.post("/api/saved-items/search", json={"query": "   "})

        assert response.status_code == 400
        assert response.json()["message"] == "Query is required"
        mock_llm.embed.assert_not_awaited()
