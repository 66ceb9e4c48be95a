"""
SuperApp Backend — Search Service Tests
=========================================

What:  Semantic search input validation, category filtering and failure mapping.
How:   The store function's ranked rows are faked through the mocked session.
"""

import uuid
from datetime import datetime, timezone

import pytest

from superapp.exceptions import SearchFailedError, ValidationError
from superapp.services.llm_base import TASK_QUERY
from superapp.services.search_service import search_service


def _row(category: str, similarity: float) -> dict:
    return {
        "id": uuid.uuid4(),
        "raw_text": f"{category} text",
        "title": f"{category} title",
        "summary": "summary",
        "category": category,
        "tags": ["one", "two", "three"],
        "metadata": {"content_type": "note", "entities": []},
        "created_at": datetime(2026, 1, 10, tzinfo=timezone.utc),
        "similarity": similarity,
    }


@pytest.fixture
def ranked_rows():
    """Store output, already ranked best first."""
    return [
        _row("meeting", 0.91),
        _row("idea", 0.84),
        _row("meeting", 0.72),
        _row("person", 0.55),
        _row("meeting", 0.31),
    ]


@pytest.fixture
def store_returns(mock_db_session, ranked_rows):
    mock_db_session.execute.return_value.mappings.return_value.all.return_value = ranked_rows
    return ranked_rows


class TestSearch:

    async def test_all_returns_full_ranked_set(self, mock_db_session, mock_llm, user_id, store_returns):
        response = await search_service.search(mock_db_session, user_id, "roadmap", "all", mock_llm)

        assert [r.similarity for r in response.results] == [0.91, 0.84, 0.72, 0.55, 0.31]

    async def test_no_category_returns_full_ranked_set(
        self, mock_db_session, mock_llm, user_id, store_returns
    ):
        response = await search_service.search(mock_db_session, user_id, "roadmap", None, mock_llm)

        assert len(response.results) == 5

    async def test_category_keeps_ranked_order(self, mock_db_session, mock_llm, user_id, store_returns):
        response = await search_service.search(
            mock_db_session, user_id, "roadmap", "meeting", mock_llm
        )

        assert [r.category for r in response.results] == ["meeting"] * 3
        assert [r.similarity for r in response.results] == [0.91, 0.72, 0.31]

    async def test_query_embedded_as_query_and_bound(
        self, mock_db_session, mock_llm, user_id, store_returns
    ):
        await search_service.search(mock_db_session, user_id, "roadmap", None, mock_llm)

        mock_llm.embed.assert_awaited_once_with("roadmap", TASK_QUERY)
        params = mock_db_session.execute.call_args.args[1]
        assert params["match_user_id"] == user_id
        assert params["match_count"] == 20
        assert params["match_threshold"] == 0.3

    @pytest.mark.parametrize("query", [None, "", "   ", 42, ["roadmap"]])
    async def test_bad_query_is_rejected(self, query, mock_db_session, mock_llm, user_id):
        with pytest.raises(ValidationError) as exc_info:
            await search_service.search(mock_db_session, user_id, query, None, mock_llm)

        assert exc_info.value.message == "Query is required"
        mock_llm.embed.assert_not_awaited()

    async def test_embedding_failure_is_search_failed(self, mock_db_session, mock_llm, user_id):
        mock_llm.embed.side_effect = RuntimeError("quota")

        with pytest.raises(SearchFailedError) as exc_info:
            await search_service.search(mock_db_session, user_id, "roadmap", None, mock_llm)

        assert exc_info.value.message == "Search failed"
        mock_db_session.execute.assert_not_awaited()

    async def test_store_failure_is_search_failed(self, mock_db_session, mock_llm, user_id):
        mock_db_session.execute.side_effect = RuntimeError("function does not exist")

        with pytest.raises(SearchFailedError):
            await search_service.search(mock_db_session, user_id, "roadmap", None, mock_llm)
