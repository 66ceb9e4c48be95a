"""
SuperApp Backend — Saver Service Tests
========================================

What:  The Universal Saver save path and its companion operations.
How:   Mocked AsyncSession and LLMService; no database, no Gemini.

What we test:
    ✅ Length limits are enforced before any model call (50,000 ok, 50,001 not)
    ✅ A categorization failure persists nothing
    ✅ Embedding/insert failures map to the generic "try again" error
    ✅ The embedding input is title, summary and the first 8,000 chars
    ✅ Listing paginates on created_at
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from superapp.exceptions import CategorizationError, SaveFailedError, ValidationError
from superapp.services.llm_base import TASK_DOCUMENT
from superapp.services.saver_service import build_embedding_input, saver_service


class TestValidation:

    def test_exactly_max_length_is_accepted(self):
        text = "a" * 50_000
        assert saver_service.validate_raw_text(text) == text

    async def test_one_over_max_length_is_rejected_before_model_call(
        self, mock_db_session, mock_llm, user_id
    ):
        with pytest.raises(ValidationError) as exc_info:
            await saver_service.save_item(mock_db_session, user_id, "a" * 50_001, mock_llm)

        assert exc_info.value.message == "Content is too long. Please limit to 50,000 characters."
        mock_llm.categorize.assert_not_awaited()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.parametrize("raw_text", ["", "   \n\t ", None])
    async def test_blank_text_is_rejected(self, raw_text, mock_db_session, mock_llm, user_id):
        with pytest.raises(ValidationError) as exc_info:
            await saver_service.save_item(mock_db_session, user_id, raw_text, mock_llm)

        assert exc_info.value.message == "Please enter some content to save"
        mock_llm.categorize.assert_not_awaited()


class TestSaveItem:

    async def test_success_inserts_one_row(
        self, mock_db_session, mock_llm, user_id, sample_categorization
    ):
        new_id = uuid.uuid4()
        mock_db_session.execute.return_value.scalar_one.return_value = new_id

        record = await saver_service.save_item(
            mock_db_session, user_id, "Notes from Q1 planning", mock_llm
        )

        assert record.id == new_id
        assert record.title == sample_categorization.title
        assert record.category == "meeting"
        assert record.metadata["urgency"] == "high"
        mock_db_session.execute.assert_awaited_once()

    async def test_embeds_title_summary_and_text(self, mock_db_session, mock_llm, user_id):
        mock_db_session.execute.return_value.scalar_one.return_value = uuid.uuid4()

        await saver_service.save_item(mock_db_session, user_id, "Notes", mock_llm)

        mock_llm.embed.assert_awaited_once_with(
            "Q1 Planning Meeting Notes\n"
            "Roadmap priorities and a hiring plan for three engineers.\n"
            "Notes",
            TASK_DOCUMENT,
        )

    async def test_categorization_failure_persists_nothing(
        self, mock_db_session, mock_llm, user_id
    ):
        mock_llm.categorize.side_effect = CategorizationError()

        with pytest.raises(CategorizationError) as exc_info:
            await saver_service.save_item(mock_db_session, user_id, "text", mock_llm)

        assert exc_info.value.message == "Failed to categorize content. Please try again."
        mock_llm.embed.assert_not_awaited()
        mock_db_session.execute.assert_not_awaited()

    async def test_embedding_failure_is_generic(self, mock_db_session, mock_llm, user_id):
        mock_llm.embed.side_effect = RuntimeError("embedding backend down")

        with pytest.raises(SaveFailedError) as exc_info:
            await saver_service.save_item(mock_db_session, user_id, "text", mock_llm)

        assert exc_info.value.message == "An unexpected error occurred. Please try again."
        mock_db_session.execute.assert_not_awaited()

    async def test_insert_failure_is_generic(self, mock_db_session, mock_llm, user_id):
        mock_db_session.execute.side_effect = RuntimeError("connection reset")

        with pytest.raises(SaveFailedError):
            await saver_service.save_item(mock_db_session, user_id, "text", mock_llm)


class TestEmbeddingInput:

    def test_raw_text_is_truncated_to_8000_chars(self, sample_categorization):
        raw = "x" * 9_000

        result = build_embedding_input(sample_categorization, raw)

        title, summary, head = result.split("\n", 2)
        assert title == sample_categorization.title
        assert summary == sample_categorization.summary
        assert head == "x" * 8_000


def _saved_row(created_at):
    row = MagicMock()
    row.id = uuid.uuid4()
    row.raw_text = "text"
    row.title = "Title"
    row.summary = "Summary"
    row.category = "note"
    row.tags = ["a", "b", "c"]
    row.item_metadata = {"content_type": "note", "entities": []}
    row.created_at = created_at
    return row


class TestListItems:

    async def test_has_more_and_cursor(self, mock_db_session, user_id):
        now = datetime(2026, 2, 1, tzinfo=timezone.utc)
        rows = [_saved_row(now - timedelta(minutes=i)) for i in range(3)]
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = rows

        page = await saver_service.list_items(mock_db_session, user_id, limit=2)

        assert page.has_more is True
        assert len(page.items) == 2
        assert page.next_cursor == rows[1].created_at.isoformat()

    async def test_last_page(self, mock_db_session, user_id):
        rows = [_saved_row(datetime(2026, 2, 1, tzinfo=timezone.utc))]
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = rows

        page = await saver_service.list_items(mock_db_session, user_id, limit=2)

        assert page.has_more is False
        assert page.next_cursor is None
        assert page.items[0].metadata == {"content_type": "note", "entities": []}

    async def test_delete_is_one_statement(self, mock_db_session, user_id):
        mock_db_session.execute.return_value.rowcount = 0

        await saver_service.delete_item(mock_db_session, user_id, uuid.uuid4())

        mock_db_session.execute.assert_awaited_once()
