"""
SuperApp Backend — Gemini Service Unit Tests (Mocked)
=======================================================

What:  Tests for GeminiService with mocked Google Generative AI SDK.
How:   Patches the genai module and model to simulate success/failure.

What we test:
    ✅ A conforming JSON reply becomes a Categorization
    ✅ Non-conforming, empty or failed replies raise CategorizationError
    ✅ Embeddings are requested with the configured model and width
    ✅ Wrong-width embeddings are rejected
    ❌ Real API calls (use integration tests for that)
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from superapp.exceptions import CategorizationError, LLMServiceError
from superapp.services.gemini_service import GeminiService
from superapp.services.llm_base import TASK_QUERY

VALID_REPLY = {
    "title": "Sarah Chen - VP of Engineering at TechCorp",
    "summary": "Profile of an engineering leader.",
    "category": "person",
    "tags": ["engineering", "leadership", "enterprise"],
    "metadata": {"content_type": "profile", "sentiment": "neutral", "entities": ["Sarah Chen"]},
}


def _service_with_reply(mock_genai, reply_text=None, error=None) -> GeminiService:
    mock_model = MagicMock()
    if error is not None:
        mock_model.generate_content_async = AsyncMock(side_effect=error)
    else:
        mock_model.generate_content_async = AsyncMock(return_value=MagicMock(text=reply_text))
    mock_genai.GenerativeModel.return_value = mock_model
    return GeminiService()


class TestCategorize:

    async def test_valid_reply_is_parsed(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, json.dumps(VALID_REPLY))

            result = await service.categorize("Sarah Chen, VP of Engineering")

            assert result.category == "person"
            assert result.tags == ["engineering", "leadership", "enterprise"]
            assert result.metadata.urgency is None

    async def test_requests_json_with_schema(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, json.dumps(VALID_REPLY))

            await service.categorize("some text")

            mock_genai.GenerationConfig.assert_called_once_with(
                response_mime_type="application/json",
                response_schema=GeminiService.RESPONSE_SCHEMA,
            )

    async def test_long_title_is_clamped(self):
        reply = {**VALID_REPLY, "title": "x" * 200}
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, json.dumps(reply))

            result = await service.categorize("text")

            assert len(result.title) == 80

    @pytest.mark.parametrize(
        "reply",
        [
            {**VALID_REPLY, "category": "recipe"},
            {**VALID_REPLY, "tags": ["only", "two"]},
            {**VALID_REPLY, "tags": ["a", "b", "c", "d", "e", "f", "g"]},
            {k: v for k, v in VALID_REPLY.items() if k != "summary"},
        ],
        ids=["unknown-category", "too-few-tags", "too-many-tags", "missing-summary"],
    )
    async def test_non_conforming_reply_raises(self, reply):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, json.dumps(reply))

            with pytest.raises(CategorizationError) as exc_info:
                await service.categorize("text")

            assert exc_info.value.message == "Failed to categorize content. Please try again."

    async def test_invalid_json_raises(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, "not json {")

            with pytest.raises(CategorizationError):
                await service.categorize("text")

    async def test_empty_reply_raises(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, "   ")

            with pytest.raises(CategorizationError):
                await service.categorize("text")

    async def test_api_failure_raises(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            service = _service_with_reply(mock_genai, error=RuntimeError("quota exceeded"))

            with pytest.raises(CategorizationError) as exc_info:
                await service.categorize("text")

            assert exc_info.value.context["error_type"] == "RuntimeError"


class TestEmbed:

    async def test_embed_uses_configured_model_and_width(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            mock_genai.embed_content_async = AsyncMock(return_value={"embedding": [0.5] * 768})
            service = GeminiService()

            vector = await service.embed("hello", TASK_QUERY)

            assert len(vector) == 768
            kwargs = mock_genai.embed_content_async.call_args.kwargs
            assert kwargs["model"] == "models/text-embedding-004"
            assert kwargs["task_type"] == TASK_QUERY
            assert kwargs["output_dimensionality"] == 768

    async def test_wrong_width_is_rejected(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            mock_genai.embed_content_async = AsyncMock(return_value={"embedding": [0.5] * 512})
            service = GeminiService()

            with pytest.raises(LLMServiceError):
                await service.embed("hello")

    async def test_api_failure_raises(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            mock_genai.embed_content_async = AsyncMock(side_effect=ConnectionError("down"))
            service = GeminiService()

            with pytest.raises(LLMServiceError):
                await service.embed("hello")


class TestHealthCheck:

    async def test_health_check_returns_bool(self):
        """Health check should return True/False without raising."""
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            mock_genai.list_models.return_value = [MagicMock()]

            service = GeminiService()
            assert await service.health_check() is True

    async def test_health_check_false_on_error(self):
        with patch("superapp.services.gemini_service.genai") as mock_genai:
            mock_genai.list_models.side_effect = PermissionError("bad key")

            service = GeminiService()
            assert await service.health_check() is False
