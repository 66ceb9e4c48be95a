"""
SuperApp Backend — Google Gemini Service Implementation
=========================================================

What:  Concrete LLMService backed by Google Gemini: JSON-mode categorization
       with a response schema, and text-embedding-004 embeddings.
How:   One GenerativeModel (with the fixed system instruction) and the module
       level embed call, both configured once from settings.
Who:   Instantiated once at import; used by SaverService and SearchService.
When:  Every save (categorize + embed) and every search (embed).

Failure Strategy:
    No retries and no circuit breaker: the saver reports "try again" to the
    user, who decides. Every call logs a per-call ID and its duration so
    slow or failing calls can be traced.
"""

import logging
import time
import uuid
from typing import Any, Dict, List

import google.generativeai as genai
from pydantic import ValidationError as PydanticValidationError

from superapp.config import settings
from superapp.exceptions import CategorizationError, LLMServiceError
from superapp.models.saved_item import SAVED_ITEM_CATEGORIES
from superapp.schemas.saver import Categorization
from superapp.services.llm_base import TASK_DOCUMENT, LLMService

logger = logging.getLogger(__name__)


class GeminiService(LLMService):
    """
    Google Gemini implementation of categorization and embeddings.

    The response schema below mirrors schemas.saver.Categorization. Gemini
    constrains its output to the schema; the Pydantic model then enforces
    what the schema cannot express (title clamp, 3-6 tags).
    """

    SYSTEM_INSTRUCTION = (
        "You are a data categorization assistant. Analyze the user's pasted text "
        "and extract structured metadata. Be precise with the category selection. "
        "For tags, choose descriptive keywords that would help find this content later. "
        "For entities, extract any named people, companies, products, or places mentioned."
    )

    RESPONSE_SCHEMA: Dict[str, Any] = {
        "type": "OBJECT",
        "properties": {
            "title": {
                "type": "STRING",
                "description": "A concise, descriptive title (max 80 chars)",
            },
            "summary": {
                "type": "STRING",
                "description": "A 1-2 sentence summary of the content",
            },
            "category": {
                "type": "STRING",
                "enum": list(SAVED_ITEM_CATEGORIES),
                "description": "The best-fit category for this content",
            },
            "tags": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": "3-6 relevant keyword tags",
            },
            "metadata": {
                "type": "OBJECT",
                "properties": {
                    "content_type": {
                        "type": "STRING",
                        "description": "Type of content (e.g. email, meeting notes, url, recipe)",
                    },
                    "sentiment": {
                        "type": "STRING",
                        "enum": ["positive", "neutral", "negative"],
                        "nullable": True,
                    },
                    "urgency": {
                        "type": "STRING",
                        "enum": ["high", "medium", "low"],
                        "nullable": True,
                    },
                    "entities": {
                        "type": "ARRAY",
                        "items": {"type": "STRING"},
                        "description": "Named people, companies, products, or places",
                    },
                },
                "required": ["content_type", "entities"],
            },
        },
        "required": ["title", "summary", "category", "tags", "metadata"],
    }

    def __init__(self):
        # The SDK keeps the API key in module-level state
        if settings.gemini_api_key and settings.gemini_api_key != "your_gemini_api_key_here":
            genai.configure(api_key=settings.gemini_api_key)

        self.model = genai.GenerativeModel(
            settings.gemini_model,
            system_instruction=self.SYSTEM_INSTRUCTION,
        )
        self.embedding_model = settings.gemini_embedding_model
        self.dimensions = settings.embedding_dimensions

        logger.info(
            "GeminiService initialized with model=%s, embedding_model=%s (%d dims)",
            settings.gemini_model,
            self.embedding_model,
            self.dimensions,
        )

    async def categorize(self, raw_text: str) -> Categorization:
        """
        Ask Gemini for a Categorization of `raw_text`.

        Flow:
            1. generate_content_async in JSON mode with RESPONSE_SCHEMA
            2. read response.text (raises if the reply was blocked/empty)
            3. validate against Categorization

        Any failure in 1-3 becomes CategorizationError; the original error is
        kept in context for the log only.
        """
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        logger.info("[%s] Categorizing %d chars", request_id, len(raw_text))

        try:
            response = await self.model.generate_content_async(
                raw_text,
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=self.RESPONSE_SCHEMA,
                ),
            )
            reply = response.text
        except Exception as e:
            logger.error(
                "[%s] Gemini categorization call failed after %.0fms: %s",
                request_id,
                (time.time() - start_time) * 1000,
                str(e),
            )
            raise CategorizationError(
                context={"request_id": request_id, "error_type": type(e).__name__},
            )

        if not reply or not reply.strip():
            logger.error("[%s] Gemini returned an empty categorization", request_id)
            raise CategorizationError(context={"request_id": request_id, "reason": "empty"})

        try:
            categorization = Categorization.model_validate_json(reply)
        except PydanticValidationError as e:
            logger.error(
                "[%s] Categorization did not match schema: %d error(s)",
                request_id,
                e.error_count(),
            )
            raise CategorizationError(
                context={"request_id": request_id, "errors": e.errors(include_url=False)},
            )

        logger.info(
            "[%s] Categorized as '%s' with %d tags in %.0fms",
            request_id,
            categorization.category,
            len(categorization.tags),
            (time.time() - start_time) * 1000,
        )
        return categorization

    async def embed(self, text: str, task_type: str = TASK_DOCUMENT) -> List[float]:
        """
        Embed `text` with the configured embedding model.

        Returns:
            A list of exactly `self.dimensions` floats.
        """
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        try:
            result = await genai.embed_content_async(
                model=self.embedding_model,
                content=text,
                task_type=task_type,
                output_dimensionality=self.dimensions,
            )
        except Exception as e:
            logger.error(
                "[%s] Gemini embedding call failed after %.0fms: %s",
                request_id,
                (time.time() - start_time) * 1000,
                str(e),
            )
            raise LLMServiceError(
                message="Embedding request failed",
                context={"request_id": request_id, "error_type": type(e).__name__},
            )

        vector = [float(x) for x in result["embedding"]]
        if len(vector) != self.dimensions:
            logger.error(
                "[%s] Embedding has %d dimensions, expected %d",
                request_id,
                len(vector),
                self.dimensions,
            )
            raise LLMServiceError(
                message="Embedding has unexpected dimensionality",
                context={"request_id": request_id, "dimensions": len(vector)},
            )

        logger.info(
            "[%s] Embedded %d chars (%s) in %.0fms",
            request_id,
            len(text),
            task_type,
            (time.time() - start_time) * 1000,
        )
        return vector

    async def health_check(self) -> bool:
        """
        Check that the Gemini API is reachable and the key is accepted.

        How:     Lists available models (free, no tokens consumed).
        """
        try:
            model_names = [m.name for m in genai.list_models()]
            target = f"models/{settings.gemini_model}"
            if target not in model_names:
                logger.warning("Configured model %s not found in available models", target)
            return True
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False


# ── Singleton Instance ────────────────────────────────────────────────────
gemini_service = GeminiService()


def get_llm_service() -> LLMService:
    """FastAPI dependency returning the process-wide LLM service."""
    return gemini_service
