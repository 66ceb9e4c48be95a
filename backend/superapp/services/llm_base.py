"""
SuperApp Backend — Abstract LLM Service Interface
===================================================

What:  Contract for the two model capabilities the Universal Saver needs:
       structured categorization of free text, and text embeddings.
How:   Concrete providers inherit from LLMService. Callers (SaverService,
       SearchService) receive an instance and never import a provider SDK.
Who:   Implemented by GeminiService; replaced by AsyncMock-backed fakes in tests.

Embedding task types:
    Saves embed with TASK_DOCUMENT and searches with TASK_QUERY. Both MUST use
    the same model; only the task hint differs.
"""

from abc import ABC, abstractmethod
from typing import List

from superapp.schemas.saver import Categorization

TASK_DOCUMENT = "retrieval_document"
TASK_QUERY = "retrieval_query"


class LLMService(ABC):
    """
    Abstract interface for categorization and embedding providers.

    Contract:
        - categorize() returns a validated Categorization or raises
          CategorizationError; it never returns a partial object
        - embed() returns exactly EMBEDDING_DIMENSIONS floats or raises
          LLMServiceError
        - Nothing is retried; the first failure is reported
    """

    @abstractmethod
    async def categorize(self, raw_text: str) -> Categorization:
        """
        Classify `raw_text` into the fixed taxonomy.

        Raises:
            CategorizationError: call failed, empty reply, or reply did not
                validate against Categorization.
        """
        ...

    @abstractmethod
    async def embed(self, text: str, task_type: str = TASK_DOCUMENT) -> List[float]:
        """
        Embed `text` into a fixed-width vector.

        Raises:
            LLMServiceError: call failed or returned a vector of the wrong width.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Lightweight reachability probe (no token cost).

        Who:     Called by GET /health.
        Returns: True if the provider is reachable and the key is accepted.
        """
        ...
