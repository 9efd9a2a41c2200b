"""
Article and question embeddings.

Voyage AI (voyage-multilingual-2) is the default provider, Cohere
(embed-multilingual-v3.0) the alternative. Both return 1024-dimension
vectors and distinguish document inputs (articles at ingestion) from
query inputs (questions at search time).
"""

import os
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Union

from .errors import RetrievalError

logger = logging.getLogger(__name__)


@dataclass
class EmbeddingConfig:
    provider: str = "voyage"  # "voyage" or "cohere"
    model: str = "voyage-multilingual-2"
    dimensions: int = 1024
    batch_size: int = 128
    max_tokens_per_batch: int = 100000  # provider limit is 120K
    chars_per_token: float = 2.5  # French statutory text runs long
    query_cache_size: int = 256  # 0 disables the question cache


class BaseEmbeddingService:
    """
    Provider-independent batching and question cache.

    Subclasses connect the client in _init_client() and name their
    provider, API key variable and input types.
    """

    _provider_name: str = "Base"
    _env_var_name: str = ""
    _doc_input_type: str = "document"
    _query_input_type: str = "query"

    def __init__(self, config: Optional[EmbeddingConfig] = None):
        self.config = config or EmbeddingConfig()
        self._client = None
        self._query_cache = OrderedDict()
        self._init_client()

    def _init_client(self):
        raise NotImplementedError("Subclasses must implement _init_client()")

    def _require_client(self):
        if not self._client:
            raise RetrievalError(
                f"{self._provider_name} client not initialized. "
                f"Check {self._env_var_name}."
            )

    def _create_batches(self, texts: list[str]) -> list[list[str]]:
        """Group texts under both the item limit and the estimated token budget."""
        batches = []
        current, tokens = [], 0.0
        for text in texts:
            estimate = len(text) / self.config.chars_per_token
            if current and (
                len(current) >= self.config.batch_size
                or tokens + estimate > self.config.max_tokens_per_batch
            ):
                batches.append(current)
                current, tokens = [], 0.0
            current.append(text)
            tokens += estimate
        if current:
            batches.append(current)
        return batches

    def _embed(self, texts: list[str], input_type: str) -> list[list[float]]:
        try:
            response = self._client.embed(texts=texts, model=self.config.model, input_type=input_type)
        except Exception as e:
            logger.error(f"{self._provider_name} embedding failed: {e}")
            raise
        return list(response.embeddings)

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Embed article texts for ingestion.

        Args:
            texts: Embedding texts ("Art. X - titre\\n\\ncontenu")

        Returns:
            One vector per text, in input order
        """
        if not texts:
            return []
        self._require_client()

        batches = self._create_batches(texts)
        logger.info(f"Embedding {len(texts)} articles in {len(batches)} batches with {self._provider_name}")

        vectors = []
        for number, batch in enumerate(batches, start=1):
            vectors.extend(self._embed(batch, self._doc_input_type))
            if number % 10 == 0:
                logger.info(f"Processed batch {number}/{len(batches)}")
        return vectors

    def embed_query(self, query: str) -> list[float]:
        """Embed a question; repeated questions are served from memory."""
        self._require_client()

        cached = self._query_cache.get(query)
        if cached is not None:
            self._query_cache.move_to_end(query)
            return cached

        vectors = self._embed([query], self._query_input_type)
        if not vectors:
            return []
        if self.config.query_cache_size > 0:
            self._query_cache[query] = vectors[0]
            if len(self._query_cache) > self.config.query_cache_size:
                self._query_cache.popitem(last=False)
        return vectors[0]

    @property
    def dimensions(self) -> int:
        return self.config.dimensions


class CohereEmbeddingService(BaseEmbeddingService):
    """Cohere embed-multilingual-v3.0."""

    _provider_name = "Cohere"
    _env_var_name = "COHERE_API_KEY"
    _doc_input_type = "search_document"
    _query_input_type = "search_query"

    def _init_client(self):
        api_key = os.getenv("COHERE_API_KEY")
        if not api_key:
            logger.warning("COHERE_API_KEY not found. Embeddings will fail.")
            return

        import cohere
        self._client = cohere.Client(api_key)
        logger.info(f"Cohere client initialized with model {self.config.model}")


class VoyageEmbeddingService(BaseEmbeddingService):
    """Voyage AI voyage-multilingual-2."""

    _provider_name = "Voyage AI"
    _env_var_name = "VOYAGE_API_KEY"

    def _init_client(self):
        api_key = os.getenv("VOYAGE_API_KEY")
        if not api_key:
            logger.warning("VOYAGE_API_KEY not found. Embeddings will fail.")
            return

        import voyageai
        self._client = voyageai.Client(api_key=api_key)
        logger.info(f"Voyage AI client initialized with model {self.config.model}")


def get_embedding_service(
    provider: Optional[str] = None,
) -> Union[VoyageEmbeddingService, CohereEmbeddingService]:
    """
    Build the embedding service named by EMBEDDING_PROVIDER.

    Args:
        provider: "voyage" (default) or "cohere"; overrides the environment

    Unknown providers fall back to Cohere with a warning.
    """
    provider = (provider or os.getenv("EMBEDDING_PROVIDER", "voyage")).lower()

    if provider == "voyage":
        return VoyageEmbeddingService(EmbeddingConfig(
            provider="voyage",
            model=os.getenv("EMBEDDING_MODEL", "voyage-multilingual-2"),
            batch_size=128,
        ))

    if provider != "cohere":
        logger.warning(f"Unknown embedding provider '{provider}', falling back to Cohere")

    return CohereEmbeddingService(EmbeddingConfig(
        provider="cohere",
        model=os.getenv("EMBEDDING_MODEL", "embed-multilingual-v3.0"),
        batch_size=96,
    ))
