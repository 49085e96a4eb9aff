"""
Embedding generation task.

Converts one text into a fixed-dimension vector through the injected
LangChain embeddings client. Failures are raised, never replaced by a
zero or cached vector.

Dependencies: langchain_core, knowledge_rag.core.exceptions
System role: Third stage of the ingestion pipeline and query embedding for search
"""

import math

from langchain_core.embeddings import Embeddings

from knowledge_rag.core.exceptions import EmbeddingError


class EmbeddingTask:
    """Generate embeddings with a shared provider client."""

    def __init__(
        self,
        client: Embeddings,
        model_id: str = "text-embedding-3-large",
        dimensions: int = 1536,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            client: Embeddings client constructed once per process
            model_id: Model identifier recorded with every stored vector
            dimensions: Expected vector length

        Raises:
            ValueError: When model_id is empty or dimensions is not positive
        """
        if not model_id:
            raise ValueError("model_id cannot be empty")
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")

        self._client = client
        self.model_id = model_id
        self.dimensions = dimensions

    async def embed(self, text: str, source: str | None = None) -> list[float]:
        """
        Embed one text.

        Args:
            text: Chunk or query text
            source: Source identifier used for error context

        Returns:
            list[float]: Vector of length `dimensions`

        Raises:
            EmbeddingError: When the text is blank, the provider call fails,
                or the response is not a vector of the expected length
        """
        if not text or not text.strip():
            raise EmbeddingError("Cannot embed empty text", source=source)

        try:
            vector = await self._client.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                source=source,
                details={"model": self.model_id},
            ) from e

        return self._validate(vector, source)

    def _validate(self, vector: object, source: str | None) -> list[float]:
        """Check the provider response is a finite float vector of the right size."""
        if not isinstance(vector, (list, tuple)) or not vector:
            raise EmbeddingError(
                "Embedding provider returned an empty or malformed response",
                source=source,
                details={"model": self.model_id},
            )
        try:
            values = [float(value) for value in vector]
        except (TypeError, ValueError) as e:
            raise EmbeddingError(
                "Embedding provider returned non-numeric values",
                source=source,
                details={"model": self.model_id},
            ) from e

        if len(values) != self.dimensions:
            raise EmbeddingError(
                "Embedding dimensionality does not match configuration",
                source=source,
                details={
                    "model": self.model_id,
                    "expected": self.dimensions,
                    "actual": len(values),
                },
            )
        if not all(math.isfinite(value) for value in values):
            raise EmbeddingError(
                "Embedding provider returned non-finite values",
                source=source,
                details={"model": self.model_id},
            )
        return values
