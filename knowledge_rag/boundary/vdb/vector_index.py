"""
Vector index interface and the default brute-force implementation.

VectorIndex isolates how nearest neighbours are found so callers do not
change when the full scan is replaced by an approximate index.

Dependencies: numpy, knowledge_rag.boundary.vdb
System role: Query-time similarity search over chunk embeddings
"""

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from knowledge_rag.boundary.vdb.similarity import cosine_similarity
from knowledge_rag.boundary.vdb.vector_schemas import VectorEntry, VectorSearchResult
from knowledge_rag.core.exceptions import VectorDimensionError


class VectorIndex(ABC):
    """Nearest-neighbour search over chunk vectors."""

    @abstractmethod
    def add(self, entry: VectorEntry) -> None:
        """Add one entry to the index."""

    def add_many(self, entries: Iterable[VectorEntry]) -> None:
        """Add entries in iteration order."""
        for entry in entries:
            self.add(entry)

    @abstractmethod
    def search(self, query_vector: Sequence[float], k: int) -> list[VectorSearchResult]:
        """
        Return up to k entries ranked by descending similarity.

        Args:
            query_vector: Query embedding, same dimensionality as the entries
            k: Maximum number of results

        Returns:
            list[VectorSearchResult]: Ranked results
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries in the index."""


class InMemoryVectorIndex(VectorIndex):
    """
    Exhaustive cosine-similarity scan.

    Every entry is scored on every query, O(N) per search. Ranking uses a
    stable sort, so entries with equal scores keep their insertion order.
    Intended for knowledge bases of hundreds to low thousands of chunks.
    """

    def __init__(self, dimensions: int | None = None) -> None:
        """
        Initialize an empty index.

        Args:
            dimensions: Expected vector length; inferred from the first entry if None
        """
        self._dimensions = dimensions
        self._entries: list[VectorEntry] = []

    @property
    def dimensions(self) -> int | None:
        """Vector length shared by all entries."""
        return self._dimensions

    def add(self, entry: VectorEntry) -> None:
        """
        Add one entry, enforcing a single dimensionality.

        Raises:
            VectorDimensionError: When the entry's length differs from the index
        """
        if self._dimensions is None:
            self._dimensions = len(entry.vector)
        elif len(entry.vector) != self._dimensions:
            raise VectorDimensionError(
                message="Embedding dimensionality does not match the index",
                operation="add",
                details={
                    "chunk_id": entry.chunk_id,
                    "expected": self._dimensions,
                    "actual": len(entry.vector),
                },
            )
        self._entries.append(entry)

    def search(self, query_vector: Sequence[float], k: int) -> list[VectorSearchResult]:
        """Score every entry against the query and keep the top k."""
        if k < 1 or not self._entries:
            return []

        scored = [
            (cosine_similarity(query_vector, entry.vector), entry)
            for entry in self._entries
        ]
        # sorted() is stable: ties keep scan order
        scored = sorted(scored, key=lambda item: item[0], reverse=True)

        return [
            VectorSearchResult(
                chunk_id=entry.chunk_id,
                content=entry.content,
                metadata=entry.metadata,
                similarity_score=score,
            )
            for score, entry in scored[:k]
        ]

    def __len__(self) -> int:
        return len(self._entries)
