"""
Vector search over the knowledge base.

Embeds the query with the ingestion model, scores it against every stored
embedding of that model and returns the top results with their parent
document fields.

Dependencies: knowledge_rag.boundary.db, knowledge_rag.boundary.vdb,
    knowledge_rag.core.document_processing
System role: RAG retrieval business logic
"""

import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.CRUD import EmbeddingRow, embedding_crud
from knowledge_rag.boundary.vdb import (
    InMemoryVectorIndex,
    VectorEntry,
    VectorIndex,
    VectorMetadata,
)
from knowledge_rag.core.document_processing.tasks import EmbeddingTask
from knowledge_rag.core.exceptions import RetrievalError, ValidationError
from knowledge_rag.models.search import SearchResult

logger = logging.getLogger(__name__)

NO_CONTEXT_MESSAGE = "No knowledge base context found."


class RetrievalService:
    """
    Query-time retrieval.

    The index is rebuilt from the store on each query; at knowledge base
    scale (hundreds to low thousands of chunks) the full scan is cheap.
    Results with equal scores keep store scan order.
    """

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        index_factory: Callable[[int], VectorIndex] | None = None,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            embedding_task: Embedding generator bound to the ingestion model
            index_factory: Builds an empty index for a dimensionality
                (InMemoryVectorIndex if None)
        """
        self._embedding_task = embedding_task
        self._index_factory = index_factory or (
            lambda dimensions: InMemoryVectorIndex(dimensions=dimensions)
        )

    async def search(
        self,
        session: AsyncSession,
        query: str,
        limit: int = 5,
    ) -> list[SearchResult]:
        """
        Return the top `limit` chunks for a query.

        Args:
            session: Async database session (read only)
            query: Free-text query
            limit: Maximum number of results

        Returns:
            list[SearchResult]: Results in non-increasing score order,
                min(limit, stored embeddings) of them

        Raises:
            ValidationError: Blank query or limit below 1
            EmbeddingError: Query embedding failed
            RetrievalError: Stored embeddings could not be loaded
        """
        if not query or not query.strip():
            raise ValidationError("Query text is required", field="query")
        if limit < 1:
            raise ValidationError("Limit must be at least 1", field="limit")

        query_vector = await self._embedding_task.embed(query)
        index = await self.load_index(session)
        matches = index.search(query_vector, limit)

        results = [
            SearchResult(
                id=match.chunk_id,
                title=match.metadata.title,
                content=match.content,
                tags=match.metadata.tags,
                score=match.similarity_score,
                source=match.metadata.source,
            )
            for match in matches
        ]

        if results:
            average = sum(result.score for result in results) / len(results)
            logger.info(
                f"{__name__}:search - {len(results)} chunks found, avg score: {average:.4f}"
            )
        else:
            logger.info(f"{__name__}:search - No chunks found")
        return results

    async def load_index(self, session: AsyncSession) -> VectorIndex:
        """
        Build an index from every stored embedding of the configured model.

        Args:
            session: Async database session

        Returns:
            VectorIndex: Index holding one entry per stored embedding

        Raises:
            RetrievalError: When the store query fails
        """
        try:
            rows = await embedding_crud.get_rows_for_model(
                session, self._embedding_task.model_id
            )
        except SQLAlchemyError as e:
            raise RetrievalError(
                f"Failed to load embeddings: {e}",
                details={"model": self._embedding_task.model_id},
            ) from e

        index = self._index_factory(self._embedding_task.dimensions)
        index.add_many(self._to_entry(row) for row in rows)
        return index

    async def retrieve_context(
        self,
        session: AsyncSession,
        query: str,
        limit: int = 3,
    ) -> str:
        """
        Format the top results as a context block for prompt grounding.

        Args:
            session: Async database session
            query: Free-text query
            limit: Maximum number of chunks included

        Returns:
            str: Markdown sections separated by horizontal rules
        """
        results = await self.search(session, query, limit)
        if not results:
            return NO_CONTEXT_MESSAGE
        return "\n\n---\n\n".join(
            f"### {result.title}\n{result.content}" for result in results
        )

    @staticmethod
    def _to_entry(row: EmbeddingRow) -> VectorEntry:
        return VectorEntry(
            chunk_id=str(row.chunk_id),
            vector=row.vector,
            content=row.content,
            metadata=VectorMetadata(title=row.title, tags=row.tags, source=row.source),
        )
