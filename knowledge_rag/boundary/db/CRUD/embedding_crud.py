"""
Knowledge base embedding CRUD operations.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.models
System role: Embedding persistence and scan queries for vector search
"""

from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.models.chunk_model import ChunkModel
from knowledge_rag.boundary.db.models.document_model import DocumentModel
from knowledge_rag.boundary.db.models.embedding_model import EmbeddingModel
from knowledge_rag.boundary.db.CRUD.base_crud import BaseCRUD


@dataclass(frozen=True)
class EmbeddingRow:
    """Embedding joined with its chunk text and parent document fields."""

    chunk_id: UUID
    vector: list[float]
    content: str
    title: str
    tags: list[str]
    source: str


class EmbeddingCRUD(BaseCRUD[EmbeddingModel]):
    """CRUD operations for EmbeddingModel."""

    def __init__(self) -> None:
        """Initialize EmbeddingCRUD with EmbeddingModel."""
        super().__init__(EmbeddingModel)

    async def get_by_chunk_id(
        self,
        session: AsyncSession,
        chunk_id: UUID,
    ) -> Sequence[EmbeddingModel]:
        """
        Retrieve all embeddings attached to a chunk (one per model).

        Args:
            session: Async database session
            chunk_id: Chunk UUID

        Returns:
            Sequence of EmbeddingModels
        """
        stmt = select(EmbeddingModel).where(EmbeddingModel.chunk_id == chunk_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_rows_for_model(
        self,
        session: AsyncSession,
        model: str,
    ) -> list[EmbeddingRow]:
        """
        Load every embedding of one model with chunk and document fields.

        Rows come back in a fixed scan order (document source, chunk idx)
        so equal scores keep a reproducible order after a stable sort.

        Args:
            session: Async database session
            model: Embedding model identifier

        Returns:
            list[EmbeddingRow]: Joined rows ready for indexing
        """
        stmt = (
            select(
                EmbeddingModel.chunk_id,
                EmbeddingModel.embedding,
                ChunkModel.content,
                DocumentModel.title,
                DocumentModel.tags,
                DocumentModel.source,
            )
            .join(ChunkModel, ChunkModel.id == EmbeddingModel.chunk_id)
            .join(DocumentModel, DocumentModel.id == ChunkModel.doc_id)
            .where(EmbeddingModel.model == model)
            .order_by(DocumentModel.source, ChunkModel.idx)
        )
        result = await session.execute(stmt)
        return [
            EmbeddingRow(
                chunk_id=row.chunk_id,
                vector=list(row.embedding),
                content=row.content,
                title=row.title,
                tags=list(row.tags or []),
                source=row.source,
            )
            for row in result.all()
        ]


embedding_crud = EmbeddingCRUD()
