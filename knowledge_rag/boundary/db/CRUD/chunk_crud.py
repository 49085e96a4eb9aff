"""
Knowledge base chunk CRUD operations.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.models
System role: Chunk persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.models.chunk_model import ChunkModel
from knowledge_rag.boundary.db.models.embedding_model import EmbeddingModel
from knowledge_rag.boundary.db.CRUD.base_crud import BaseCRUD


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        doc_id: UUID,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve all chunks of a document in reconstruction order.

        Args:
            session: Async database session
            doc_id: Parent document UUID

        Returns:
            Sequence of ChunkModels ordered by idx
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.doc_id == doc_id)
            .order_by(ChunkModel.idx)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_document_id(self, session: AsyncSession, doc_id: UUID) -> int:
        """
        Delete every chunk of a document and the embeddings they own.

        Args:
            session: Async database session
            doc_id: Parent document UUID

        Returns:
            Number of chunks deleted
        """
        chunk_ids = select(ChunkModel.id).where(ChunkModel.doc_id == doc_id)
        await session.execute(
            delete(EmbeddingModel)
            .where(EmbeddingModel.chunk_id.in_(chunk_ids))
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(
            delete(ChunkModel)
            .where(ChunkModel.doc_id == doc_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0


chunk_crud = ChunkCRUD()
