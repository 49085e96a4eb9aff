"""
Knowledge base document CRUD operations.

Extends BaseCRUD with lookups by source, listing with chunk counts and
a cascading delete that removes chunks and embeddings first.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.models
System role: Document persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.base import utcnow
from knowledge_rag.boundary.db.models.chunk_model import ChunkModel
from knowledge_rag.boundary.db.models.document_model import DocumentModel
from knowledge_rag.boundary.db.CRUD.base_crud import BaseCRUD
from knowledge_rag.boundary.db.CRUD.chunk_crud import chunk_crud


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    The unique `source` column is the natural key; `id` stays stable
    across re-ingestions so references by id survive content updates.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_by_source(
        self,
        session: AsyncSession,
        source: str,
    ) -> DocumentModel | None:
        """
        Retrieve a document by its source identifier.

        Args:
            session: Async database session
            source: Source identifier (filename)

        Returns:
            DocumentModel if found, None otherwise
        """
        stmt = select(DocumentModel).where(DocumentModel.source == source).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_fields(
        self,
        session: AsyncSession,
        document: DocumentModel,
        **fields: Any,
    ) -> DocumentModel:
        """
        Update a loaded document in place and bump updated_at.

        Args:
            session: Async database session
            document: Document instance attached to the session
            **fields: Column values to assign

        Returns:
            The same DocumentModel with new values flushed
        """
        for name, value in fields.items():
            setattr(document, name, value)
        document.updated_at = utcnow()
        await session.flush()
        return document

    async def list_with_chunk_counts(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[tuple[DocumentModel, int]]:
        """
        List documents, most recently updated first, with chunk counts.

        Args:
            session: Async database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of (DocumentModel, chunk_count) pairs
        """
        chunk_count = func.count(ChunkModel.id).label("chunk_count")
        stmt = (
            select(DocumentModel, chunk_count)
            .outerjoin(ChunkModel, ChunkModel.doc_id == DocumentModel.id)
            .group_by(DocumentModel.id)
            .order_by(DocumentModel.updated_at.desc(), DocumentModel.source)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return [(row[0], int(row[1])) for row in result.all()]

    async def delete_cascade(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a document together with its chunks and their embeddings.

        Children are removed explicitly so the cascade also holds on
        backends that do not enforce foreign keys.

        Args:
            session: Async database session
            id: Document UUID

        Returns:
            True if the document existed and was deleted
        """
        await chunk_crud.delete_by_document_id(session, id)
        return await self.delete_by_id(session, id)


document_crud = DocumentCRUD()
