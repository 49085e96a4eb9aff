"""
Document store task.

Idempotent document upsert keyed by source, plus chunk and embedding
inserts. Operations run in the caller's session; the caller owns the
transaction so one document's rewrite commits or rolls back as a unit.

Dependencies: sqlalchemy, knowledge_rag.boundary.db
System role: Fourth stage of the knowledge base ingestion pipeline
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.CRUD import chunk_crud, document_crud, embedding_crud
from knowledge_rag.boundary.db.models import ChunkModel, DocumentModel, EmbeddingModel
from knowledge_rag.core.exceptions import DocumentStoreError

logger = logging.getLogger(__name__)


class SavingTask:
    """Persist documents, chunks and embeddings."""

    async def upsert_document(
        self,
        session: AsyncSession,
        source: str,
        title: str,
        topic: str,
        tags: list[str],
        body: str,
        metadata: dict[str, Any] | None = None,
    ) -> tuple[DocumentModel, bool]:
        """
        Insert a document or rewrite the existing one with the same source.

        An existing document keeps its id; its chunks and their embeddings
        are deleted before the fields are replaced.

        Args:
            session: Async database session (inside the caller's transaction)
            source: Unique source identifier
            title: Document title
            topic: Category string
            tags: Tag list
            body: Markdown body
            metadata: Free-form metadata map

        Returns:
            tuple[DocumentModel, bool]: The document and True if it was created

        Raises:
            DocumentStoreError: When a database operation fails
        """
        fields = {
            "title": title,
            "topic": topic,
            "tags": list(tags),
            "content": body,
            "meta": dict(metadata or {}),
        }
        try:
            existing = await document_crud.get_by_source(session, source)
            if existing is not None:
                removed = await chunk_crud.delete_by_document_id(session, existing.id)
                logger.info(
                    f"{__name__}:upsert_document - Updating existing document",
                    extra={"source": source, "document_id": str(existing.id), "removed_chunks": removed},
                )
                document = await document_crud.update_fields(session, existing, **fields)
                return document, False

            document = await document_crud.create(session, source=source, **fields)
            logger.info(
                f"{__name__}:upsert_document - Created document",
                extra={"source": source, "document_id": str(document.id)},
            )
            return document, True
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to upsert document: {e}",
                operation="upsert_document",
                source=source,
            ) from e

    async def insert_chunk(
        self,
        session: AsyncSession,
        document_id: UUID,
        index: int,
        content: str,
        token_count: int,
        metadata: dict[str, Any] | None = None,
    ) -> ChunkModel:
        """
        Append a chunk to a document.

        Raises:
            DocumentStoreError: When the insert fails (e.g. duplicate index)
        """
        try:
            return await chunk_crud.create(
                session,
                doc_id=document_id,
                idx=index,
                content=content,
                tokens=token_count,
                meta=dict(metadata or {}),
            )
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to insert chunk {index}: {e}",
                operation="insert_chunk",
                details={"document_id": str(document_id), "index": index},
            ) from e

    async def insert_embedding(
        self,
        session: AsyncSession,
        chunk_id: UUID,
        vector: list[float],
        model_id: str,
    ) -> EmbeddingModel:
        """
        Attach a vector to a chunk.

        Raises:
            DocumentStoreError: When the insert fails
        """
        try:
            return await embedding_crud.create(
                session,
                chunk_id=chunk_id,
                embedding=list(vector),
                model=model_id,
            )
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to insert embedding: {e}",
                operation="insert_embedding",
                details={"chunk_id": str(chunk_id), "model": model_id},
            ) from e

    async def delete_document(self, session: AsyncSession, document_id: UUID) -> bool:
        """
        Delete a document with its chunks and embeddings.

        Returns:
            bool: True if the document existed

        Raises:
            DocumentStoreError: When the delete fails
        """
        try:
            return await document_crud.delete_cascade(session, document_id)
        except SQLAlchemyError as e:
            raise DocumentStoreError(
                f"Failed to delete document: {e}",
                operation="delete_document",
                details={"document_id": str(document_id)},
            ) from e
