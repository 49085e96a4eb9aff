"""
Knowledge base service orchestrator.

Coordinates document management for the admin surface: listing,
create/update/delete, recomputing one document's chunks and embeddings,
and table statistics.

Dependencies: knowledge_rag.boundary.db.CRUD, knowledge_rag.core.document_processing
System role: Knowledge base management use case orchestration
"""

import logging
import re
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.CRUD import chunk_crud, document_crud, embedding_crud
from knowledge_rag.boundary.db.models import DocumentModel
from knowledge_rag.core.document_processing import DocumentPipeline, SavingTask
from knowledge_rag.core.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    ValidationError,
)
from knowledge_rag.models.document import (
    DocumentCreateRequest,
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentSummaryResponse,
    DocumentUpdateRequest,
    RecomputeResponse,
)
from knowledge_rag.models.search import StatsResponse

logger = logging.getLogger(__name__)


def derive_source(title: str) -> str:
    """Build a source identifier from a title: lowercase, whitespace runs to "_", ".md"."""
    slug = re.sub(r"\s+", "_", title.strip().lower())
    return f"{slug}.md"


class KnowledgeBaseService:
    """Knowledge base management service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        pipeline: DocumentPipeline | None = None,
        saving_task: SavingTask | None = None,
    ) -> None:
        """
        Initialize knowledge base service.

        Args:
            db: Async SQLAlchemy session
            pipeline: Document pipeline for chunking and embedding; read
                operations work without it
            saving_task: Document store operations
        """
        self.db = db
        self._pipeline = pipeline
        self._saving_task = saving_task or SavingTask()

    async def list_documents(self, limit: int | None = None, offset: int = 0) -> DocumentListResponse:
        """
        List documents, most recently updated first, with chunk counts.

        Args:
            limit: Maximum number of documents (all if None)
            offset: Number to skip

        Returns:
            DocumentListResponse: Page of documents and the total count
        """
        rows = await document_crud.list_with_chunk_counts(self.db, limit=limit, offset=offset)
        total = await document_crud.count(self.db)
        documents = [
            DocumentSummaryResponse(
                id=document.id,
                title=document.title,
                topic=document.topic,
                tags=document.tags,
                source=document.source,
                updated_at=document.updated_at,
                chunk_count=chunk_count,
            )
            for document, chunk_count in rows
        ]
        return DocumentListResponse(documents=documents, total=total)

    async def get_document(self, document_id: UUID) -> DocumentDetailResponse:
        """
        Get one document with its content and metadata.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        document = await self._require_document(document_id)
        return DocumentDetailResponse.model_validate(document)

    async def create_document(self, request: DocumentCreateRequest) -> DocumentDetailResponse:
        """
        Store a document and embed its chunks.

        A document whose source already exists is rewritten in place, the
        same way batch ingestion treats it.

        Args:
            request: Title, topic, content, tags, optional source and summary

        Returns:
            DocumentDetailResponse: Stored document

        Raises:
            ConfigurationError: No embedding pipeline is configured
            DocumentProcessingError: Chunk embedding or storage failed
        """
        pipeline = self._require_pipeline()
        source = request.source or derive_source(request.title)

        try:
            document, created = await self._saving_task.upsert_document(
                self.db,
                source=source,
                title=request.title,
                topic=request.topic,
                tags=request.tags,
                body=request.content,
                metadata={"summary": request.summary},
            )
            chunk_count = await pipeline.store_chunks(
                self.db, document.id, document.content, source
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"{__name__}:create_document - KB document {'created' if created else 'replaced'}",
            extra={"document_id": str(document.id), "source": source, "chunk_count": chunk_count},
        )
        return DocumentDetailResponse.model_validate(document)

    async def update_document(
        self,
        document_id: UUID,
        request: DocumentUpdateRequest,
    ) -> DocumentDetailResponse:
        """
        Apply a partial update.

        Changing the content rebuilds the document's chunks and embeddings;
        metadata-only edits leave them in place.

        Raises:
            DocumentNotFoundError: If no document has this id
            ConfigurationError: Content changed but no embedding pipeline is configured
            ValidationError: A provided field is blank
        """
        document = await self._require_document(document_id)

        fields: dict[str, Any] = request.model_dump(exclude_none=True, exclude={"summary"})
        for name in ("title", "topic", "content"):
            if name in fields and not fields[name].strip():
                raise ValidationError(f"{name} cannot be blank", field=name)
        if request.summary is not None:
            fields["meta"] = {**(document.meta or {}), "summary": request.summary}

        content_changed = "content" in fields and fields["content"] != document.content
        pipeline = self._require_pipeline() if content_changed else None

        try:
            await document_crud.update_fields(self.db, document, **fields)
            if pipeline is not None:
                await chunk_crud.delete_by_document_id(self.db, document.id)
                await pipeline.store_chunks(self.db, document.id, document.content, document.source)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"{__name__}:update_document - KB document updated",
            extra={"document_id": str(document_id), "rechunked": content_changed},
        )
        return DocumentDetailResponse.model_validate(document)

    async def delete_document(self, document_id: UUID) -> None:
        """
        Delete a document with its chunks and embeddings.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        try:
            deleted = await self._saving_task.delete_document(self.db, document_id)
            if not deleted:
                raise DocumentNotFoundError(str(document_id))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"{__name__}:delete_document - KB document deleted",
            extra={"document_id": str(document_id)},
        )

    async def recompute(self, document_id: UUID) -> RecomputeResponse:
        """
        Re-chunk and re-embed one document from its stored content.

        Old chunks and embeddings are replaced in the same transaction; a
        failure keeps them.

        Raises:
            DocumentNotFoundError: If no document has this id
            ConfigurationError: No embedding pipeline is configured
        """
        pipeline = self._require_pipeline()
        document = await self._require_document(document_id)

        logger.info(
            f"{__name__}:recompute - Recomputing embeddings",
            extra={"document_id": str(document_id), "source": document.source},
        )
        try:
            await chunk_crud.delete_by_document_id(self.db, document.id)
            chunk_count = await pipeline.store_chunks(
                self.db, document.id, document.content, document.source
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return RecomputeResponse(id=document.id, chunk_count=chunk_count)

    async def stats(self) -> StatsResponse:
        """Row counts of documents, chunks and embeddings."""
        return StatsResponse(
            documents=await document_crud.count(self.db),
            chunks=await chunk_crud.count(self.db),
            embeddings=await embedding_crud.count(self.db),
        )

    async def _require_document(self, document_id: UUID) -> DocumentModel:
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        return document

    def _require_pipeline(self) -> DocumentPipeline:
        if self._pipeline is None:
            raise ConfigurationError(
                "Embedding provider is not configured",
                setting="EMBEDDING_API_KEY",
            )
        return self._pipeline
