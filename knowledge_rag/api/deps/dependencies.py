"""
Dependency injection container.

Factory functions for FastAPI dependencies. The embedding provider client
is built once per process and shared by ingestion and retrieval.

Dependencies: knowledge_rag.configs, knowledge_rag.application, knowledge_rag.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.application.services import KnowledgeBaseService, RetrievalService
from knowledge_rag.boundary.db import get_async_db, get_default_session_factory
from knowledge_rag.boundary.llm import build_embeddings_client
from knowledge_rag.configs import Settings, get_settings
from knowledge_rag.core.document_processing import DocumentPipeline, EmbeddingTask
from knowledge_rag.core.exceptions import ConfigurationError


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._embedding_task: EmbeddingTask | None = None
        self._document_pipeline: DocumentPipeline | None = None
        self._retrieval_service: RetrievalService | None = None

    @property
    def settings(self) -> Settings:
        """Settings used to build services (application settings by default)."""
        return self._settings or get_settings()

    @property
    def embedding_task(self) -> EmbeddingTask:
        """
        Get cached embedding task.

        Raises:
            ConfigurationError: When the provider credential is missing
        """
        if self._embedding_task is None:
            embedding = self.settings.embedding
            self._embedding_task = EmbeddingTask(
                client=build_embeddings_client(embedding),
                model_id=embedding.model,
                dimensions=embedding.dimensions,
            )
        return self._embedding_task

    @property
    def document_pipeline(self) -> DocumentPipeline:
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            self._document_pipeline = DocumentPipeline.from_settings(
                session_factory=get_default_session_factory(),
                embedding_task=self.embedding_task,
                settings=self.settings.ingestion,
            )
        return self._document_pipeline

    @property
    def retrieval_service(self) -> RetrievalService:
        """Get cached retrieval service."""
        if self._retrieval_service is None:
            self._retrieval_service = RetrievalService(embedding_task=self.embedding_task)
        return self._retrieval_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_task = None
        self._document_pipeline = None
        self._retrieval_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_retrieval_service() -> RetrievalService | None:
    """
    Get retrieval service, or None when the embedding provider is not configured.

    Returns:
        RetrievalService | None: Shared retrieval service
    """
    try:
        return get_service_cache().retrieval_service
    except ConfigurationError:
        return None


def get_knowledge_base_service(db: AsyncSession = Depends(get_async_db)) -> KnowledgeBaseService:
    """
    Get knowledge base service instance.

    Read operations work without an embedding provider; writes that need
    embeddings raise ConfigurationError.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        KnowledgeBaseService: Knowledge base service instance
    """
    try:
        pipeline = get_service_cache().document_pipeline
    except ConfigurationError:
        pipeline = None
    return KnowledgeBaseService(db=db, pipeline=pipeline)
