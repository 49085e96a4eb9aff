"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - DocumentModel, ChunkModel, EmbeddingModel: Knowledge base entities
  - document_crud, chunk_crud, embedding_crud: CRUD operation singletons

Dependencies: sqlalchemy, knowledge_rag.configs
System role: Database adapter for documents, chunks and embeddings with
cascading ownership Document -> Chunk -> Embedding.
"""

from knowledge_rag.boundary.db.base import Base, TimestampMixin, UUIDMixin
from knowledge_rag.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_default_session_factory,
)
from knowledge_rag.boundary.db.models import ChunkModel, DocumentModel, EmbeddingModel
from knowledge_rag.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    DocumentCRUD,
    EmbeddingCRUD,
    EmbeddingRow,
    chunk_crud,
    document_crud,
    embedding_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "get_default_session_factory",
    # Models
    "DocumentModel",
    "ChunkModel",
    "EmbeddingModel",
    # CRUD classes
    "BaseCRUD",
    "DocumentCRUD",
    "ChunkCRUD",
    "EmbeddingCRUD",
    "EmbeddingRow",
    # CRUD singletons
    "document_crud",
    "chunk_crud",
    "embedding_crud",
]
