"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from knowledge_rag.boundary.db.CRUD import document_crud, chunk_crud

    document = await document_crud.get_by_source(db, "pricing.md")
    chunks = await chunk_crud.get_by_document_id(db, document.id)
"""

from knowledge_rag.boundary.db.CRUD.base_crud import BaseCRUD
from knowledge_rag.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from knowledge_rag.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from knowledge_rag.boundary.db.CRUD.embedding_crud import (
    EmbeddingCRUD,
    EmbeddingRow,
    embedding_crud,
)

__all__ = [
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
    "DocumentCRUD",
    "document_crud",
    "EmbeddingCRUD",
    "EmbeddingRow",
    "embedding_crud",
]
