"""
ORM models for the knowledge base tables.
"""

from knowledge_rag.boundary.db.models.document_model import DocumentModel
from knowledge_rag.boundary.db.models.chunk_model import ChunkModel
from knowledge_rag.boundary.db.models.embedding_model import EmbeddingModel

__all__ = ["DocumentModel", "ChunkModel", "EmbeddingModel"]
