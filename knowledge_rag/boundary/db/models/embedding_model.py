"""
Knowledge base embedding ORM model.

Vectors are stored as JSON arrays so the table works on any backend;
similarity is computed in memory at query time.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.base
System role: Vector persistence for chunks
"""

import uuid

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from knowledge_rag.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class EmbeddingModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Vector representation of one chunk under one embedding model.

    Attributes:
        id: UUID primary key
        chunk_id: Owning chunk (ON DELETE CASCADE)
        embedding: Vector as a list of floats
        model: Embedding model identifier

    Constraints:
        (chunk_id, model) unique: one active vector per chunk per model
    """

    __tablename__ = "kb_embeddings"
    __table_args__ = (
        UniqueConstraint("chunk_id", "model", name="uq_kb_embeddings_chunk_model"),
    )

    chunk_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("kb_chunks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    embedding: Mapped[list[float]] = mapped_column(JSON, nullable=False)

    model: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    chunk = relationship("ChunkModel", back_populates="embeddings")
