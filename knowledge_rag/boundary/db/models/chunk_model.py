"""
Knowledge base chunk ORM model.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.base
System role: Ordered text segments of a document
"""

import uuid
from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from knowledge_rag.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class ChunkModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Ordered text segment belonging to exactly one document.

    Attributes:
        id: UUID primary key
        doc_id: Owning document (ON DELETE CASCADE)
        idx: Zero-based position within the document
        content: Chunk text (always longer than the minimum floor)
        tokens: Approximate token count
        meta: Free-form metadata map (column name "metadata")

    Constraints:
        (doc_id, idx) unique
    """

    __tablename__ = "kb_chunks"
    __table_args__ = (UniqueConstraint("doc_id", "idx", name="uq_kb_chunks_doc_idx"),)

    doc_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("kb_documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    idx: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    tokens: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    meta: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )

    document = relationship("DocumentModel", back_populates="chunks")
    embeddings = relationship(
        "EmbeddingModel",
        back_populates="chunk",
        passive_deletes=True,
    )
