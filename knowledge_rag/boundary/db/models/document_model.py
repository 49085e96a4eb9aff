"""
Knowledge base document ORM model.

Represents one ingested article. The source filename is the natural key
used for idempotent re-ingestion.

Dependencies: sqlalchemy, knowledge_rag.boundary.db.base
System role: Document persistence for the knowledge base
"""

from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from knowledge_rag.boundary.db.base import Base, UUIDMixin, TimestampMixin


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Knowledge base document.

    Lifecycle: created on first ingestion of a source, updated in place
    (same id, chunks regenerated) on re-ingestion, removed only by an
    explicit delete that cascades to chunks and embeddings.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Document title from frontmatter
        topic: Single category string (first tag or "General")
        tags: List of tag strings
        source: Unique source identifier, usually the filename
        content: Markdown body after the frontmatter block
        meta: Free-form metadata map (column name "metadata"), holds summary
        created_at: First ingestion timestamp (UTC)
        updated_at: Last re-ingestion timestamp (UTC)

    Relationships:
        chunks: Owned ChunkModels ordered by idx
    """

    __tablename__ = "kb_documents"

    title: Mapped[str] = mapped_column(String(512), nullable=False)

    topic: Mapped[str] = mapped_column(String(255), nullable=False, default="General")

    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    source: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        unique=True,
        index=True,
        doc="Natural key for idempotent upsert",
    )

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # "metadata" is reserved on declarative classes
    meta: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )

    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        order_by="ChunkModel.idx",
        passive_deletes=True,
    )
