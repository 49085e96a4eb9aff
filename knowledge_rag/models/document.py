"""
Knowledge base document schemas.

Request/response schemas for the management surface.

Dependencies: pydantic
System role: Document management API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocumentSummaryResponse(BaseModel):
    """Document row in a listing."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    topic: str
    tags: list[str]
    source: str
    updated_at: datetime
    chunk_count: int = 0


class DocumentDetailResponse(BaseModel):
    """Full document with content and metadata."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    topic: str
    tags: list[str]
    source: str
    content: str
    metadata: dict[str, Any] = Field(validation_alias=AliasChoices("meta", "metadata"))
    created_at: datetime
    updated_at: datetime


class DocumentListResponse(BaseModel):
    """Document listing response."""

    documents: list[DocumentSummaryResponse]
    total: int


class DocumentCreateRequest(BaseModel):
    """Request schema for creating a document from the admin surface."""

    title: str = Field(min_length=1)
    topic: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    source: str | None = Field(
        default=None,
        description="Source identifier; derived from the title when omitted",
    )
    summary: str = ""


class DocumentUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their stored values."""

    title: str | None = None
    topic: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    summary: str | None = None


class RecomputeRequest(BaseModel):
    """Request schema for re-embedding one document."""

    id: uuid.UUID


class RecomputeResponse(BaseModel):
    """Outcome of a recompute."""

    id: uuid.UUID
    chunk_count: int
