"""
Vector index schemas.

Pydantic models for entries held by a vector index and the scored
results it returns.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """Parent document fields carried with every indexed vector."""

    title: str = Field(description="Parent document title")
    tags: list[str] = Field(default_factory=list, description="Parent document tags")
    source: str = Field(description="Parent document source identifier")


class VectorEntry(BaseModel):
    """One chunk vector stored in an index."""

    chunk_id: str = Field(description="Chunk identifier")
    vector: list[float] = Field(description="Embedding vector")
    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Parent document metadata")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Parent document metadata")
    similarity_score: float = Field(
        description="Cosine similarity in [-1.0, 1.0]",
        ge=-1.0,
        le=1.0,
    )
