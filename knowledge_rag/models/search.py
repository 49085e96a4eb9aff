"""
Search domain models and schemas.

Request/response schemas for knowledge base retrieval.

Dependencies: pydantic
System role: Retrieval API contracts
"""

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """One ranked chunk with its parent document fields."""

    id: str = Field(description="Chunk identifier")
    title: str = Field(description="Parent document title")
    content: str = Field(description="Chunk text content")
    tags: list[str] = Field(default_factory=list, description="Parent document tags")
    score: float = Field(description="Cosine similarity score")
    source: str = Field(description="Parent document source identifier")


class SearchRequest(BaseModel):
    """Request schema for a knowledge base query."""

    query: str = Field(min_length=1, description="Free-text query")
    limit: int | None = Field(default=None, ge=1, description="Maximum number of results")


class SearchResponse(BaseModel):
    """Ranked search results."""

    query: str
    results: list[SearchResult]
    count: int
    message: str | None = Field(
        default=None,
        description="Set when retrieval is unavailable and results are empty",
    )


class StatsResponse(BaseModel):
    """Row counts of the knowledge base tables."""

    documents: int
    chunks: int
    embeddings: int
