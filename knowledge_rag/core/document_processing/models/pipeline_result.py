"""
Pipeline result models for knowledge base ingestion.

Dependencies: pydantic
System role: Return types for DocumentPipeline and IngestionOrchestrator
"""

from pydantic import BaseModel, Field, computed_field


class PipelineResult(BaseModel):
    """Result of ingesting one document."""

    document_id: str = Field(description="Stable document identifier")
    source: str = Field(description="Source identifier (filename)")
    title: str = Field(description="Document title")
    chunk_count: int = Field(description="Number of chunks stored with embeddings")
    created: bool = Field(description="True on first ingestion, False on update")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")


class DocumentOutcome(BaseModel):
    """Per-file outcome recorded by a batch run."""

    source: str
    succeeded: bool
    chunk_count: int = 0
    error: str | None = None


class IngestionSummary(BaseModel):
    """Tally of a batch ingestion run."""

    outcomes: list[DocumentOutcome] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.outcomes)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @computed_field
    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 only when every document succeeded."""
        return 1 if self.failed else 0
