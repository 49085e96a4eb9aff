"""
Frontmatter parse result models.

Dependencies: pydantic
System role: Output of the first ingestion stage
"""

from pydantic import BaseModel, Field


class DocumentMetadata(BaseModel):
    """Metadata extracted from a document's header block."""

    title: str = Field(default="Untitled", description="Document title")
    tags: list[str] = Field(default_factory=list, description="Document tags")
    summary: str = Field(default="", description="One-line summary")

    @property
    def topic(self) -> str:
        """Single category string: the first tag, or "General"."""
        return self.tags[0] if self.tags else "General"


class FrontmatterResult(BaseModel):
    """
    Best-effort parse of a source document.

    Header lines that could not be parsed are kept in skipped_lines so
    callers can warn without failing ingestion.
    """

    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)
    body: str = Field(description="Document body after the header block")
    skipped_lines: list[str] = Field(
        default_factory=list,
        description="Header lines that were not valid `key: value` pairs",
    )
    has_frontmatter: bool = Field(
        default=False,
        description="Whether a delimited header block was found",
    )
