"""
Models for the document ingestion pipeline.

Exports: DocumentMetadata, FrontmatterResult, PipelineResult,
DocumentOutcome, IngestionSummary
"""

from .frontmatter import DocumentMetadata, FrontmatterResult
from .pipeline_result import DocumentOutcome, IngestionSummary, PipelineResult

__all__ = [
    "DocumentMetadata",
    "FrontmatterResult",
    "PipelineResult",
    "DocumentOutcome",
    "IngestionSummary",
]
