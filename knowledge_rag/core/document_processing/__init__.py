"""
Knowledge base document processing pipeline.

Exports: DocumentPipeline, IngestionOrchestrator, RateLimiter and the
pipeline tasks.
"""

from .entrypoint import DocumentPipeline
from .orchestrator import IngestionOrchestrator
from .rate_limiter import RateLimiter
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask, SavingTask, parse_frontmatter
from .tokens import estimate_tokens

__all__ = [
    "DocumentPipeline",
    "IngestionOrchestrator",
    "RateLimiter",
    "ChunkingTask",
    "EmbeddingTask",
    "ParsingTask",
    "SavingTask",
    "parse_frontmatter",
    "estimate_tokens",
]
