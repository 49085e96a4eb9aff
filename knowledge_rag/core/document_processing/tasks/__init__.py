"""
Ingestion pipeline tasks: parse, chunk, embed, save.
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .parsing_task import ParsingTask, parse_frontmatter
from .saving_task import SavingTask

__all__ = [
    "ChunkingTask",
    "EmbeddingTask",
    "ParsingTask",
    "parse_frontmatter",
    "SavingTask",
]
