"""
Ingestion pipeline configuration settings.

Chunking parameters, source directory and provider throttle for the
knowledge base batch ingestion job.

Dependencies: pydantic, pydantic_settings
System role: Centralized ingestion configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for knowledge base ingestion."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KB_INGEST_",
        case_sensitive=False,
        extra="ignore",
    )

    docs_dir: str = Field(
        default="docs/knowledge",
        description="Directory holding the markdown source documents",
    )
    file_extensions: list[str] = Field(
        default=[".md", ".mdx"],
        description="File suffixes picked up by the batch job",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=600,
        description="Target chunk size in estimated tokens",
        gt=0,
    )
    chunk_overlap: int = Field(
        default=100,
        description="Words carried over from the previous chunk",
        ge=0,
    )
    min_chunk_chars: int = Field(
        default=50,
        description="Chunks of this many characters or fewer are discarded",
        ge=0,
    )

    # Provider throttle
    rate_limit_interval_seconds: float = Field(
        default=0.35,
        description="Minimum delay between embedding requests",
        ge=0.0,
    )
