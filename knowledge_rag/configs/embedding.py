"""
Embedding provider configuration settings.

Credentials and model parameters for the external embedding model.
The API key is also accepted from the conventional OPENAI_API_KEY variable.

Dependencies: pydantic, pydantic_settings
System role: Embedding provider configuration for ingestion and search
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """OpenAI-compatible embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("EMBEDDING_API_KEY", "OPENAI_API_KEY"),
        description="Embedding provider API key",
    )
    base_url: str | None = Field(
        default=None,
        description="Optional OpenAI-compatible base URL",
    )
    model: str = Field(
        default="text-embedding-3-large",
        description="Embedding model identifier stored alongside every vector",
    )
    dimensions: int = Field(
        default=1536,
        description="Embedding vector dimension shared by the whole index",
        gt=0,
    )
    request_timeout: float = Field(
        default=30.0,
        description="Per-request timeout in seconds",
    )
    max_retries: int = Field(
        default=2,
        description="Client-side retries for transient provider errors",
    )
