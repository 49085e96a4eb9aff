"""
Embedding provider client factory.

Builds the single OpenAI embeddings client shared by ingestion and search.
The client is created once at process start and passed by reference into
the pipeline and the retrieval service.

Dependencies: langchain_openai, knowledge_rag.configs
System role: Embedding provider adapter construction
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from knowledge_rag.configs.embedding import EmbeddingSettings
from knowledge_rag.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_embeddings_client(settings: EmbeddingSettings) -> Embeddings:
    """
    Create the embeddings client from explicit settings.

    Args:
        settings: Embedding provider settings

    Returns:
        Embeddings: LangChain embeddings client bound to the configured model

    Raises:
        ConfigurationError: When no API key is configured
    """
    if settings.api_key is None or not settings.api_key.get_secret_value().strip():
        raise ConfigurationError(
            "Embedding provider API key is not configured "
            "(set EMBEDDING_API_KEY or OPENAI_API_KEY)",
            setting="embedding.api_key",
        )

    client = OpenAIEmbeddings(
        model=settings.model,
        dimensions=settings.dimensions,
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
    logger.info(
        f"{__name__}:build_embeddings_client - Initialized with model={settings.model}, "
        f"dimensions={settings.dimensions}"
    )
    return client
