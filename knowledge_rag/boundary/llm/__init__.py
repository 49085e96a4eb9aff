"""
Embedding provider boundary.
"""

from knowledge_rag.boundary.llm.embeddings_client import build_embeddings_client

__all__ = ["build_embeddings_client"]
