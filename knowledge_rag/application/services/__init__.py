"""Service orchestrators."""

from .knowledge_base_service import KnowledgeBaseService
from .retrieval_service import RetrievalService

__all__ = [
    "KnowledgeBaseService",
    "RetrievalService",
]
