"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_knowledge_base_service,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_knowledge_base_service",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
]
