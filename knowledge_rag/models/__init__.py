"""
API request/response schemas.
"""

from knowledge_rag.models.document import (
    DocumentCreateRequest,
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentSummaryResponse,
    DocumentUpdateRequest,
    RecomputeRequest,
    RecomputeResponse,
)
from knowledge_rag.models.search import (
    SearchRequest,
    SearchResponse,
    SearchResult,
    StatsResponse,
)

__all__ = [
    "DocumentCreateRequest",
    "DocumentDetailResponse",
    "DocumentListResponse",
    "DocumentSummaryResponse",
    "DocumentUpdateRequest",
    "RecomputeRequest",
    "RecomputeResponse",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "StatsResponse",
]
