"""
RAG API endpoints.

Routes:
- POST /rag/query - Vector similarity search over the knowledge base
- GET /rag/stats - Document, chunk and embedding counts

Dependencies: knowledge_rag.application.services, knowledge_rag.models
System role: Retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.api.deps import (
    get_knowledge_base_service,
    get_retrieval_service,
    get_settings_dependency,
)
from knowledge_rag.api.routers.router_utils import to_http_exception
from knowledge_rag.application.services import KnowledgeBaseService, RetrievalService
from knowledge_rag.boundary.db import get_async_db
from knowledge_rag.configs import Settings
from knowledge_rag.models.search import SearchRequest, SearchResponse, StatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rag", tags=["rag"])

RAG_UNAVAILABLE_MESSAGE = "Embedding provider not configured - RAG unavailable"


@router.post("/query", response_model=SearchResponse)
async def query_knowledge_base(
    request: SearchRequest,
    db: AsyncSession = Depends(get_async_db),
    retrieval_service: RetrievalService | None = Depends(get_retrieval_service),
    settings: Settings = Depends(get_settings_dependency),
) -> SearchResponse:
    """
    Query the knowledge base with vector similarity search.

    Without a configured embedding provider the response is empty and
    carries an explanatory message instead of failing.

    Args:
        request: Query text and optional result limit
        db: Injected database session
        retrieval_service: Injected RetrievalService (None if unconfigured)
        settings: Application settings

    Returns:
        SearchResponse: Ranked results

    Raises:
        HTTPException(400): Blank query
        HTTPException(500): Embedding or retrieval failed
    """
    logger.info(f"{__name__}:query_knowledge_base - RAG query", extra={"query": request.query})

    if retrieval_service is None:
        return SearchResponse(
            query=request.query,
            results=[],
            count=0,
            message=RAG_UNAVAILABLE_MESSAGE,
        )

    retrieval = settings.retrieval
    limit = min(request.limit or retrieval.default_limit, retrieval.max_limit)

    try:
        results = await retrieval_service.search(db, request.query, limit)
    except Exception as e:
        raise to_http_exception(e, "RAG query")

    return SearchResponse(query=request.query, results=results, count=len(results))


@router.get("/stats", response_model=StatsResponse)
async def knowledge_base_stats(
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> StatsResponse:
    """
    Get row counts of the knowledge base tables.

    Raises:
        HTTPException(500): Count queries failed
    """
    try:
        return await kb_service.stats()
    except Exception as e:
        raise to_http_exception(e, "KB stats")
