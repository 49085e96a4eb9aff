"""
Knowledge base management API endpoints.

Routes:
- GET /kb - List documents with chunk counts
- GET /kb/{id} - Get one document
- POST /kb - Create a document and embed its chunks
- PUT /kb/{id} - Update a document
- DELETE /kb/{id} - Delete a document with its chunks and embeddings
- POST /kb/recompute - Re-chunk and re-embed one document

Dependencies: knowledge_rag.application.services, knowledge_rag.models
System role: Knowledge base management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from knowledge_rag.api.deps import get_knowledge_base_service
from knowledge_rag.api.routers.router_utils import to_http_exception
from knowledge_rag.application.services import KnowledgeBaseService
from knowledge_rag.models.document import (
    DocumentCreateRequest,
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentUpdateRequest,
    RecomputeRequest,
    RecomputeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kb", tags=["knowledge-base"])


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> DocumentListResponse:
    """
    List documents, most recently updated first.

    Raises:
        HTTPException(500): Retrieval failed
    """
    try:
        return await kb_service.list_documents(limit=limit, offset=offset)
    except Exception as e:
        raise to_http_exception(e, "List KB documents")


@router.post("/recompute", response_model=RecomputeResponse)
async def recompute_embeddings(
    request: RecomputeRequest,
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> RecomputeResponse:
    """
    Replace one document's chunks and embeddings from its stored content.

    Raises:
        HTTPException(404): Document not found
        HTTPException(503): Embedding provider not configured
        HTTPException(500): Embedding or storage failed
    """
    try:
        return await kb_service.recompute(request.id)
    except Exception as e:
        raise to_http_exception(e, "Recompute embeddings")


@router.get("/{document_id}", response_model=DocumentDetailResponse)
async def get_document(
    document_id: UUID,
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> DocumentDetailResponse:
    """
    Get one document.

    Raises:
        HTTPException(404): Document not found
    """
    try:
        return await kb_service.get_document(document_id)
    except Exception as e:
        raise to_http_exception(e, "Get KB document")


@router.post("", response_model=DocumentDetailResponse, status_code=201)
async def create_document(
    request: DocumentCreateRequest,
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> DocumentDetailResponse:
    """
    Create a document and embed its chunks.

    Raises:
        HTTPException(503): Embedding provider not configured
        HTTPException(500): Embedding or storage failed
    """
    try:
        return await kb_service.create_document(request)
    except Exception as e:
        raise to_http_exception(e, "Create KB document")


@router.put("/{document_id}", response_model=DocumentDetailResponse)
async def update_document(
    document_id: UUID,
    request: DocumentUpdateRequest,
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> DocumentDetailResponse:
    """
    Update a document; a content change rebuilds its chunks.

    Raises:
        HTTPException(400): A provided field is blank
        HTTPException(404): Document not found
    """
    try:
        return await kb_service.update_document(document_id, request)
    except Exception as e:
        raise to_http_exception(e, "Update KB document")


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: UUID,
    kb_service: KnowledgeBaseService = Depends(get_knowledge_base_service),
) -> None:
    """
    Delete a document with its chunks and embeddings.

    Raises:
        HTTPException(404): Document not found
    """
    try:
        await kb_service.delete_document(document_id)
    except Exception as e:
        raise to_http_exception(e, "Delete KB document")
