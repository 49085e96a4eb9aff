"""
Domain error to HTTP status mapping.

Dependencies: fastapi, knowledge_rag.core.exceptions
System role: Error translation for API endpoints
"""

import logging

from fastapi import HTTPException

from knowledge_rag.core.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    KnowledgeBaseException,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: Exception, action: str) -> HTTPException:
    """
    Translate an exception raised by a service into an HTTPException.

    ValidationError -> 400, DocumentNotFoundError -> 404,
    ConfigurationError -> 503, anything else -> 500.

    Args:
        exc: Exception raised by the service
        action: Short description used in 500 details ("KB query")

    Returns:
        HTTPException: Exception to raise from the endpoint
    """
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=400, detail=exc.message)
    if isinstance(exc, DocumentNotFoundError):
        return HTTPException(status_code=404, detail=exc.message)
    if isinstance(exc, ConfigurationError):
        return HTTPException(status_code=503, detail=exc.message)

    message = exc.message if isinstance(exc, KnowledgeBaseException) else str(exc)
    logger.error(f"{__name__}:to_http_exception - {action} failed: {message}", exc_info=exc)
    return HTTPException(status_code=500, detail=f"{action} failed: {message}")
