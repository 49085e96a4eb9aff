"""
FastAPI application with assembled routers.

Initializes FastAPI app with the retrieval and knowledge base routers and
configures uvicorn server.

Dependencies: fastapi, knowledge_rag.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from knowledge_rag.api.deps.dependencies import get_service_cache
from knowledge_rag.configs import get_settings
from knowledge_rag.core.exceptions import ConfigurationError
from knowledge_rag.observability import configure_logging

from .routers import health_router, kb_router, rag_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the embedding provider client once at startup. A missing
    credential leaves the API up with retrieval disabled.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    try:
        _ = cache.retrieval_service
        _ = cache.document_pipeline
        logger.info("Service cache pre-warmed")
    except ConfigurationError as e:
        logger.warning(f"RAG unavailable: {e}")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Knowledge Base RAG API",
        description="Knowledge base ingestion and retrieval for grounded AI responses",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(rag_router, prefix="/api")
    app.include_router(kb_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "knowledge_rag.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
