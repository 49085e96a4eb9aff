"""API routers."""

from .health import router as health_router
from .kb import router as kb_router
from .rag import router as rag_router

__all__ = [
    "health_router",
    "kb_router",
    "rag_router",
]
