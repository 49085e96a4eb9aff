"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from knowledge_rag.api.routers.router_utils.error_utils import to_http_exception

__all__ = [
    "to_http_exception",
]
