"""
API test fixtures.

Provides a TestClient whose service dependencies are replaced with mocks.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from knowledge_rag.api.deps import (
    get_knowledge_base_service,
    get_retrieval_service,
)
from knowledge_rag.api.main import create_app
from knowledge_rag.boundary.db import get_async_db


@pytest.fixture
def mock_db() -> AsyncMock:
    """Mock request-scoped database session."""
    return AsyncMock()


@pytest.fixture
def mock_retrieval_service() -> MagicMock:
    service = MagicMock()
    service.search = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_kb_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def app(mock_db, mock_retrieval_service, mock_kb_service):
    """Application with database and services overridden."""
    app = create_app()

    async def override_db():
        yield mock_db

    app.dependency_overrides[get_async_db] = override_db
    app.dependency_overrides[get_retrieval_service] = lambda: mock_retrieval_service
    app.dependency_overrides[get_knowledge_base_service] = lambda: mock_kb_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
