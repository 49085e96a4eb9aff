"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, deterministic embeddings client,
pipeline and service fixtures, temp knowledge base directories
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid
from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from knowledge_rag.boundary.db.create_tables import create_all_tables, drop_all_tables
from knowledge_rag.core.document_processing import (
    ChunkingTask,
    DocumentPipeline,
    EmbeddingTask,
    RateLimiter,
)

TEST_MODEL_ID = "test-embedding-model"

# One vector component per keyword plus a constant bias component,
# so every text has a non-zero vector
KEYWORDS = ("pricing", "marketing", "launch", "email", "design", "template", "audience", "refund")
TEST_DIMENSIONS = len(KEYWORDS) + 1


class KeywordEmbeddings(Embeddings):
    """
    Deterministic embeddings: keyword occurrence counts plus a bias term.

    Texts containing any of `fail_on` raise, to simulate provider errors.
    """

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        for marker in self.fail_on:
            if marker in text:
                raise RuntimeError(f"provider rejected input containing {marker!r}")
        lowered = text.lower()
        return [float(lowered.count(keyword)) for keyword in KEYWORDS] + [0.1]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    async def aembed_query(self, text: str) -> list[float]:
        return self.embed_query(text)


def _write_markdown(directory: Path, name: str, title: str, tags: list[str], body: str) -> Path:
    """Write a markdown source with a frontmatter header."""
    path = directory / name
    path.write_text(
        f"---\ntitle: \"{title}\"\ntags: [{', '.join(tags)}]\nsummary: \"About {title}\"\n---\n{body}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of the test
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(session_factory):
    """
    Create a session on the in-memory database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def embeddings_client() -> KeywordEmbeddings:
    """Deterministic embeddings client."""
    return KeywordEmbeddings()


@pytest.fixture
def embedding_task(embeddings_client: KeywordEmbeddings) -> EmbeddingTask:
    """Embedding task bound to the deterministic client."""
    return EmbeddingTask(
        client=embeddings_client,
        model_id=TEST_MODEL_ID,
        dimensions=TEST_DIMENSIONS,
    )


@pytest.fixture
def pipeline(session_factory, embedding_task: EmbeddingTask) -> DocumentPipeline:
    """Document pipeline with no throttling and small chunks."""
    return DocumentPipeline(
        session_factory=session_factory,
        embedding_task=embedding_task,
        rate_limiter=RateLimiter(min_interval_seconds=0.0),
        chunking_task=ChunkingTask(chunk_size=60, chunk_overlap=5),
    )


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Empty knowledge base directory."""
    directory = tmp_path / "knowledge"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


@pytest.fixture
def markdown_writer():
    """Function writing a markdown source with a frontmatter header."""
    return _write_markdown


@pytest.fixture
def embedding_dimensions() -> int:
    """Vector length produced by the deterministic embeddings client."""
    return TEST_DIMENSIONS


@pytest.fixture
def make_embeddings():
    """Factory for deterministic embeddings clients, optionally failing on markers."""
    return KeywordEmbeddings
