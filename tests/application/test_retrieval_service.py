"""
Test suite for RetrievalService.

Runs searches against documents ingested into an in-memory SQLite store
with deterministic keyword embeddings.

System role: Verification of vector search
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.application.services import RetrievalService
from knowledge_rag.application.services.retrieval_service import NO_CONTEXT_MESSAGE
from knowledge_rag.core.document_processing import DocumentPipeline, EmbeddingTask, SavingTask
from knowledge_rag.core.exceptions import RetrievalError, ValidationError


def _document(title: str, tags: list[str], *sections: str) -> str:
    header = f'---\ntitle: "{title}"\ntags: [{", ".join(tags)}]\n---\n'
    return header + "\n".join(sections)


PRICING_SECTION = "## Pricing\nSet pricing by value: pricing tiers and pricing anchors for digital products."
LAUNCH_SECTION = "## Launch\nPlan the launch week with a launch checklist and a countdown for your audience."
EMAIL_SECTION = "## Email\nWrite an email sequence that warms up your list before the product goes live."


@pytest.fixture
async def seeded_pipeline(pipeline: DocumentPipeline) -> DocumentPipeline:
    """Pipeline after ingesting three small documents."""
    await pipeline.process_text("pricing.md", _document("Pricing Guide", ["pricing"], PRICING_SECTION))
    await pipeline.process_text("launch.md", _document("Launch Plan", ["launch", "marketing"], LAUNCH_SECTION))
    await pipeline.process_text("email.md", _document("Email Basics", ["email"], EMAIL_SECTION))
    return pipeline


@pytest.fixture
def retrieval_service(embedding_task: EmbeddingTask) -> RetrievalService:
    return RetrievalService(embedding_task=embedding_task)


class TestRetrievalServiceSearch:
    """Test suite for RetrievalService.search()."""

    async def test_search_should_rank_matching_chunk_first(
        self,
        seeded_pipeline: DocumentPipeline,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
    ) -> None:
        """Test the chunk sharing the query's keyword ranks highest with its document fields."""
        # Act
        results = await retrieval_service.search(test_async_db, "pricing", limit=3)

        # Assert
        assert len(results) == 3
        top = results[0]
        assert top.title == "Pricing Guide"
        assert top.source == "pricing.md"
        assert top.tags == ["pricing"]
        assert top.content == PRICING_SECTION
        assert top.score > results[1].score
        assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)
        assert all(-1.0 <= r.score <= 1.0 for r in results)

    @pytest.mark.parametrize(("limit", "expected"), [(1, 1), (2, 2), (10, 3)])
    async def test_search_should_return_min_of_limit_and_stored(
        self,
        seeded_pipeline: DocumentPipeline,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
        limit: int,
        expected: int,
    ) -> None:
        results = await retrieval_service.search(test_async_db, "launch", limit=limit)

        assert len(results) == expected

    async def test_search_should_return_empty_for_empty_store(
        self,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
    ) -> None:
        assert await retrieval_service.search(test_async_db, "pricing") == []

    @pytest.mark.parametrize(("query", "limit"), [("", 5), ("   ", 5), ("pricing", 0), ("pricing", -1)])
    async def test_search_should_validate_input_before_embedding(
        self,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
        embeddings_client,
        query: str,
        limit: int,
    ) -> None:
        """Test a blank query or non-positive limit fails without a provider call."""
        with pytest.raises(ValidationError):
            await retrieval_service.search(test_async_db, query, limit=limit)

        assert embeddings_client.calls == []

    async def test_search_should_ignore_embeddings_of_other_models(
        self,
        seeded_pipeline: DocumentPipeline,
        retrieval_service: RetrievalService,
        embedding_task: EmbeddingTask,
        test_async_db: AsyncSession,
    ) -> None:
        # Arrange
        saving_task = SavingTask()
        document, _ = await saving_task.upsert_document(
            test_async_db, source="legacy.md", title="Legacy", topic="pricing",
            tags=["pricing"], body="Body",
        )
        chunk = await saving_task.insert_chunk(
            test_async_db, document_id=document.id, index=0,
            content="pricing pricing pricing", token_count=6,
        )
        await saving_task.insert_embedding(
            test_async_db, chunk_id=chunk.id,
            vector=[1.0] * embedding_task.dimensions, model_id="older-model",
        )

        # Act
        results = await retrieval_service.search(test_async_db, "pricing", limit=10)

        # Assert
        assert "legacy.md" not in {r.source for r in results}
        assert len(results) == 3

    async def test_search_should_keep_scan_order_for_equal_scores(
        self,
        pipeline: DocumentPipeline,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
    ) -> None:
        """Test identical chunks come back ordered by source."""
        # Arrange
        for source in ("c.md", "a.md", "b.md"):
            await pipeline.process_text(source, _document("Same", ["email"], EMAIL_SECTION))

        # Act
        results = await retrieval_service.search(test_async_db, "email", limit=3)

        # Assert
        assert [r.source for r in results] == ["a.md", "b.md", "c.md"]

    async def test_search_should_wrap_store_failure(
        self,
        retrieval_service: RetrievalService,
    ) -> None:
        # Arrange
        session = AsyncMock(spec=AsyncSession)
        session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))

        # Act / Assert
        with pytest.raises(RetrievalError):
            await retrieval_service.search(session, "pricing")


class TestRetrievalServiceContext:
    """Test suite for RetrievalService.retrieve_context()."""

    async def test_retrieve_context_should_format_sections(
        self,
        seeded_pipeline: DocumentPipeline,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
    ) -> None:
        context = await retrieval_service.retrieve_context(test_async_db, "pricing", limit=2)

        sections = context.split("\n\n---\n\n")
        assert len(sections) == 2
        assert sections[0] == f"### Pricing Guide\n{PRICING_SECTION}"

    async def test_retrieve_context_should_report_no_context(
        self,
        retrieval_service: RetrievalService,
        test_async_db: AsyncSession,
    ) -> None:
        context = await retrieval_service.retrieve_context(test_async_db, "pricing")

        assert context == NO_CONTEXT_MESSAGE
