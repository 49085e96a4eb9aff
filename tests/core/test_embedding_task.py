"""
Test suite for EmbeddingTask.

Verifies provider errors and malformed responses are raised as
EmbeddingError and never replaced by a fallback vector.

System role: Verification of the embedding stage
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from knowledge_rag.core.document_processing.tasks import EmbeddingTask
from knowledge_rag.core.exceptions import DocumentProcessingError, EmbeddingError


@pytest.fixture
def mock_client() -> MagicMock:
    """Embeddings client whose aembed_query returns a 3-d vector."""
    client = MagicMock()
    client.aembed_query = AsyncMock(return_value=[0.1, 0.2, 0.3])
    return client


@pytest.fixture
def task(mock_client: MagicMock) -> EmbeddingTask:
    return EmbeddingTask(client=mock_client, model_id="model-a", dimensions=3)


class TestEmbeddingTaskInit:
    """Test suite for EmbeddingTask construction."""

    def test_init_should_reject_empty_model_id(self, mock_client: MagicMock) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(client=mock_client, model_id="", dimensions=3)

    def test_init_should_reject_non_positive_dimensions(self, mock_client: MagicMock) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(client=mock_client, model_id="model-a", dimensions=0)


class TestEmbeddingTaskEmbed:
    """Test suite for EmbeddingTask.embed()."""

    async def test_embed_should_return_provider_vector(
        self,
        task: EmbeddingTask,
        mock_client: MagicMock,
    ) -> None:
        """Test embed returns the provider's vector as floats."""
        # Act
        vector = await task.embed("pricing strategy")

        # Assert
        assert vector == [0.1, 0.2, 0.3]
        mock_client.aembed_query.assert_awaited_once_with("pricing strategy")

    async def test_embed_should_coerce_integers_to_float(
        self,
        task: EmbeddingTask,
        mock_client: MagicMock,
    ) -> None:
        mock_client.aembed_query.return_value = [1, 0, 0]

        vector = await task.embed("text")

        assert vector == [1.0, 0.0, 0.0]
        assert all(isinstance(value, float) for value in vector)

    async def test_embed_should_reject_blank_text_without_calling_provider(
        self,
        task: EmbeddingTask,
        mock_client: MagicMock,
    ) -> None:
        """Test blank input fails before any provider call."""
        with pytest.raises(EmbeddingError):
            await task.embed("   ", source="empty.md")

        mock_client.aembed_query.assert_not_awaited()

    async def test_embed_should_wrap_provider_exception(
        self,
        task: EmbeddingTask,
        mock_client: MagicMock,
    ) -> None:
        """Test a provider failure surfaces as EmbeddingError with the source."""
        # Arrange
        mock_client.aembed_query.side_effect = TimeoutError("request timed out")

        # Act
        with pytest.raises(EmbeddingError) as exc_info:
            await task.embed("text", source="pricing.md")

        # Assert
        assert exc_info.value.source == "pricing.md"
        assert isinstance(exc_info.value.__cause__, TimeoutError)
        assert isinstance(exc_info.value, DocumentProcessingError)

    @pytest.mark.parametrize(
        "response",
        [
            [],
            None,
            [0.1, 0.2],
            [0.1, 0.2, 0.3, 0.4],
            [0.1, "abc", 0.3],
            [0.1, float("nan"), 0.3],
            [0.1, float("inf"), 0.3],
        ],
    )
    async def test_embed_should_reject_malformed_response(
        self,
        task: EmbeddingTask,
        mock_client: MagicMock,
        response: object,
    ) -> None:
        """Test empty, wrong-length, non-numeric and non-finite vectors are errors."""
        mock_client.aembed_query.return_value = response

        with pytest.raises(EmbeddingError):
            await task.embed("text")
