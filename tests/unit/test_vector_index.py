"""
Test suite for InMemoryVectorIndex.

Covers ranking order, result count bounds, tie handling and
dimensionality checks.

System role: Verification of the brute-force vector index
"""

import pytest

from knowledge_rag.boundary.vdb import (
    InMemoryVectorIndex,
    VectorEntry,
    VectorIndex,
    VectorMetadata,
)
from knowledge_rag.core.exceptions import VectorDimensionError


def _entry(chunk_id: str, vector: list[float]) -> VectorEntry:
    return VectorEntry(
        chunk_id=chunk_id,
        vector=vector,
        content=f"content of {chunk_id}",
        metadata=VectorMetadata(title="Doc", tags=["pricing"], source="doc.md"),
    )


@pytest.fixture
def index() -> InMemoryVectorIndex:
    """Index with five 2-d entries at known angles from [1, 0]."""
    index = InMemoryVectorIndex()
    index.add_many(
        [
            _entry("east", [1.0, 0.0]),
            _entry("north", [0.0, 1.0]),
            _entry("north-east", [1.0, 1.0]),
            _entry("west", [-1.0, 0.0]),
            _entry("east-ish", [2.0, 0.2]),
        ]
    )
    return index


class TestInMemoryVectorIndex:
    """Test suite for InMemoryVectorIndex."""

    def test_should_implement_vector_index(self) -> None:
        assert isinstance(InMemoryVectorIndex(), VectorIndex)

    def test_search_should_rank_by_descending_similarity(self, index: InMemoryVectorIndex) -> None:
        """Test results are ordered from most to least similar."""
        # Act
        results = index.search([1.0, 0.0], k=5)

        # Assert
        assert [r.chunk_id for r in results] == ["east", "east-ish", "north-east", "north", "west"]
        scores = [r.similarity_score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0].similarity_score == pytest.approx(1.0)
        assert results[-1].similarity_score == pytest.approx(-1.0)

    @pytest.mark.parametrize("k", [1, 2, 5, 10])
    def test_search_should_return_min_of_k_and_size(self, index: InMemoryVectorIndex, k: int) -> None:
        results = index.search([0.5, 0.5], k=k)

        assert len(results) == min(k, len(index))

    def test_search_should_return_empty_for_non_positive_k(self, index: InMemoryVectorIndex) -> None:
        assert index.search([1.0, 0.0], k=0) == []

    def test_search_should_return_empty_for_empty_index(self) -> None:
        assert InMemoryVectorIndex().search([1.0, 0.0], k=3) == []

    def test_search_should_keep_insertion_order_for_ties(self) -> None:
        """Test equal scores keep the order entries were added in."""
        # Arrange
        index = InMemoryVectorIndex()
        index.add_many([_entry(f"tie-{i}", [3.0, 4.0]) for i in range(4)])

        # Act
        results = index.search([3.0, 4.0], k=4)

        # Assert
        assert [r.chunk_id for r in results] == ["tie-0", "tie-1", "tie-2", "tie-3"]

    def test_search_should_carry_content_and_metadata(self, index: InMemoryVectorIndex) -> None:
        result = index.search([1.0, 0.0], k=1)[0]

        assert result.content == "content of east"
        assert result.metadata.source == "doc.md"
        assert result.metadata.tags == ["pricing"]

    def test_add_should_infer_dimensions_from_first_entry(self) -> None:
        index = InMemoryVectorIndex()

        index.add(_entry("a", [1.0, 2.0, 3.0]))

        assert index.dimensions == 3
        assert len(index) == 1

    def test_add_should_reject_mismatched_dimensions(self) -> None:
        """Test an entry of a different length than the index is rejected."""
        index = InMemoryVectorIndex(dimensions=2)

        with pytest.raises(VectorDimensionError):
            index.add(_entry("bad", [1.0, 2.0, 3.0]))

        assert len(index) == 0

    def test_search_should_reject_mismatched_query(self, index: InMemoryVectorIndex) -> None:
        with pytest.raises(VectorDimensionError):
            index.search([1.0, 0.0, 0.0], k=1)
