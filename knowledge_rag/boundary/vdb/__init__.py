"""
Vector index boundary.

Exports:
  - VectorIndex: Abstract nearest-neighbour interface
  - InMemoryVectorIndex: Default exhaustive cosine scan
  - cosine_similarity: Scoring function
  - VectorEntry, VectorMetadata, VectorSearchResult: Schemas
"""

from knowledge_rag.boundary.vdb.similarity import cosine_similarity
from knowledge_rag.boundary.vdb.vector_index import InMemoryVectorIndex, VectorIndex
from knowledge_rag.boundary.vdb.vector_schemas import (
    VectorEntry,
    VectorMetadata,
    VectorSearchResult,
)

__all__ = [
    "cosine_similarity",
    "InMemoryVectorIndex",
    "VectorIndex",
    "VectorEntry",
    "VectorMetadata",
    "VectorSearchResult",
]
