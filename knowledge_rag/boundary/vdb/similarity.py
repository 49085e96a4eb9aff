"""
Cosine similarity between embedding vectors.

Dependencies: numpy, knowledge_rag.core.exceptions
System role: Scoring function for the brute-force vector index
"""

from typing import Sequence

import numpy as np

from knowledge_rag.core.exceptions import VectorDimensionError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors of equal length.

    A zero-magnitude vector on either side scores 0.0. The result is
    clamped to [-1.0, 1.0] to absorb floating point error.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: dot(a, b) / (|a| * |b|)

    Raises:
        VectorDimensionError: When the vectors differ in length
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)

    if vec_a.shape != vec_b.shape:
        raise VectorDimensionError(
            message="Vectors must have the same length",
            operation="similarity",
            details={"left": int(vec_a.size), "right": int(vec_b.size)},
        )

    norm_a = float(np.linalg.norm(vec_a))
    norm_b = float(np.linalg.norm(vec_b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    score = float(np.dot(vec_a, vec_b)) / (norm_a * norm_b)
    return max(-1.0, min(1.0, score))
