"""
Token estimation for chunk sizing.

A fixed characters-per-token ratio stands in for a real tokenizer. The
chunker receives the estimator as a parameter, so a tokenizer-backed
function with the same signature can replace it.

Dependencies: None
System role: Sizing heuristic for the chunking stage
"""

import math
from typing import Callable

CHARS_PER_TOKEN = 4

TokenEstimator = Callable[[str], float]


def estimate_tokens(text: str) -> float:
    """Approximate token count as characters / 4."""
    return len(text) / CHARS_PER_TOKEN


def count_tokens(text: str, estimator: TokenEstimator = estimate_tokens) -> int:
    """Whole-number token count stored with a chunk (rounded up)."""
    return math.ceil(estimator(text))
