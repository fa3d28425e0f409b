"""
Cosine similarity ranking.

Scores candidate chunks against a query vector, filters by a minimum
threshold, and returns the top-K in descending score order. Ties keep
their input order, so ranking is deterministic for a deterministic
candidate order.

Each candidate carries an opaque payload (typically the chunk's
source id and index) that is returned untouched with its score, so
callers never need to recover identity from content.

Dependencies: numpy
System role: Similarity ranker for retrieval
"""

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

import numpy as np

from semantic_search.core.exceptions import DimensionMismatchError, ValidationError

PayloadT = TypeVar("PayloadT")


@dataclass(frozen=True)
class Candidate(Generic[PayloadT]):
    """A chunk eligible for ranking."""

    content: str
    embedding: Sequence[float]
    payload: PayloadT = None


@dataclass(frozen=True)
class RankedCandidate(Generic[PayloadT]):
    """A candidate that survived the threshold, with its score."""

    content: str
    similarity: float
    payload: PayloadT = None


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Returns a value in [-1, 1]; 0.0 when either vector has zero magnitude.

    Raises:
        DimensionMismatchError: If the vectors differ in length
    """
    if len(a) != len(b):
        raise DimensionMismatchError(expected=len(a), actual=len(b))

    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    score = float(np.dot(vec_a, vec_b) / (norm_a * norm_b))
    return min(1.0, max(-1.0, score))


def _score_all(query: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity of every row of ``matrix`` against ``query``."""
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    scores = np.zeros(len(matrix), dtype=np.float64)
    np.divide(dots, norms, out=scores, where=norms != 0)
    return np.clip(scores, -1.0, 1.0)


def rank(
    query: Sequence[float],
    candidates: Sequence[Candidate[PayloadT]],
    top_k: int,
    min_threshold: float,
) -> list[RankedCandidate[PayloadT]]:
    """
    Rank candidates by cosine similarity to the query.

    Args:
        query: Query embedding
        candidates: Chunks to score, in a deterministic order
        top_k: Maximum number of results; values <= 0 return nothing
        min_threshold: Scores strictly below this are dropped

    Returns:
        list[RankedCandidate]: At most ``top_k`` results, highest score first

    Raises:
        ValidationError: If the query vector is empty
        DimensionMismatchError: If any candidate's length differs from the query
    """
    if top_k <= 0 or not candidates:
        return []
    if len(query) == 0:
        raise ValidationError("Query embedding is empty", field="query")

    dimension = len(query)
    for position, candidate in enumerate(candidates):
        if len(candidate.embedding) != dimension:
            raise DimensionMismatchError(
                expected=dimension,
                actual=len(candidate.embedding),
                details={"candidate_position": position},
            )

    query_vec = np.asarray(query, dtype=np.float64)
    matrix = np.asarray([c.embedding for c in candidates], dtype=np.float64)
    scores = _score_all(query_vec, matrix)

    # Stable argsort on negated scores keeps input order between equal scores.
    order = np.argsort(-scores, kind="stable")
    ranked: list[RankedCandidate[PayloadT]] = []
    for idx in order:
        score = float(scores[idx])
        if score < min_threshold:
            # Descending order: nothing after this passes either.
            break
        candidate = candidates[idx]
        ranked.append(
            RankedCandidate(
                content=candidate.content,
                similarity=score,
                payload=candidate.payload,
            )
        )
        if len(ranked) == top_k:
            break
    return ranked
