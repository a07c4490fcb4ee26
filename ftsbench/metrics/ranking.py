"""Rank-aware IR metrics: NDCG@K, Average Precision, Reciprocal Rank.

All functions are pure. ``judgments`` maps document id to an integer
relevance grade; documents missing from the mapping have grade 0.
"""

import math
from collections.abc import Mapping, Sequence


def _gain(grade: int) -> float:
    return float(2**grade - 1)


def _dcg(grades: Sequence[int]) -> float:
    return sum(_gain(g) / math.log2(i + 2) for i, g in enumerate(grades))


def ndcg_at_k(ranked: Sequence[str], judgments: Mapping[str, int], k: int) -> float:
    """Normalized Discounted Cumulative Gain at rank K.

    DCG = sum over the first min(K, len) ranks i (0-indexed) of
    (2^grade - 1) / log2(i + 2). The ideal DCG is the same sum over the
    top-K judged grades greater than zero, sorted descending.

    Returns:
        Score in [0, 1]; 0.0 when K <= 0, the ranking is empty, there are
        no judgments, or the ideal DCG is zero.
    """
    if k <= 0 or not ranked or not judgments:
        return 0.0

    dcg = _dcg([judgments.get(doc_id, 0) for doc_id in ranked[:k]])

    ideal = sorted((g for g in judgments.values() if g > 0), reverse=True)[:k]
    idcg = _dcg(ideal)
    if idcg == 0:
        return 0.0

    return dcg / idcg


def average_precision(
    ranked: Sequence[str], judgments: Mapping[str, int], threshold: int
) -> float:
    """Average Precision over the whole ranking.

    The sum of precision values at each relevant position is divided by the
    total number of relevant judged documents, not the number retrieved.
    """
    total_relevant = sum(1 for g in judgments.values() if g >= threshold)
    if total_relevant == 0:
        return 0.0

    hits = 0
    precision_sum = 0.0
    for i, doc_id in enumerate(ranked):
        if judgments.get(doc_id, 0) >= threshold:
            hits += 1
            precision_sum += hits / (i + 1)

    return precision_sum / total_relevant


def reciprocal_rank(
    ranked: Sequence[str], judgments: Mapping[str, int], threshold: int
) -> float:
    """1 / rank of the first relevant document, or 0.0 if none appears."""
    for i, doc_id in enumerate(ranked):
        if judgments.get(doc_id, 0) >= threshold:
            return 1.0 / (i + 1)
    return 0.0
