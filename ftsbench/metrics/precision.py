"""Set-based cutoff metrics: Precision@K, Recall@K, F1@K."""

from collections.abc import Mapping, Sequence


def _relevant_in_top_k(
    ranked: Sequence[str], judgments: Mapping[str, int], k: int, threshold: int
) -> int:
    return sum(1 for doc_id in ranked[:k] if judgments.get(doc_id, 0) >= threshold)


def precision_at_k(
    ranked: Sequence[str], judgments: Mapping[str, int], k: int, threshold: int
) -> float:
    """Fraction of the top K that is relevant.

    The denominator is always K, so a ranking shorter than K is penalized.
    """
    if k <= 0 or not ranked:
        return 0.0
    return _relevant_in_top_k(ranked, judgments, k, threshold) / k


def recall_at_k(
    ranked: Sequence[str], judgments: Mapping[str, int], k: int, threshold: int
) -> float:
    """Fraction of all relevant judged documents found in the top K."""
    if k <= 0 or not ranked:
        return 0.0

    total_relevant = sum(1 for g in judgments.values() if g >= threshold)
    if total_relevant == 0:
        return 0.0

    return _relevant_in_top_k(ranked, judgments, k, threshold) / total_relevant


def f1_at_k(
    ranked: Sequence[str], judgments: Mapping[str, int], k: int, threshold: int
) -> float:
    """Harmonic mean of Precision@K and Recall@K."""
    p = precision_at_k(ranked, judgments, k, threshold)
    r = recall_at_k(ranked, judgments, k, threshold)
    if p + r == 0:
        return 0.0
    return 2 * p * r / (p + r)
