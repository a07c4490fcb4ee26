"""Score sets: every configured metric for one ranked list."""

from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, Field

from ftsbench.metrics.precision import f1_at_k, precision_at_k, recall_at_k
from ftsbench.metrics.ranking import average_precision, ndcg_at_k, reciprocal_rank


class ScoreSet(BaseModel):
    """Per-K and scalar metrics for one (query, engine) result.

    Empty maps and zero scalars when the query has no judgments.
    """

    ndcg: dict[int, float] = Field(default_factory=dict)
    precision: dict[int, float] = Field(default_factory=dict)
    recall: dict[int, float] = Field(default_factory=dict)
    f1: dict[int, float] = Field(default_factory=dict)
    ap: float = 0.0
    rr: float = 0.0


def compute_all(
    ranked: Sequence[str],
    judgments: Mapping[str, int],
    k_values: Iterable[int],
    threshold: int,
) -> ScoreSet:
    """Evaluate every per-K metric at each K plus AP and RR."""
    scores = ScoreSet(
        ap=average_precision(ranked, judgments, threshold),
        rr=reciprocal_rank(ranked, judgments, threshold),
    )
    for k in k_values:
        scores.ndcg[k] = ndcg_at_k(ranked, judgments, k)
        scores.precision[k] = precision_at_k(ranked, judgments, k, threshold)
        scores.recall[k] = recall_at_k(ranked, judgments, k, threshold)
        scores.f1[k] = f1_at_k(ranked, judgments, k, threshold)
    return scores
