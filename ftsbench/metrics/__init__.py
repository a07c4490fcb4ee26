"""IR quality metrics over ranked document ids and graded judgments."""

from ftsbench.metrics.precision import f1_at_k, precision_at_k, recall_at_k
from ftsbench.metrics.ranking import average_precision, ndcg_at_k, reciprocal_rank
from ftsbench.metrics.scores import ScoreSet, compute_all

__all__ = [
    "ScoreSet",
    "average_precision",
    "compute_all",
    "f1_at_k",
    "ndcg_at_k",
    "precision_at_k",
    "recall_at_k",
    "reciprocal_rank",
]
