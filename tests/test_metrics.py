"""Tests for the IR metrics."""

import math

import pytest

from ftsbench.metrics import (
    ScoreSet,
    average_precision,
    compute_all,
    f1_at_k,
    ndcg_at_k,
    precision_at_k,
    recall_at_k,
    reciprocal_rank,
)

JUDGMENTS = {"d1": 3, "d2": 2, "d3": 0, "d4": 1}


class TestNdcg:
    """Tests for NDCG@K."""

    def test_ideal_order_scores_one(self):
        """Test grade-descending order gives 1.0."""
        assert ndcg_at_k(["d1", "d2", "d4"], JUDGMENTS, 3) == pytest.approx(1.0)

    def test_known_value(self):
        """Test a hand-computed NDCG value."""
        # DCG  = (2^2-1)/log2(2) + (2^3-1)/log2(3)
        # IDCG = (2^3-1)/log2(2) + (2^2-1)/log2(3)
        dcg = 3 + 7 / math.log2(3)
        idcg = 7 + 3 / math.log2(3)
        assert ndcg_at_k(["d2", "d1"], JUDGMENTS, 2) == pytest.approx(dcg / idcg)

    def test_unjudged_docs_count_as_zero(self):
        """Test unknown ids contribute no gain."""
        assert ndcg_at_k(["x", "y"], JUDGMENTS, 2) == 0.0

    @pytest.mark.parametrize(
        "ranked,judgments,k",
        [
            (["d1"], JUDGMENTS, 0),
            (["d1"], JUDGMENTS, -1),
            ([], JUDGMENTS, 3),
            (["d1"], {}, 3),
            (["d1"], {"d1": 0}, 3),
        ],
    )
    def test_degenerate_inputs(self, ranked, judgments, k):
        """Test zero for bad K, empty ranking, no judgments, zero IDCG."""
        assert ndcg_at_k(ranked, judgments, k) == 0.0

    def test_bounded(self):
        """Test NDCG stays within [0, 1] for several rankings."""
        for ranked in (["d4", "d3"], ["d3", "d2", "d1"], ["d1", "x", "d2", "d4"]):
            for k in (1, 2, 5):
                assert 0.0 <= ndcg_at_k(ranked, JUDGMENTS, k) <= 1.0


class TestPrecisionRecall:
    """Tests for Precision/Recall/F1 at K."""

    def test_precision_denominator_is_k(self):
        """Test a ranking shorter than K is penalized."""
        assert precision_at_k(["d1"], JUDGMENTS, 5, 1) == pytest.approx(1 / 5)

    def test_precision_degenerate(self):
        """Test zero for K <= 0 and empty rankings."""
        assert precision_at_k(["d1"], JUDGMENTS, 0, 1) == 0.0
        assert precision_at_k([], JUDGMENTS, 3, 1) == 0.0

    def test_threshold_applies(self):
        """Test grades below the threshold are not relevant."""
        ranked = ["d1", "d4", "d3"]
        assert precision_at_k(ranked, JUDGMENTS, 3, 1) == pytest.approx(2 / 3)
        assert precision_at_k(ranked, JUDGMENTS, 3, 2) == pytest.approx(1 / 3)

    def test_recall(self):
        """Test recall divides by every relevant judgment."""
        assert recall_at_k(["d1", "x"], JUDGMENTS, 2, 1) == pytest.approx(1 / 3)

    def test_recall_no_relevant(self):
        """Test zero when nothing is relevant."""
        assert recall_at_k(["d1"], {"d1": 0}, 3, 1) == 0.0

    def test_recall_monotonic_in_k(self):
        """Test recall never decreases as K grows."""
        ranked = ["x", "d2", "d3", "d1", "y", "d4"]
        values = [recall_at_k(ranked, JUDGMENTS, k, 1) for k in range(1, 8)]
        assert values == sorted(values)

    def test_f1(self):
        """Test F1 is the harmonic mean."""
        ranked = ["d1", "x"]
        p = precision_at_k(ranked, JUDGMENTS, 2, 1)
        r = recall_at_k(ranked, JUDGMENTS, 2, 1)
        assert f1_at_k(ranked, JUDGMENTS, 2, 1) == pytest.approx(2 * p * r / (p + r))

    def test_f1_zero_iff_p_and_r_zero(self):
        """Test F1 is zero exactly when precision and recall are."""
        assert f1_at_k(["x", "y"], JUDGMENTS, 2, 1) == 0.0
        assert f1_at_k(["x", "d4"], JUDGMENTS, 2, 1) > 0.0


class TestRankMetrics:
    """Tests for AP and RR."""

    def test_average_precision(self):
        """Test AP over the whole ranking divided by total relevant."""
        # relevant at ranks 2 and 4, 3 relevant overall
        expected = (1 / 2 + 2 / 4) / 3
        ap = average_precision(["x", "d1", "d3", "d2"], JUDGMENTS, 1)
        assert ap == pytest.approx(expected)

    def test_average_precision_no_relevant(self):
        """Test AP is zero with no relevant judgments."""
        assert average_precision(["d1"], {"d1": 0}, 1) == 0.0

    def test_reciprocal_rank(self):
        """Test RR uses the first relevant rank."""
        assert reciprocal_rank(["x", "d3", "d2"], JUDGMENTS, 1) == pytest.approx(1 / 3)

    def test_reciprocal_rank_none_found(self):
        """Test RR is zero when nothing relevant appears."""
        assert reciprocal_rank(["x", "d3"], JUDGMENTS, 1) == 0.0


class TestComputeAll:
    """Tests for compute_all."""

    def test_end_to_end_example(self):
        """Test the reference scenario: judged docA/docB, ranking A, B, C."""
        scores = compute_all(["docA", "docB", "docC"], {"docA": 3, "docB": 1}, [3], 1)

        assert scores.ndcg[3] == pytest.approx(1.0)
        assert scores.precision[3] == pytest.approx(2 / 3)
        assert scores.recall[3] == pytest.approx(1.0)
        assert scores.ap == pytest.approx(1.0)
        assert scores.rr == pytest.approx(1.0)

    def test_every_k_present(self):
        """Test each requested K gets all four per-K metrics."""
        scores = compute_all(["d1"], JUDGMENTS, [1, 5, 10], 1)

        for metric in (scores.ndcg, scores.precision, scores.recall, scores.f1):
            assert sorted(metric) == [1, 5, 10]

    def test_empty_score_set(self):
        """Test a default ScoreSet is zero-valued."""
        scores = ScoreSet()

        assert scores.ndcg == {}
        assert scores.ap == 0.0
        assert scores.rr == 0.0
