"""Tests for latency statistics."""

import pytest

from ftsbench.runner.latency import (
    PERCENTILES,
    LatencyStats,
    aggregate_latency_stats,
    compute_latency_stats,
)


def test_evenly_spaced_percentiles():
    """Test 1..100ms gives P50~50, P95~95, P99~99."""
    stats = compute_latency_stats(float(i) for i in range(1, 101))

    assert stats.sample_count == 100
    assert stats.p50 == pytest.approx(50, abs=1)
    assert stats.p95 == pytest.approx(95, abs=1)
    assert stats.p99 == pytest.approx(99, abs=1)
    assert stats.median == stats.p50


def test_two_samples():
    """Test min/max/mean for {10, 20}."""
    stats = compute_latency_stats([20.0, 10.0])

    assert stats.min == 10.0
    assert stats.max == 20.0
    assert stats.mean == 15.0
    assert stats.p50 == pytest.approx(15.0)
    assert stats.stddev == pytest.approx(7.0710678, rel=1e-6)


def test_interpolation():
    """Test linear interpolation between order statistics."""
    stats = compute_latency_stats([10.0, 20.0, 30.0, 40.0])

    # rank = 0.9 * 3 = 2.7 -> 30 + 0.7 * 10
    assert stats.p90 == pytest.approx(37.0)
    # rank = 0.75 * 3 = 2.25
    assert stats.p75 == pytest.approx(32.5)


def test_single_sample():
    """Test one sample: every percentile is that sample, stddev is zero."""
    stats = compute_latency_stats([12.5])

    assert stats.stddev == 0.0
    assert set(stats.percentiles) == set(PERCENTILES)
    assert all(v == 12.5 for v in stats.percentiles.values())


def test_empty_input():
    """Test no samples gives an all-zero result."""
    stats = compute_latency_stats([])

    assert stats.is_zero
    assert stats.percentiles == {}
    assert stats.mean == 0.0
    assert stats.p99 == 0.0


def test_raw_kept_but_not_serialized():
    """Test raw samples survive on the object but not in dumps."""
    stats = compute_latency_stats([3.0, 1.0, 2.0])

    assert stats.raw == [3.0, 1.0, 2.0]
    assert "raw" not in stats.model_dump()


def test_aggregate_uses_union_of_samples():
    """Test aggregation recomputes from all raw samples."""
    a = compute_latency_stats([10.0, 20.0])
    b = compute_latency_stats([30.0, 40.0])

    agg = aggregate_latency_stats([a, b])

    assert agg.min == 10.0
    assert agg.max == 40.0
    assert agg.sample_count == 4
    assert agg.mean == 25.0
    # interpolated over the 4-sample set, not averaged from 15 and 35
    assert agg.p90 == pytest.approx(37.0)
    assert agg.p90 != pytest.approx((a.p90 + b.p90) / 2)


def test_aggregate_nothing():
    """Test aggregating no stats gives a zero result."""
    assert aggregate_latency_stats([]) == LatencyStats()
