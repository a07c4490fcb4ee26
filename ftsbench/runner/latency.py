"""Latency statistics for repeated executions.

Durations are milliseconds as floats. Percentiles use linear interpolation
between order statistics of a sorted copy (rank = p/100 * (n - 1)).
Cross-query aggregation recomputes everything from the union of raw
samples rather than averaging already-computed percentiles.
"""

import math
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

PERCENTILES: tuple[int, ...] = (50, 75, 90, 95, 99)


class LatencyStats(BaseModel):
    """Summary of one or more latency samples, in milliseconds."""

    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    stddev: float = 0.0
    percentiles: dict[int, float] = Field(default_factory=dict)
    sample_count: int = 0
    raw: list[float] = Field(default_factory=list, exclude=True)

    @property
    def p50(self) -> float:
        return self.percentiles.get(50, 0.0)

    @property
    def p75(self) -> float:
        return self.percentiles.get(75, 0.0)

    @property
    def p90(self) -> float:
        return self.percentiles.get(90, 0.0)

    @property
    def p95(self) -> float:
        return self.percentiles.get(95, 0.0)

    @property
    def p99(self) -> float:
        return self.percentiles.get(99, 0.0)

    @property
    def is_zero(self) -> bool:
        """True when no samples were recorded."""
        return self.sample_count == 0


def _percentile(sorted_samples: Sequence[float], p: int) -> float:
    n = len(sorted_samples)
    if n == 1:
        return sorted_samples[0]

    rank = p / 100 * (n - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if upper >= n:
        return sorted_samples[n - 1]

    fraction = rank - lower
    return sorted_samples[lower] + fraction * (
        sorted_samples[upper] - sorted_samples[lower]
    )


def _stddev(samples: Sequence[float], mean: float) -> float:
    n = len(samples)
    if n <= 1:
        return 0.0
    variance = sum((s - mean) ** 2 for s in samples) / (n - 1)
    return math.sqrt(variance)


def compute_latency_stats(durations_ms: Iterable[float]) -> LatencyStats:
    """Compute summary statistics for a list of durations.

    Args:
        durations_ms: One sample per successful execution.

    Returns:
        LatencyStats with the input kept in ``raw``; all zero with an empty
        percentile map when there are no samples.
    """
    samples = [float(d) for d in durations_ms]
    if not samples:
        return LatencyStats()

    ordered = sorted(samples)
    n = len(ordered)
    mean = sum(ordered) / n
    percentiles = {p: _percentile(ordered, p) for p in PERCENTILES}

    return LatencyStats(
        min=ordered[0],
        max=ordered[-1],
        mean=mean,
        median=percentiles[50],
        stddev=_stddev(ordered, mean),
        percentiles=percentiles,
        sample_count=n,
        raw=samples,
    )


def aggregate_latency_stats(stats: Iterable[LatencyStats]) -> LatencyStats:
    """Combine several stats objects by recomputing over all raw samples."""
    combined: list[float] = []
    for s in stats:
        combined.extend(s.raw)
    return compute_latency_stats(combined)
