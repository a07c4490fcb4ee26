"""Benchmark execution: run configuration, latency statistics, results."""

from ftsbench.runner.config import RunConfig
from ftsbench.runner.latency import (
    PERCENTILES,
    LatencyStats,
    aggregate_latency_stats,
    compute_latency_stats,
)
from ftsbench.runner.results import BenchmarkResult, JobResult, QueryResult
from ftsbench.runner.runner import Runner

__all__ = [
    "PERCENTILES",
    "BenchmarkResult",
    "JobResult",
    "LatencyStats",
    "QueryResult",
    "RunConfig",
    "Runner",
    "aggregate_latency_stats",
    "compute_latency_stats",
]
