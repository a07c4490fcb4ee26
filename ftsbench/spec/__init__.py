"""Benchmark specs: which suites run against which engines, and how."""

from ftsbench.spec.loader import load_spec, parse_spec
from ftsbench.spec.models import (
    DEFAULT_K_VALUES,
    DEFAULT_MAX_K,
    DEFAULT_RELEVANCE_THRESHOLD,
    BenchSpec,
    EngineConfig,
    EngineType,
    Job,
    Layer,
    MetricsConfig,
    RunsConfig,
)

__all__ = [
    "DEFAULT_K_VALUES",
    "DEFAULT_MAX_K",
    "DEFAULT_RELEVANCE_THRESHOLD",
    "BenchSpec",
    "EngineConfig",
    "EngineType",
    "Job",
    "Layer",
    "MetricsConfig",
    "RunsConfig",
    "load_spec",
    "parse_spec",
]
