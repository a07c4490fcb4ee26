"""Run configuration for the benchmark runner."""

from dataclasses import dataclass, field, replace
from typing import Any

from ftsbench.spec.models import BenchSpec

DEFAULT_K_VALUES: tuple[int, ...] = (3, 5, 10)
DEFAULT_MAX_K = 10
DEFAULT_RELEVANCE_THRESHOLD = 1
DEFAULT_WARMUP_RUNS = 0
DEFAULT_RUNS = 1


@dataclass(frozen=True)
class RunConfig:
    """How many times to run each (query, engine) pair and how to score it.

    Attributes:
        k_values: Cutoffs for NDCG/P/R/F1.
        max_k: Deepest cutoff of interest; also the default pool depth.
        relevance_threshold: Minimum grade that counts as relevant.
        warmup_runs: Discarded executions before measurement.
        runs: Measured executions (at least 1).
        timeout: Per-execution deadline in seconds, or None for no deadline.
    """

    k_values: list[int] = field(default_factory=lambda: list(DEFAULT_K_VALUES))
    max_k: int = DEFAULT_MAX_K
    relevance_threshold: int = DEFAULT_RELEVANCE_THRESHOLD
    warmup_runs: int = DEFAULT_WARMUP_RUNS
    runs: int = DEFAULT_RUNS
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.runs < 1:
            raise ValueError(f"runs must be at least 1, got {self.runs}")
        if self.warmup_runs < 0:
            raise ValueError(f"warmup_runs must be >= 0, got {self.warmup_runs}")

    @classmethod
    def from_spec(cls, spec: BenchSpec, **overrides: Any) -> "RunConfig":
        """Build a config from a spec's metrics/runs sections.

        Keyword overrides whose value is None are ignored, so CLI options
        that were not given fall through to the spec.
        """
        config = cls(
            k_values=list(spec.metrics.k_values),
            max_k=spec.metrics.max_k,
            relevance_threshold=spec.metrics.relevance_threshold,
            warmup_runs=spec.runs.warmup,
            runs=spec.runs.iterations,
        )
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(config, **given) if given else config
