"""Result containers produced by the runner.

Rows are keyed ``results[query_id][engine_name]`` and always iterated in
``query_order`` x ``engine_names`` order so reports are deterministic.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ftsbench.metrics.scores import ScoreSet
from ftsbench.runner.config import RunConfig
from ftsbench.runner.latency import LatencyStats


@dataclass
class QueryResult:
    """Outcome of one (query, engine) pair within a job."""

    query_id: str
    job_name: str
    engine_name: str
    layer: str | None = None
    scores: ScoreSet = field(default_factory=ScoreSet)
    ranked_ids: list[str] = field(default_factory=list)
    total_matches: int = 0
    latency: LatencyStats = field(default_factory=LatencyStats)
    error: Exception | None = None
    ranking_variants: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class JobResult:
    """All results for one job."""

    job_name: str
    suite_name: str = ""
    layer: str | None = None
    engine_names: list[str] = field(default_factory=list)
    query_order: list[str] = field(default_factory=list)
    query_descriptions: dict[str, str] = field(default_factory=dict)
    results: dict[str, dict[str, QueryResult]] = field(default_factory=dict)

    def add_query(self, query_id: str, description: str = "") -> None:
        """Register a query, keeping first-seen order, even if no engine ran it."""
        if query_id not in self.results:
            self.results[query_id] = {}
            self.query_order.append(query_id)
            self.query_descriptions[query_id] = description

    def add(self, result: QueryResult, description: str = "") -> None:
        """Record a result, keeping first-seen query order."""
        self.add_query(result.query_id, description)
        self.results[result.query_id][result.engine_name] = result

    def get(self, query_id: str, engine_name: str) -> QueryResult | None:
        return self.results.get(query_id, {}).get(engine_name)

    def iter_results(self) -> Iterator[QueryResult]:
        """Yield results in query order, then job engine order."""
        for query_id in self.query_order:
            per_engine = self.results[query_id]
            for engine_name in self.engine_names:
                result = per_engine.get(engine_name)
                if result is not None:
                    yield result


@dataclass
class BenchmarkResult:
    """Every job's results plus the run configuration used."""

    config: RunConfig
    jobs: list[JobResult] = field(default_factory=list)

    def all_engine_names(self) -> list[str]:
        """Engine names across all jobs, first-seen order."""
        names: list[str] = []
        for job in self.jobs:
            for name in job.engine_names:
                if name not in names:
                    names.append(name)
        return names
