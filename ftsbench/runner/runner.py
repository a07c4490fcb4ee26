"""Benchmark runner: executes every job's queries against its engines.

Usage:
    from ftsbench.engine import ExecutorSet
    from ftsbench.runner import Runner, RunConfig
    from ftsbench.spec import load_spec

    spec = load_spec("bench.yaml")
    with ExecutorSet.from_spec(spec, timeout=30) as executors:
        result = Runner(RunConfig.from_spec(spec)).run_all(spec, executors)

Control flow is sequential: jobs in spec order, queries in suite order,
engines in the job's declared order. A failing (query, engine) pair is
recorded on its QueryResult and never stops its siblings.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from ftsbench.engine.base import Execution, Executor
from ftsbench.engine.factory import ExecutorSet
from ftsbench.errors import ResolutionError
from ftsbench.metrics.scores import ScoreSet, compute_all
from ftsbench.runner.config import RunConfig
from ftsbench.runner.latency import compute_latency_stats
from ftsbench.runner.results import BenchmarkResult, JobResult, QueryResult
from ftsbench.spec.models import BenchSpec, Job
from ftsbench.suite.loader import LoadedSuite, load_suite
from ftsbench.suite.models import Query
from ftsbench.utils.logger import get_logger


@dataclass
class _Measurement:
    """Outcome of the measured runs for one (query, engine) pair."""

    last: Execution | None = None
    latencies: list[float] = field(default_factory=list)
    rankings: set[tuple[str, ...]] = field(default_factory=set)
    error: Exception | None = None


class Runner:
    """Runs benchmark jobs and collects structured results.

    Example:
        >>> runner = Runner(RunConfig(k_values=[3, 10], runs=5, warmup_runs=1))
        >>> result = runner.run_all(spec, executors)
        >>> result.jobs[0].get("q1", "pg-native").scores.ndcg[10]
    """

    def __init__(self, config: RunConfig | None = None) -> None:
        self._config = config or RunConfig()

    @property
    def config(self) -> RunConfig:
        return self._config

    def run_all(self, spec: BenchSpec, executors: ExecutorSet) -> BenchmarkResult:
        """Run every job in the spec.

        All suites are loaded and every job's executors resolved before the
        first query is sent, so configuration problems abort the run
        without touching any backend.

        Raises:
            ConfigurationError: If a suite is invalid or a job names an
                executor that does not exist.
        """
        log = get_logger("runner")

        prepared: list[tuple[Job, LoadedSuite, dict[str, Executor]]] = []
        for job in spec.jobs:
            loaded = load_suite(spec.suite_path(job))
            job_executors = executors.subset(job.engines)
            prepared.append((job, loaded, job_executors))

        result = BenchmarkResult(config=self._config)
        for job, loaded, job_executors in prepared:
            log.info(
                "Running job '%s' (%d queries x %d engines)",
                job.name,
                len(loaded.suite.queries),
                len(job_executors),
            )
            job_result = self.run_job(job, loaded, job_executors)
            errors = sum(1 for r in job_result.iter_results() if not r.ok)
            log.info("Finished job '%s' (%d errors)", job.name, errors)
            result.jobs.append(job_result)

        return result

    def run_job(
        self,
        job: Job,
        loaded: LoadedSuite,
        executors: Mapping[str, Executor],
    ) -> JobResult:
        """Run one job's suite against its executors.

        Args:
            job: Job definition; its engine list fixes the engine order.
            loaded: The job's suite with its template registry.
            executors: Executors for at least every engine in ``job.engines``.
        """
        layer = job.layer.value if job.layer else None
        job_result = JobResult(
            job_name=job.name,
            suite_name=loaded.suite.name,
            layer=layer,
            engine_names=list(job.engines),
        )

        for query in loaded.suite.queries:
            job_result.add_query(query.id, query.description)
            for engine_name in job.engines:
                qr = self._run_pair(
                    job, loaded, query, engine_name, executors[engine_name]
                )
                if qr is not None:
                    qr.layer = layer
                    job_result.add(qr, description=query.description)

        return job_result

    def _run_pair(
        self,
        job: Job,
        loaded: LoadedSuite,
        query: Query,
        engine_name: str,
        executor: Executor,
    ) -> QueryResult | None:
        log = get_logger("runner")

        try:
            text = query.resolve_engine_query(engine_name, loaded.registry, loaded.dir)
        except ResolutionError as e:
            log.warning(
                "Resolve query failed: query=%s engine=%s error=%s",
                query.id,
                engine_name,
                e,
            )
            return QueryResult(
                query_id=query.id,
                job_name=job.name,
                engine_name=engine_name,
                error=e,
            )

        if not text:
            return None

        measurement = self._measure(executor, text, query.id, engine_name)
        result = QueryResult(
            query_id=query.id,
            job_name=job.name,
            engine_name=engine_name,
            ranking_variants=len(measurement.rankings),
        )

        if measurement.last is None:
            result.error = measurement.error
            log.warning(
                "Query failed: query=%s engine=%s error=%s",
                query.id,
                engine_name,
                measurement.error,
            )
            return result

        result.ranked_ids = list(measurement.last.ranked_ids)
        result.total_matches = measurement.last.total_matches
        result.latency = compute_latency_stats(measurement.latencies)
        result.scores = self._score(query, result.ranked_ids)

        if result.ranking_variants > 1:
            log.warning(
                "Ranking changed across runs: query=%s engine=%s variants=%d; "
                "reporting the last successful run",
                query.id,
                engine_name,
                result.ranking_variants,
            )

        return result

    def _measure(
        self, executor: Executor, text: str, query_id: str, engine_name: str
    ) -> _Measurement:
        log = get_logger("runner")
        timeout = self._config.timeout

        for i in range(self._config.warmup_runs):
            try:
                executor.execute(text, timeout=timeout)
            except Exception as e:
                log.debug(
                    "Warmup %d failed: query=%s engine=%s error=%s",
                    i + 1,
                    query_id,
                    engine_name,
                    e,
                )

        measurement = _Measurement()
        for _ in range(self._config.runs):
            try:
                execution = executor.execute(text, timeout=timeout)
            except Exception as e:
                measurement.error = e
                continue
            measurement.last = execution
            measurement.latencies.append(execution.latency_ms)
            measurement.rankings.add(tuple(execution.ranked_ids))

        return measurement

    def _score(self, query: Query, ranked_ids: list[str]) -> ScoreSet:
        judgments = query.judgment_map()
        if not judgments:
            return ScoreSet()
        return compute_all(
            ranked_ids,
            judgments,
            self._config.k_values,
            self._config.relevance_threshold,
        )

