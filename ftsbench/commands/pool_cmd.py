"""Pool command - run a spec once and write the judgment pool."""

import click

from ftsbench.engine.factory import ExecutorSet
from ftsbench.errors import ConfigurationError
from ftsbench.pool.pooler import build_pool_file
from ftsbench.pool.store import write_pool_file
from ftsbench.runner.config import RunConfig
from ftsbench.runner.runner import Runner
from ftsbench.spec.loader import load_spec


def run_pool(
    spec_path: str,
    output: str,
    depth: int | None = None,
    timeout: float | None = None,
    job_names: list[str] | None = None,
) -> None:
    """Run each (query, engine) pair once without warmup and pool the rankings.

    Args:
        spec_path: Benchmark spec.
        output: Pool file to write.
        depth: Documents taken per engine; defaults to the spec's max_k.
        timeout: Per-execution deadline in seconds.
        job_names: Jobs to pool; every job when None. All selected jobs
            must run the same suite.

    Raises:
        ConfigurationError: If a named job does not exist, or the selected
            jobs span several suites.
    """
    spec = load_spec(spec_path)
    if job_names:
        unknown = [n for n in job_names if spec.get_job(n) is None]
        if unknown:
            raise ConfigurationError(f"Unknown job: {', '.join(unknown)}")
        spec = spec.model_copy(
            update={"jobs": [j for j in spec.jobs if j.name in job_names]}
        )

    suites = {spec.suite_path(job) for job in spec.jobs}
    if len(suites) > 1:
        raise ConfigurationError(
            f"Jobs use {len(suites)} different suites; select one suite's jobs with --job"
        )
    config = RunConfig.from_spec(spec, warmup_runs=0, runs=1, timeout=timeout)

    with ExecutorSet.from_spec(spec, timeout=timeout) as executors:
        result = Runner(config).run_all(spec, executors)

    pool = build_pool_file(result, depth if depth is not None else spec.metrics.max_k)
    write_pool_file(pool, output)

    docs = sum(len(entry.docs) for entry in pool.queries)
    click.echo(
        f"Pool written to {output}: {len(pool.queries)} queries, {docs} documents"
    )
