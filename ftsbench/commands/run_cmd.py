"""Run command - execute a benchmark spec and report the results.

CLI Examples:
    ftsbench run bench.yaml
    ftsbench run bench.yaml --iterations 10 --warmup 2
    ftsbench run bench.yaml --output report.json --format json
"""

import sys

import click

from ftsbench.engine.factory import ExecutorSet
from ftsbench.report.aggregate import generate_report
from ftsbench.report.emit import OutputFormat, emit_report
from ftsbench.runner.config import RunConfig
from ftsbench.runner.runner import Runner
from ftsbench.spec.loader import load_spec
from ftsbench.utils.logger import get_logger


def run_benchmark(
    spec_path: str,
    output: str | None = None,
    output_format: str = "json",
    warmup: int | None = None,
    iterations: int | None = None,
    k_values: list[int] | None = None,
    timeout: float | None = None,
) -> None:
    """Run every job in the benchmark spec, print the tables, optionally save a report.

    Options left as None fall back to the spec's values.

    Raises:
        ConfigurationError: If the spec, a suite, or an executor is invalid.
    """
    log = get_logger("cli")
    spec = load_spec(spec_path)
    config = RunConfig.from_spec(
        spec,
        warmup_runs=warmup,
        runs=iterations,
        k_values=k_values,
        timeout=timeout,
    )

    log.info(
        "Running %d job(s): %d measured run(s), %d warmup",
        len(spec.jobs),
        config.runs,
        config.warmup_runs,
    )
    with ExecutorSet.from_spec(spec, timeout=config.timeout) as executors:
        result = Runner(config).run_all(spec, executors)

    report = generate_report(result, spec)
    emit_report(report, sys.stdout, OutputFormat.TEXT)

    if output:
        emit_report(report, output, OutputFormat(output_format))
        click.echo(f"Report written to {output}")
