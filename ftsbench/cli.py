#!/usr/bin/env python3
"""ftsbench CLI - Command-line interface for ftsbench."""

import click

from ftsbench.commands.common import handle_errors, parse_k_values
from ftsbench.utils.env import EnvVarError, get_env
from ftsbench.utils.logger import Logger

DEFAULT_TIMEOUT = 30.0


def _default_timeout() -> float:
    try:
        timeout: float = get_env(
            "FTSBENCH_TIMEOUT", default=DEFAULT_TIMEOUT, as_type=float
        )
    except EnvVarError as e:
        raise click.BadParameter(str(e), param_hint="FTSBENCH_TIMEOUT") from e
    if timeout <= 0:
        raise click.BadParameter(
            f"must be positive, got {timeout}", param_hint="FTSBENCH_TIMEOUT"
        )
    return timeout


@click.group()
def ftsbench():
    """Quality and latency benchmarks for full-text search backends."""
    # Configure logger at startup if not already configured
    if not Logger.is_configured():
        Logger.configure(
            level=get_env("FTSBENCH_LOG_LEVEL", default="INFO"), timestamps=True
        )


@ftsbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display ftsbench version information."""
    from ftsbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


@ftsbench.command()
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.option("--debug", is_flag=True, help="Enable debug output and stack traces")
def validate(spec, debug):
    """Validate a benchmark spec and every suite it references."""
    from ftsbench.commands.validate_cmd import run_validate

    if debug:
        Logger.set_level("DEBUG")

    with handle_errors(debug):
        run_validate(spec)


@ftsbench.command()
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the structured report to this file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="json",
    show_default=True,
    help="Format of the --output file",
)
@click.option("--warmup", type=click.IntRange(min=0), help="Warmup runs per query")
@click.option(
    "--iterations", "-n", type=click.IntRange(min=1), help="Measured runs per query"
)
@click.option("--k", "k_values", help="Comma-separated cutoffs, e.g. 3,5,10")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Per-execution timeout in seconds (default: $FTSBENCH_TIMEOUT or 30)",
)
@click.option("--debug", is_flag=True, help="Enable debug output and stack traces")
def run(spec, output, output_format, warmup, iterations, k_values, timeout, debug):
    r"""Run a benchmark spec and print the results.

    \b
    Examples:
      ftsbench run bench.yaml
      ftsbench run bench.yaml -n 10 --warmup 2 --k 5,10
      ftsbench run bench.yaml -o report.yaml --format yaml
    """
    from ftsbench.commands.run_cmd import run_benchmark

    if debug:
        Logger.set_level("DEBUG")

    with handle_errors(debug):
        run_benchmark(
            spec,
            output=output,
            output_format=output_format,
            warmup=warmup,
            iterations=iterations,
            k_values=parse_k_values(k_values),
            timeout=timeout if timeout is not None else _default_timeout(),
        )


@ftsbench.command()
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o", required=True, type=click.Path(dir_okay=False), help="Pool file"
)
@click.option(
    "--depth",
    type=click.IntRange(min=1),
    help="Documents pooled per engine (default: metrics.max_k)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Per-execution timeout in seconds (default: $FTSBENCH_TIMEOUT or 30)",
)
@click.option(
    "--job",
    "job_names",
    multiple=True,
    help="Only pool these jobs (repeatable; default: every job)",
)
@click.option("--debug", is_flag=True, help="Enable debug output and stack traces")
def pool(spec, output, depth, timeout, job_names, debug):
    """Run each query once and pool every engine's top results."""
    from ftsbench.commands.pool_cmd import run_pool

    if debug:
        Logger.set_level("DEBUG")

    with handle_errors(debug):
        run_pool(
            spec,
            output,
            depth=depth,
            timeout=timeout if timeout is not None else _default_timeout(),
            job_names=list(job_names) or None,
        )


@ftsbench.group()
def judge():
    """Export pools for grading and merge grades into suites."""


@judge.command("export")
@click.argument("pool_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o", required=True, type=click.Path(dir_okay=False), help="Judgment file"
)
def judge_export(pool_file, output):
    """Write an ungraded judgment file from a pool file."""
    from ftsbench.commands.judge_cmd import run_export

    with handle_errors():
        run_export(pool_file, output)


@judge.command("merge")
@click.argument("judgments", type=click.Path(exists=True, dir_okay=False))
@click.argument("suite", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o", required=True, type=click.Path(dir_okay=False), help="Merged suite"
)
def judge_merge(judgments, suite, output):
    """Merge graded judgments into a suite file."""
    from ftsbench.commands.judge_cmd import run_merge

    with handle_errors():
        run_merge(judgments, suite, output)


if __name__ == "__main__":
    ftsbench()
