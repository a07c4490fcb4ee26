"""Validate command - check a spec and every suite it references."""

import click

from ftsbench.spec.loader import load_spec
from ftsbench.suite.loader import load_suite


def run_validate(spec_path: str) -> None:
    """Load the benchmark spec and all job suites, then print a summary.

    Raises:
        ConfigurationError: On the first invalid spec or suite.
    """
    spec = load_spec(spec_path)

    click.echo(f"Spec OK: {spec_path}")
    click.echo(f"  Engines: {len(spec.engines)}")
    for name, engine in spec.engines.items():
        click.echo(f"    {name} ({engine.type.value})")

    click.echo(f"  Jobs: {len(spec.jobs)}")
    for job in spec.jobs:
        loaded = load_suite(spec.suite_path(job))
        suite = loaded.suite
        judged = sum(1 for q in suite.queries if q.judgments)
        click.echo(
            f"    {job.name}: suite '{suite.name}' "
            f"({len(suite.queries)} queries, {judged} judged, "
            f"{len(loaded.registry)} templates) -> {', '.join(job.engines)}"
        )
