"""Judge commands - export a pool for grading and merge grades into a suite."""

import click

from ftsbench.judgment.workflow import (
    export_for_annotation,
    import_annotations,
    merge_into_suite,
    write_judgment_file,
)
from ftsbench.pool.store import read_pool_file
from ftsbench.suite.loader import load_suite, write_suite


def run_export(pool_path: str, output: str) -> None:
    """Write an ungraded judgment file for every pooled document."""
    judgments = export_for_annotation(read_pool_file(pool_path))
    write_judgment_file(judgments, output)

    docs = sum(len(entry.docs) for entry in judgments.queries)
    click.echo(f"Judgment template written to {output}: {docs} documents to grade")


def run_merge(judgments_path: str, suite_path: str, output: str) -> None:
    """Merge graded documents into a suite and write the result."""
    judgments = import_annotations(judgments_path)
    loaded = load_suite(suite_path)
    merged = merge_into_suite(judgments, loaded.suite)
    write_suite(merged, output)

    graded = sum(
        1 for entry in judgments.queries for doc in entry.docs if doc.graded
    )
    click.echo(f"Merged {graded} graded documents into {output}")
