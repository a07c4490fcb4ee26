"""Report emission.

Supports multiple output formats: JSON, YAML, and a human-readable table.

Usage:
    from ftsbench.report import OutputFormat, emit_report, generate_report

    report = generate_report(result, spec)
    emit_report(report, sys.stdout, OutputFormat.TEXT)
    emit_report(report, "report.json", OutputFormat.JSON)
"""

import json
import sys
from collections.abc import Sequence
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from ftsbench.report.models import JobReport, Report

DEFAULT_PRIMARY_K = 10


class OutputFormat(Enum):
    """Supported output formats for reports."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable tables for stdout


def report_to_dict(report: Report) -> dict[str, Any]:
    """Plain-data form of the report (JSON-compatible)."""
    data: dict[str, Any] = report.model_dump(mode="json")
    return data


def emit_report(
    report: Report,
    output: str | Path | TextIO,
    format: OutputFormat = OutputFormat.TEXT,
    indent: int = 2,
) -> None:
    """Emit a report to a file or stream.

    Args:
        report: Report to emit.
        output: File path or file-like object (e.g., sys.stdout).
        format: Output format (JSON, YAML, TEXT).
        indent: Indentation level for JSON/YAML.
    """
    if format == OutputFormat.JSON:
        content = json.dumps(report_to_dict(report), indent=indent) + "\n"
    elif format == OutputFormat.YAML:
        content = yaml.safe_dump(
            report_to_dict(report), indent=indent, sort_keys=False
        )
    elif format == OutputFormat.TEXT:
        content = render_text(report)
    else:
        raise ValueError(f"Unknown format: {format}")

    _write_output(output, content)


def _write_output(output: str | Path | TextIO, content: str) -> None:
    if isinstance(output, str | Path):
        Path(output).write_text(content)
    else:
        output.write(content)
        if output is not sys.stdout and output is not sys.stderr:
            output.flush()


# -----------------------------------------------------------------------------
# Text rendering
# -----------------------------------------------------------------------------


def format_ms(value: float) -> str:
    """Format a millisecond duration for tables; zero renders as ``-``."""
    if value == 0:
        return "-"
    if value < 1:
        return f"{value * 1000:.1f}µs"
    if value < 1000:
        return f"{value:.2f}ms"
    return f"{value / 1000:.2f}s"


def _table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = [len(h) for h in header]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip() + "\n"

    out = line(header) + line(["-" * w for w in widths])
    for row in rows:
        out += line(row)
    return out


def _primary_k(k_values: Sequence[int]) -> int:
    return k_values[-1] if k_values else DEFAULT_PRIMARY_K


def _aggregated_table(job: JobReport, k_values: Sequence[int]) -> str:
    header = ["Engine"]
    header += [f"NDCG@{k}" for k in k_values]
    header += [f"P@{k}" for k in k_values]
    header += ["MAP", "MRR", "Errors"]

    rows = []
    for agg in job.aggregated:
        row = [agg.engine_name]
        row += [f"{agg.ndcg.get(k, 0.0):.4f}" for k in k_values]
        row += [f"{agg.precision.get(k, 0.0):.4f}" for k in k_values]
        row += [
            f"{agg.map:.4f}",
            f"{agg.mrr:.4f}",
            f"{agg.error_count}/{agg.query_count}",
        ]
        rows.append(row)
    return _table(header, rows)


def _latency_table(job: JobReport) -> str:
    header = ["Engine", "Min", "p50", "p75", "p90", "p95", "p99", "Max", "Mean"]
    header += ["Stddev", "Samples"]

    rows = []
    for agg in job.aggregated:
        s = agg.latency
        rows.append(
            [
                agg.engine_name,
                format_ms(s.min),
                format_ms(s.p50),
                format_ms(s.p75),
                format_ms(s.p90),
                format_ms(s.p95),
                format_ms(s.p99),
                format_ms(s.max),
                format_ms(s.mean),
                format_ms(s.stddev),
                str(s.sample_count),
            ]
        )
    return _table(header, rows)


def _per_query_table(job: JobReport, k_values: Sequence[int]) -> str:
    k = _primary_k(k_values)
    header = ["Query", "Engine", f"NDCG@{k}", f"P@{k}", "AP", "RR", "Hits"]
    header += ["p50", "p95", "Status"]

    rows = []
    for e in job.per_query:
        rows.append(
            [
                e.query_id,
                e.engine_name,
                f"{e.ndcg.get(k, 0.0):.4f}",
                f"{e.precision.get(k, 0.0):.4f}",
                f"{e.ap:.4f}",
                f"{e.rr:.4f}",
                str(e.total_matches),
                format_ms(e.latency.p50),
                format_ms(e.latency.p95),
                "OK" if e.ok else "ERR",
            ]
        )
    return _table(header, rows)


def render_text(report: Report) -> str:
    """Render the report as plain-text tables."""
    output = StringIO()
    k_values = report.config.k_values

    output.write("\n" + "=" * 60 + "\n")
    output.write("  FTS QUALITY BENCHMARK\n")
    output.write("=" * 60 + "\n\n")
    output.write(f"Generated: {report.meta.timestamp.isoformat()}\n")
    output.write(
        f"Runs:      {report.config.runs} measured, "
        f"{report.config.warmup_runs} warmup\n"
    )

    for job in report.jobs:
        query_count = job.aggregated[0].query_count if job.aggregated else 0
        output.write("\n" + "-" * 40 + "\n")
        output.write(f"Job: {job.job_name}\n")
        output.write("-" * 40 + "\n\n")

        output.write(f"Aggregated Results (mean across {query_count} queries)\n\n")
        output.write(_aggregated_table(job, k_values) + "\n")

        output.write("Latency Statistics (aggregated across queries)\n\n")
        output.write(_latency_table(job) + "\n")

        output.write("Per-Query Results\n\n")
        output.write(_per_query_table(job, k_values))

        errors = [e for e in job.per_query if not e.ok]
        if errors:
            output.write("\nErrors\n\n")
            for e in errors:
                output.write(f"  {e.query_id} [{e.engine_name}]: {e.error}\n")

    output.write("\n" + "=" * 60 + "\n")
    return output.getvalue()
