"""Benchmark reports: aggregation and emission."""

from ftsbench.report.aggregate import aggregate_job, generate_report, mask_connection
from ftsbench.report.emit import (
    OutputFormat,
    emit_report,
    format_ms,
    render_text,
    report_to_dict,
)
from ftsbench.report.models import (
    AggregatedEntry,
    BenchMeta,
    CorpusInfo,
    EngineInfo,
    Entry,
    EnvironmentInfo,
    JobReport,
    Report,
    ReportConfig,
)

__all__ = [
    "AggregatedEntry",
    "BenchMeta",
    "CorpusInfo",
    "EngineInfo",
    "Entry",
    "EnvironmentInfo",
    "JobReport",
    "OutputFormat",
    "Report",
    "ReportConfig",
    "aggregate_job",
    "emit_report",
    "format_ms",
    "generate_report",
    "mask_connection",
    "render_text",
    "report_to_dict",
]
