"""Benchmark suites: queries, per-engine query specs, templates, judgments.

Quick Start:
    from ftsbench.suite import load_suite

    loaded = load_suite("suites/fts_quality_v1.yaml")
    for query in loaded.suite.queries:
        text = query.resolve_engine_query("pg-native", loaded.registry, loaded.dir)
"""

from ftsbench.suite.loader import (
    LoadedSuite,
    dump_suite,
    load_suite,
    parse_suite,
    write_suite,
)
from ftsbench.suite.models import (
    EngineQuerySpec,
    FileQuery,
    InlineQuery,
    Query,
    RelevanceJudgment,
    Suite,
    TemplateQuery,
)
from ftsbench.suite.template import QueryTemplate, TemplateRegistry, format_value

__all__ = [
    "EngineQuerySpec",
    "FileQuery",
    "InlineQuery",
    "LoadedSuite",
    "Query",
    "QueryTemplate",
    "RelevanceJudgment",
    "Suite",
    "TemplateQuery",
    "TemplateRegistry",
    "dump_suite",
    "format_value",
    "load_suite",
    "parse_suite",
    "write_suite",
]
