"""Pooling: merge per-engine rankings into one judgment candidate set.

The union of every engine's top-D documents approximates full relevance
grading without judging the whole corpus. Merging is stable: documents
keep the order in which they were first seen, and each lists every engine
that returned it.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ftsbench.engine.base import Execution
from ftsbench.errors import ConfigurationError
from ftsbench.runner.results import BenchmarkResult


class PooledDoc(BaseModel):
    """A candidate document and the engines that returned it."""

    doc_id: str
    sources: list[str] = Field(default_factory=list)

    @field_validator("doc_id", mode="before")
    @classmethod
    def _doc_id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class PoolEntry(BaseModel):
    """Pooled candidates for one query."""

    query_id: str
    query_desc: str = ""
    docs: list[PooledDoc] = Field(default_factory=list)

    @field_validator("query_desc", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class PoolFile(BaseModel):
    """Persisted pool, one entry per query."""

    suite_name: str = ""
    queries: list[PoolEntry] = Field(default_factory=list)

    @field_validator("queries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def get(self, query_id: str) -> PoolEntry | None:
        for entry in self.queries:
            if entry.query_id == query_id:
                return entry
        return None


def _merge(docs: list[PooledDoc], ranked: Iterable[str], source: str) -> None:
    index = {doc.doc_id: doc for doc in docs}
    for doc_id in ranked:
        existing = index.get(doc_id)
        if existing is None:
            existing = PooledDoc(doc_id=doc_id, sources=[source])
            index[doc_id] = existing
            docs.append(existing)
        else:
            existing.sources.append(source)


def pool_results(
    executions: Mapping[str, Execution | None],
    depth: int,
    engine_order: Iterable[str] | None = None,
) -> list[PooledDoc]:
    """Merge each engine's top ``depth`` ids into a deduplicated pool.

    Args:
        executions: Engine name to that engine's execution for one query;
            None entries (failed runs) are skipped.
        depth: Documents taken from the top of each ranking.
        engine_order: Order in which engines are visited, which decides
            first-seen order and source order. Defaults to the mapping's
            own order.
    """
    order = list(engine_order) if engine_order is not None else list(executions)
    docs: list[PooledDoc] = []
    for engine_name in order:
        execution = executions.get(engine_name)
        if execution is None:
            continue
        _merge(docs, execution.ranked_ids[: max(depth, 0)], engine_name)
    return docs


def build_pool_file(result: BenchmarkResult, depth: int | None = None) -> PoolFile:
    """Build a pool file from a benchmark run.

    Engines are visited in each job's declared order; errored results are
    left out. A query that appears in several jobs gets one entry whose
    pool is extended by every job. A pool file covers a single suite.

    Args:
        result: Benchmark output.
        depth: Pool depth; defaults to the run's ``max_k``.

    Raises:
        ConfigurationError: If the jobs ran more than one suite.
    """
    if depth is None:
        depth = result.config.max_k

    suites = list(dict.fromkeys(job.suite_name or job.job_name for job in result.jobs))
    if len(suites) > 1:
        raise ConfigurationError(
            f"Pool spans several suites ({', '.join(suites)}); pool one suite at a time"
        )

    pool = PoolFile(suite_name=suites[0] if suites else "")
    entries: dict[str, PoolEntry] = {}

    for job in result.jobs:
        for query_id in job.query_order:
            executions: dict[str, Execution | None] = {}
            for engine_name in job.engine_names:
                qr = job.get(query_id, engine_name)
                if qr is None or not qr.ok:
                    continue
                executions[engine_name] = Execution(
                    ranked_ids=qr.ranked_ids, total_matches=qr.total_matches
                )

            entry = entries.get(query_id)
            if entry is None:
                entry = PoolEntry(
                    query_id=query_id,
                    query_desc=job.query_descriptions.get(query_id, ""),
                )
                entries[query_id] = entry
                pool.queries.append(entry)

            _extend(entry.docs, pool_results(executions, depth, job.engine_names))
    return pool


def _extend(docs: list[PooledDoc], pooled: list[PooledDoc]) -> None:
    index = {doc.doc_id: doc for doc in docs}
    for doc in pooled:
        existing = index.get(doc.doc_id)
        if existing is None:
            index[doc.doc_id] = doc
            docs.append(doc)
            continue
        for source in doc.sources:
            if source not in existing.sources:
                existing.sources.append(source)
