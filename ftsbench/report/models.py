"""Pydantic models for benchmark reports."""

import os
import platform
from datetime import datetime

import psutil
from pydantic import BaseModel, Field

from ftsbench.runner.latency import LatencyStats


class EngineInfo(BaseModel):
    """Engine type and masked connection string."""

    type: str
    connection: str
    version: str | None = None


class CorpusInfo(BaseModel):
    """Optional description of the indexed corpus."""

    name: str | None = None
    doc_count: int | None = None
    index_name: str | None = None


class EnvironmentInfo(BaseModel):
    """Machine the benchmark ran on."""

    python_version: str
    os: str
    arch: str
    cpu_count: int
    total_memory_bytes: int | None = None

    @classmethod
    def collect(cls) -> "EnvironmentInfo":
        """Describe the current machine."""
        try:
            total_memory: int | None = psutil.virtual_memory().total
        except (OSError, RuntimeError):
            total_memory = None
        return cls(
            python_version=platform.python_version(),
            os=platform.system().lower(),
            arch=platform.machine(),
            cpu_count=psutil.cpu_count(logical=True) or os.cpu_count() or 1,
            total_memory_bytes=total_memory,
        )


class BenchMeta(BaseModel):
    """Report envelope metadata."""

    version: str
    timestamp: datetime
    engines: dict[str, EngineInfo] = Field(default_factory=dict)
    corpus: CorpusInfo | None = None
    environment: EnvironmentInfo


class ReportConfig(BaseModel):
    """Scoring and run settings used for the report."""

    k_values: list[int]
    relevance_threshold: int
    warmup_runs: int = 0
    runs: int = 1


class Entry(BaseModel):
    """One (query, engine) row. Errored rows keep zero scores."""

    query_id: str
    job_name: str
    engine_name: str
    ndcg: dict[int, float] = Field(default_factory=dict)
    precision: dict[int, float] = Field(default_factory=dict)
    recall: dict[int, float] = Field(default_factory=dict)
    f1: dict[int, float] = Field(default_factory=dict)
    ap: float = 0.0
    rr: float = 0.0
    total_matches: int = 0
    latency: LatencyStats = Field(default_factory=LatencyStats)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AggregatedEntry(BaseModel):
    """Per-engine means across a job's queries."""

    engine_name: str
    ndcg: dict[int, float] = Field(default_factory=dict)
    precision: dict[int, float] = Field(default_factory=dict)
    recall: dict[int, float] = Field(default_factory=dict)
    f1: dict[int, float] = Field(default_factory=dict)
    map: float = 0.0
    mrr: float = 0.0
    latency: LatencyStats = Field(default_factory=LatencyStats)
    query_count: int = 0
    error_count: int = 0


class JobReport(BaseModel):
    """Aggregated and per-query rows for one job."""

    job_name: str
    layer: str | None = None
    aggregated: list[AggregatedEntry] = Field(default_factory=list)
    per_query: list[Entry] = Field(default_factory=list)


class Report(BaseModel):
    """Versioned benchmark report."""

    meta: BenchMeta
    config: ReportConfig
    jobs: list[JobReport] = Field(default_factory=list)
