"""Relational full-text search executor (SQLAlchemy)."""

import time
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from ftsbench.engine.base import Execution, Executor
from ftsbench.errors import ExecutionError

TOTAL_COLUMNS = ("total_count", "total_hits")


def _normalize_url(connection: str) -> str:
    # libpq-style URLs have no driver suffix
    if connection.startswith("postgres://"):
        return "postgresql://" + connection[len("postgres://") :]
    return connection


def _bind_params(params: Sequence[Any] | None) -> dict[str, Any]:
    """Map positional params onto ``:p1``, ``:p2``... bind names."""
    if not params:
        return {}
    return {f"p{i}": value for i, value in enumerate(params, start=1)}


class SqlExecutor(Executor):
    """Runs raw SQL and reads ranked ids from the ``id`` column.

    The total match count comes from a ``total_count`` or ``total_hits``
    column on the first row when the query provides one (for example via
    ``count(*) OVER ()``), otherwise from the number of rows returned.
    """

    def __init__(
        self, name: str, connection: str, *, engine: Engine | None = None
    ) -> None:
        super().__init__(name)
        self._engine = engine or create_engine(
            _normalize_url(connection), pool_pre_ping=True
        )

    def execute(
        self,
        query: str,
        params: Sequence[Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Execution:
        try:
            with self._engine.connect() as conn:
                self._apply_timeout(conn, timeout)
                start = time.perf_counter()
                result = conn.execute(text(query), _bind_params(params))
                rows = [dict(row) for row in result.mappings()]
                latency_ms = (time.perf_counter() - start) * 1000
        except SQLAlchemyError as e:
            raise ExecutionError(self.name, f"sql exec: {e}") from e

        try:
            ranked_ids = [str(row["id"]) for row in rows]
        except KeyError:
            raise ExecutionError(
                self.name, "sql result has no 'id' column"
            ) from None

        return Execution(
            ranked_ids=ranked_ids,
            total_matches=self._total_matches(rows),
            latency_ms=latency_ms,
        )

    def _apply_timeout(self, conn: Connection, timeout: float | None) -> None:
        if timeout is None or conn.dialect.name != "postgresql":
            return
        conn.execute(text(f"SET statement_timeout = {int(timeout * 1000)}"))

    @staticmethod
    def _total_matches(rows: list[Mapping[str, Any]]) -> int:
        if rows:
            for column in TOTAL_COLUMNS:
                value = rows[0].get(column)
                if value is not None:
                    return int(value)
        return len(rows)

    def close(self) -> None:
        self._engine.dispose()
