"""Search-cluster executor (Elasticsearch / OpenSearch ``_search`` API)."""

import time
from collections.abc import Sequence
from typing import Any

import httpx

from ftsbench.engine.base import Execution, Executor
from ftsbench.errors import ExecutionError

DEFAULT_INDEX = "news"


class SearchClusterExecutor(Executor):
    """POSTs the query text as a JSON body to ``{base}/{index}/_search``."""

    def __init__(
        self,
        name: str,
        base_url: str,
        index: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(name)
        self._url = f"{base_url.rstrip('/')}/{index or DEFAULT_INDEX}/_search"
        self._client = client or httpx.Client(timeout=timeout)

    def execute(
        self,
        query: str,
        params: Sequence[Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Execution:
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        try:
            start = time.perf_counter()
            response = self._client.post(
                self._url,
                content=query,
                headers={"Content-Type": "application/json"},
                **extra,
            )
            latency_ms = (time.perf_counter() - start) * 1000
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise ExecutionError(
                self.name,
                f"status {e.response.status_code}: {e.response.text}",
            ) from e
        except httpx.HTTPError as e:
            raise ExecutionError(self.name, f"request: {e}") from e
        except ValueError as e:
            raise ExecutionError(self.name, f"parse response: {e}") from e

        return Execution(
            ranked_ids=self._ranked_ids(body),
            total_matches=self._total_matches(body),
            latency_ms=latency_ms,
        )

    def _ranked_ids(self, body: Any) -> list[str]:
        try:
            hits = body["hits"]["hits"]
            ids = []
            for hit in hits:
                source = hit.get("_source") or {}
                doc_id = source.get("id", hit.get("_id"))
                if doc_id is None:
                    raise ExecutionError(self.name, "hit has no document id")
                ids.append(str(doc_id))
            return ids
        except (KeyError, TypeError, AttributeError) as e:
            raise ExecutionError(self.name, f"unexpected response shape: {e}") from e

    @staticmethod
    def _total_matches(body: Any) -> int:
        total = body.get("hits", {}).get("total", 0)
        if isinstance(total, dict):
            return int(total.get("value", 0))
        return int(total or 0)

    def close(self) -> None:
        self._client.close()
