"""Generic HTTP search API executor.

The query text is a JSON request descriptor::

    {"method": "GET", "path": "/v1/search", "params": {"q": "climate"}}

and the response is expected to look like::

    {"total_matches": 42, "hits": [{"article": {"id": "..."}}, ...]}

Hits carrying a top-level ``id`` instead of an ``article`` object are
accepted too.
"""

import json
import time
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from ftsbench.engine.base import Execution, Executor
from ftsbench.errors import ExecutionError


class RequestDescriptor(BaseModel):
    """Parsed form of an HTTP API query."""

    method: str = "GET"
    path: str = ""
    params: dict[str, str] = Field(default_factory=dict)
    body: str | dict[str, Any] | None = None


class HttpApiExecutor(Executor):
    """Sends the described request to the configured base URL."""

    def __init__(
        self,
        name: str,
        base_url: str,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(name)
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def _parse_descriptor(self, query: str) -> RequestDescriptor:
        try:
            return RequestDescriptor.model_validate_json(query)
        except ValidationError as e:
            raise ExecutionError(self.name, f"parse request descriptor: {e}") from e

    def execute(
        self,
        query: str,
        params: Sequence[Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Execution:
        descriptor = self._parse_descriptor(query)

        content = descriptor.body
        if isinstance(content, dict):
            content = json.dumps(content)

        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        try:
            start = time.perf_counter()
            response = self._client.request(
                descriptor.method.upper(),
                self._base_url + descriptor.path,
                params=descriptor.params or None,
                content=content,
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

        try:
            ranked_ids = [self._hit_id(hit) for hit in body.get("hits") or []]
            total = int(body.get("total_matches", len(ranked_ids)))
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ExecutionError(self.name, f"unexpected response shape: {e}") from e

        return Execution(ranked_ids=ranked_ids, total_matches=total, latency_ms=latency_ms)

    @staticmethod
    def _hit_id(hit: dict[str, Any]) -> str:
        article = hit.get("article")
        if isinstance(article, dict):
            return str(article["id"])
        return str(hit["id"])

    def close(self) -> None:
        self._client.close()
