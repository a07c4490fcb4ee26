"""Base class for search backend executors."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any


@dataclass
class Execution:
    """One successful backend call.

    Attributes:
        ranked_ids: Document ids in rank order.
        total_matches: Total hits reported by the backend.
        latency_ms: Wall-clock time of the call in milliseconds.
    """

    ranked_ids: list[str] = field(default_factory=list)
    total_matches: int = 0
    latency_ms: float = 0.0


class Executor(ABC):
    """Abstract base class for all search backends.

    Executors are context managers; leaving the ``with`` block closes the
    backend's connections.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def execute(
        self,
        query: str,
        params: Sequence[Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Execution:
        """
        Run one query against the backend.

        Args:
            query: Resolved query text in the backend's own syntax
            params: Optional positional parameters bound into the query
            timeout: Deadline in seconds; exceeding it is a failure

        Returns:
            Execution with ranked ids, total matches and latency

        Raises:
            ExecutionError: If the call fails for any reason
        """
        pass

    def close(self) -> None:
        """Release backend resources. Safe to call more than once."""

    def __enter__(self) -> "Executor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
