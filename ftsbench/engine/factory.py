"""Executor construction from spec engine definitions.

Each EngineType maps to exactly one construction function. The ExecutorSet
built here is created once per run, passed explicitly to the runner, and
closes every executor when its ``with`` block exits.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError

from ftsbench.engine.base import Executor
from ftsbench.engine.http_api import HttpApiExecutor
from ftsbench.engine.search_cluster import SearchClusterExecutor
from ftsbench.engine.sql import SqlExecutor
from ftsbench.errors import ConfigurationError, ExecutorNotFoundError
from ftsbench.spec.models import BenchSpec, EngineConfig, EngineType
from ftsbench.utils.logger import get_logger

ExecutorFactory = Callable[[str, EngineConfig, float | None], Executor]


def _create_sql(name: str, config: EngineConfig, timeout: float | None) -> Executor:
    return SqlExecutor(name, config.connection)


def _create_search_cluster(
    name: str, config: EngineConfig, timeout: float | None
) -> Executor:
    return SearchClusterExecutor(
        name, config.connection, config.index, timeout=timeout
    )


def _create_http_api(
    name: str, config: EngineConfig, timeout: float | None
) -> Executor:
    return HttpApiExecutor(name, config.connection, timeout=timeout)


EXECUTOR_FACTORIES: dict[EngineType, ExecutorFactory] = {
    EngineType.RELATIONAL: _create_sql,
    EngineType.SEARCH_CLUSTER: _create_search_cluster,
    EngineType.HTTP_API: _create_http_api,
}

_unmapped = set(EngineType) - set(EXECUTOR_FACTORIES)
if _unmapped:
    raise RuntimeError(f"No executor factory for engine types: {sorted(_unmapped)}")


def create_executor(
    name: str, config: EngineConfig, timeout: float | None = None
) -> Executor:
    """Build the executor for one engine definition.

    Raises:
        ConfigurationError: If the backend client cannot be constructed
            (bad connection URL, missing database driver).
    """
    factory = EXECUTOR_FACTORIES[config.type]
    try:
        return factory(name, config, timeout)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise ConfigurationError(f"Create executor for '{name}': {e}") from e


class ExecutorSet:
    """Named executors with scoped lifetime.

    Example:
        >>> with ExecutorSet.from_spec(spec, timeout=30) as executors:
        ...     result = Runner(config).run_all(spec, executors)
    """

    def __init__(self, executors: Iterable[Executor] | Mapping[str, Executor]):
        if isinstance(executors, Mapping):
            self._executors = dict(executors)
        else:
            self._executors = {e.name: e for e in executors}
        self._closed = False

    @classmethod
    def from_spec(cls, spec: BenchSpec, timeout: float | None = None) -> "ExecutorSet":
        """Construct one executor per engine in the spec.

        If any construction fails, the executors already built are closed
        before the error propagates.
        """
        built: dict[str, Executor] = {}
        try:
            for name, config in spec.engines.items():
                built[name] = create_executor(name, config, timeout)
                get_logger("engine").debug(
                    "Created %s executor '%s'", config.type.value, name
                )
        except BaseException:
            cls(built).close()
            raise
        return cls(built)

    def get(self, name: str) -> Executor:
        try:
            return self._executors[name]
        except KeyError:
            raise ExecutorNotFoundError([name]) from None

    def subset(self, names: Iterable[str]) -> dict[str, Executor]:
        """Return the named executors in the given order.

        Raises:
            ExecutorNotFoundError: Naming every executor that is missing.
        """
        names = list(names)
        missing = [n for n in names if n not in self._executors]
        if missing:
            raise ExecutorNotFoundError(missing)
        return {n: self._executors[n] for n in names}

    def names(self) -> list[str]:
        return list(self._executors)

    def close(self) -> None:
        """Close every executor; later failures do not skip earlier ones."""
        if self._closed:
            return
        self._closed = True
        log = get_logger("engine")
        for name, executor in self._executors.items():
            try:
                executor.close()
            except Exception as e:
                log.warning("Error closing executor '%s': %s", name, e)

    def __enter__(self) -> "ExecutorSet":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._executors)

    def __contains__(self, name: str) -> bool:
        return name in self._executors

    def __iter__(self) -> Iterator[str]:
        return iter(self._executors)
