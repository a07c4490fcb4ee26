"""Search backend executors and their lifecycle."""

from ftsbench.engine.base import Execution, Executor
from ftsbench.engine.factory import EXECUTOR_FACTORIES, ExecutorSet, create_executor
from ftsbench.engine.http_api import HttpApiExecutor
from ftsbench.engine.search_cluster import SearchClusterExecutor
from ftsbench.engine.sql import SqlExecutor

__all__ = [
    "EXECUTOR_FACTORIES",
    "Execution",
    "Executor",
    "ExecutorSet",
    "HttpApiExecutor",
    "SearchClusterExecutor",
    "SqlExecutor",
    "create_executor",
]
