"""Judgment pools built from multi-engine rankings."""

from ftsbench.pool.pooler import (
    PoolEntry,
    PooledDoc,
    PoolFile,
    build_pool_file,
    pool_results,
)
from ftsbench.pool.store import (
    dump_pool_file,
    parse_pool_file,
    read_pool_file,
    write_pool_file,
)

__all__ = [
    "PoolEntry",
    "PoolFile",
    "PooledDoc",
    "build_pool_file",
    "dump_pool_file",
    "parse_pool_file",
    "pool_results",
    "read_pool_file",
    "write_pool_file",
]
