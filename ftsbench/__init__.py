"""ftsbench - quality and latency benchmarking for full-text search backends."""

from ftsbench.version import FTSBENCH_VERSION, Version

__version__ = str(FTSBENCH_VERSION)
__version_info__ = FTSBENCH_VERSION

__all__ = [
    "FTSBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
