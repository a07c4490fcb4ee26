"""ftsbench utilities - logging and environment helpers."""

from ftsbench.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    expand_env,
    get_env,
)
from ftsbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
    get_logger,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "expand_env",
    "get_env",
    "get_logger",
]
