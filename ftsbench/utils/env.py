"""Environment variable helpers with type coercion.

Usage:
    from ftsbench.utils.env import expand_env, get_env

    level = get_env("FTSBENCH_LOG_LEVEL", default="INFO")
    timeout = get_env("FTSBENCH_TIMEOUT", default=30.0, as_type=float)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")

        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value

        # list[str] as comma-separated
        origin = getattr(as_type, "__origin__", None)
        if as_type is list or origin is list:
            return [item.strip() for item in value.split(",") if item.strip()]

        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None, masked: bool = False) -> None:
    """Log environment variable access at DEBUG level."""
    from ftsbench.utils.logger import get_logger

    display_value = "***" if masked and value is not None else value
    get_logger("env").debug(f"ENV GET {name}={display_value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
    mask_in_log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is not set.
        as_type: Type to convert the value to (bool, int, float, str, list).
        log: If True, log the access at DEBUG level.
        mask_in_log: If True, mask the value in logs (for secrets).

    Returns:
        The converted value, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("FTSBENCH_TIMEOUT", default=30.0, as_type=float)
        30.0
        >>> get_env("FTSBENCH_K_VALUES", default=["3", "5"], as_type=list)
        ['3', '5']
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value, masked=mask_in_log)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def expand_env(value: str) -> str:
    """Expand ``$VAR`` / ``${VAR}`` references in a config value.

    Connection strings in spec files commonly point at secrets kept in the
    environment; unknown variables are left untouched.
    """
    return os.path.expandvars(value)
