"""Read and write pool files (YAML)."""

from pathlib import Path

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from ftsbench.errors import ConfigurationError
from ftsbench.pool.pooler import PoolFile


def dump_pool_file(pool: PoolFile) -> str:
    result: str = yaml.safe_dump(
        pool.model_dump(), sort_keys=False, allow_unicode=True
    )
    return result


def write_pool_file(pool: PoolFile, path: str | Path) -> None:
    """Write a pool file, replacing any existing file."""
    Path(path).write_text(dump_pool_file(pool))


def parse_pool_file(content: str) -> PoolFile:
    """Parse pool file YAML.

    Raises:
        ConfigurationError: If the content is not a valid pool file.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Parse pool file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Pool file must be a mapping")

    try:
        return PoolFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid pool file: {e}") from e


def read_pool_file(path: str | Path) -> PoolFile:
    """Read a pool file written by :func:`write_pool_file`."""
    path = Path(path)
    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigurationError(f"Read pool file '{path}': {e}") from e
    return parse_pool_file(content)
