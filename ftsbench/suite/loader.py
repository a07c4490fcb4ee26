"""Load, validate and write benchmark suite files (YAML)."""

from dataclasses import dataclass
from pathlib import Path

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from ftsbench.errors import ConfigurationError
from ftsbench.suite.models import Suite, TemplateQuery
from ftsbench.suite.template import TemplateRegistry


@dataclass(frozen=True)
class LoadedSuite:
    """A validated suite plus what is needed to resolve its queries."""

    suite: Suite
    registry: TemplateRegistry
    dir: Path | None = None


def parse_suite(content: str, suite_dir: Path | None = None) -> LoadedSuite:
    """Parse and validate suite YAML.

    Args:
        content: Suite file contents.
        suite_dir: Directory that file-referenced queries are relative to.

    Raises:
        ConfigurationError: If the suite is malformed or incomplete.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Parse suite YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Suite file must be a mapping")

    try:
        suite = Suite.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid suite: {e}") from e

    registry = TemplateRegistry()
    for template in suite.templates:
        registry.register(template)

    _validate_queries(suite, registry)
    return LoadedSuite(suite=suite, registry=registry, dir=suite_dir)


def _validate_queries(suite: Suite, registry: TemplateRegistry) -> None:
    if not suite.queries:
        raise ConfigurationError("Suite has no queries")

    seen: set[str] = set()
    for index, query in enumerate(suite.queries):
        if not query.id:
            raise ConfigurationError(f"Query at index {index} has no id")
        if query.id in seen:
            raise ConfigurationError(f"Duplicate query id '{query.id}'")
        seen.add(query.id)

        if not query.engines:
            raise ConfigurationError(f"Query '{query.id}' has no engines")

        for engine_name, spec in query.engines.items():
            if isinstance(spec, TemplateQuery) and spec.template not in registry:
                raise ConfigurationError(
                    f"Query '{query.id}' engine '{engine_name}' references "
                    f"unknown template '{spec.template}'"
                )


def load_suite(path: str | Path) -> LoadedSuite:
    """Load a suite file; file-referenced queries resolve relative to it.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid.
    """
    path = Path(path)
    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigurationError(f"Read suite file '{path}': {e}") from e

    return parse_suite(content, suite_dir=path.parent)


def dump_suite(suite: Suite) -> str:
    """Serialize a suite back to the suite-file YAML shape."""
    result: str = yaml.safe_dump(
        suite.to_yaml(), sort_keys=False, allow_unicode=True, default_flow_style=False
    )
    return result


def write_suite(suite: Suite, path: str | Path) -> None:
    """Write a suite file."""
    Path(path).write_text(dump_suite(suite))
