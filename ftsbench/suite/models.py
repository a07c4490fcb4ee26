"""Pydantic models for benchmark suites.

A suite is a list of queries; each query carries one query spec per engine
and, optionally, graded relevance judgments.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ftsbench.errors import ResolutionError
from ftsbench.suite.template import QueryTemplate, TemplateRegistry

# ============================================================================
# Engine query specs (tagged variant)
# ============================================================================


class InlineQuery(BaseModel):
    """Query text written directly in the suite."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    query: str

    def resolve(self, registry: TemplateRegistry, suite_dir: Path | None) -> str:
        """Return the query text verbatim."""
        return self.query

    def to_yaml(self) -> Any:
        """Suite file representation (a bare string)."""
        return self.query


class FileQuery(BaseModel):
    """Query text stored in a separate file, relative to the suite file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    file: str

    def resolve(self, registry: TemplateRegistry, suite_dir: Path | None) -> str:
        """Read the query file.

        Raises:
            ResolutionError: If the file cannot be read.
        """
        path = Path(self.file)
        if not path.is_absolute():
            path = (suite_dir or Path.cwd()) / path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ResolutionError(f"Read query file '{self.file}': {e}") from e

    def to_yaml(self) -> Any:
        """Suite file representation."""
        return {"file": self.file}


class TemplateQuery(BaseModel):
    """Query rendered from a registered template and its parameters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["template"] = "template"
    template: str
    params: dict[str, Any] = Field(default_factory=dict)

    def resolve(self, registry: TemplateRegistry, suite_dir: Path | None) -> str:
        """Render the referenced template.

        Raises:
            TemplateNotFoundError: If the template is not registered.
            MissingTemplateParamsError: If parameters are missing.
        """
        return registry.render_query(self.template, self.params)

    def to_yaml(self) -> Any:
        """Suite file representation."""
        data: dict[str, Any] = {"template": self.template}
        if self.params:
            data["params"] = dict(self.params)
        return data


EngineQuerySpec = Annotated[
    InlineQuery | FileQuery | TemplateQuery, Field(discriminator="kind")
]

_SOURCE_KEYS: dict[str, str] = {
    "query": "inline",
    "file": "file",
    "template": "template",
}


def _coerce_engine_query(raw: Any) -> Any:
    """Turn the suite-file shape of an engine query into a tagged dict.

    A bare string is inline query text. A mapping must set exactly one of
    ``query``, ``file`` or ``template``.
    """
    if isinstance(raw, str):
        return {"kind": "inline", "query": raw}
    if not isinstance(raw, Mapping) or "kind" in raw:
        return raw

    present = [key for key in _SOURCE_KEYS if raw.get(key)]
    if len(present) != 1:
        raise ValueError(
            "engine query must set exactly one of 'query', 'file', 'template' "
            f"(got: {', '.join(present) or 'none'})"
        )
    return {"kind": _SOURCE_KEYS[present[0]], **raw}


# ============================================================================
# Judgments, queries, suite
# ============================================================================


class RelevanceJudgment(BaseModel):
    """A graded relevance judgment. Grade 0 means not relevant."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    relevance: int = Field(..., ge=0)

    @field_validator("doc_id", mode="before")
    @classmethod
    def _doc_id_as_str(cls, value: Any) -> Any:
        # YAML reads unquoted numeric ids as int
        return str(value) if isinstance(value, int) else value


class Query(BaseModel):
    """A benchmark query with per-engine query specs and judgments."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    description: str = ""
    engines: dict[str, EngineQuerySpec] = Field(default_factory=dict)
    judgments: list[RelevanceJudgment] = Field(default_factory=list)

    @field_validator("engines", mode="before")
    @classmethod
    def _coerce_engines(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        return {name: _coerce_engine_query(spec) for name, spec in value.items()}

    @field_validator("judgments", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def judgment_map(self) -> dict[str, int]:
        """Return judgments as ``{doc_id: relevance}``."""
        return {j.doc_id: j.relevance for j in self.judgments}

    def resolve_engine_query(
        self,
        engine: str,
        registry: TemplateRegistry,
        suite_dir: Path | None = None,
    ) -> str | None:
        """Resolve this query's text for ``engine``.

        Returns:
            The query text, or None if the query has no spec for the engine.

        Raises:
            ResolutionError: If the engine has a query that cannot be resolved.
        """
        spec = self.engines.get(engine)
        if spec is None:
            return None
        return spec.resolve(registry, suite_dir)

    def to_yaml(self) -> dict[str, Any]:
        """Suite file representation."""
        return {
            "id": self.id,
            "description": self.description,
            "engines": {name: spec.to_yaml() for name, spec in self.engines.items()},
            "judgments": [
                {"doc_id": j.doc_id, "relevance": j.relevance} for j in self.judgments
            ],
        }


class Suite(BaseModel):
    """A named, versioned collection of queries and templates."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    version: str = ""
    templates: list[QueryTemplate] = Field(default_factory=list)
    queries: list[Query] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_str(cls, value: Any) -> Any:
        # "version: 1.0" parses as a float
        if value is None:
            return ""
        return str(value) if isinstance(value, int | float) else value

    @field_validator("templates", "queries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def get_query(self, query_id: str) -> Query | None:
        """Return the query with ``query_id``, or None."""
        for query in self.queries:
            if query.id == query_id:
                return query
        return None

    def to_yaml(self) -> dict[str, Any]:
        """Suite file representation."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "version": self.version,
        }
        if self.templates:
            data["templates"] = [{"id": t.id, "query": t.query} for t in self.templates]
        data["queries"] = [q.to_yaml() for q in self.queries]
        return data
