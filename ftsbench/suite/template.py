"""Query templates with ``{{placeholder}}`` substitution.

Usage:
    from ftsbench.suite.template import QueryTemplate, TemplateRegistry

    registry = TemplateRegistry()
    registry.register(
        QueryTemplate(
            id="fts",
            query="SELECT id FROM articles WHERE tsv @@ plainto_tsquery('{{terms}}')",
        )
    )
    sql = registry.render_query("fts", {"terms": "climate change"})
"""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict

from ftsbench.errors import (
    InvalidTemplateError,
    MissingTemplateParamsError,
    TemplateNameCollisionError,
    TemplateNotFoundError,
)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def format_value(value: Any) -> str:
    """Format a template parameter value as query text.

    Strings pass through, booleans become ``true``/``false``, numbers use
    plain decimal notation, and sequences (nested too) are joined with ", ".
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return str(value)
        return format(Decimal(repr(value)).normalize(), "f")
    if isinstance(value, list | tuple):
        return ", ".join(format_value(item) for item in value)
    return str(value)


def _placeholder_names(text: str) -> list[str]:
    """Return distinct placeholder names in order of first appearance."""
    names: list[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


class QueryTemplate(BaseModel):
    """A named query pattern containing ``{{name}}`` placeholders."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    query: str = ""

    def render(self, params: Mapping[str, Any] | None = None) -> str:
        """Substitute every placeholder found in ``params``.

        Raises:
            MissingTemplateParamsError: If any placeholder is left without a
                value. The error lists all of them.
        """
        params = params or {}

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in params:
                return format_value(params[name])
            return match.group(0)

        rendered = PLACEHOLDER_PATTERN.sub(_substitute, self.query)

        missing = _placeholder_names(rendered)
        if missing:
            raise MissingTemplateParamsError(self.id, missing)
        return rendered

    def required_params(self) -> list[str]:
        """Return the placeholder names, deduplicated, in first-appearance order."""
        return _placeholder_names(self.query)

    def validate_template(self) -> None:
        """Check the template has an id and a pattern.

        Raises:
            InvalidTemplateError: If either is empty.
        """
        if not self.id:
            raise InvalidTemplateError("Template has no id")
        if not self.query:
            raise InvalidTemplateError(f"Template '{self.id}' has no query")


class TemplateRegistry:
    """Registry of query templates keyed by id.

    Raises TemplateNameCollisionError if two templates share an id.

    Example:
        >>> registry = TemplateRegistry()
        >>> registry.register(QueryTemplate(id="t", query="{{q}}"))
        >>> registry.render_query("t", {"q": "news"})
        'news'
    """

    def __init__(self, templates: list[QueryTemplate] | None = None) -> None:
        self._templates: dict[str, QueryTemplate] = {}
        for template in templates or []:
            self.register(template)

    def register(self, template: QueryTemplate) -> None:
        """Register a template.

        Raises:
            InvalidTemplateError: If the template has no id or pattern.
            TemplateNameCollisionError: If the id is already registered.
        """
        template.validate_template()
        if template.id in self._templates:
            raise TemplateNameCollisionError(template.id)
        self._templates[template.id] = template

    def get(self, template_id: str) -> QueryTemplate:
        """Get a template by id.

        Raises:
            TemplateNotFoundError: If no template has this id.
        """
        if template_id not in self._templates:
            raise TemplateNotFoundError(template_id)
        return self._templates[template_id]

    def render_query(
        self, template_id: str, params: Mapping[str, Any] | None = None
    ) -> str:
        """Look up a template and render it with ``params``."""
        return self.get(template_id).render(params)

    def ids(self) -> list[str]:
        """Return registered template ids in registration order."""
        return list(self._templates)

    def __len__(self) -> int:
        """Return number of registered templates."""
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        """Check if a template id is registered."""
        return template_id in self._templates
