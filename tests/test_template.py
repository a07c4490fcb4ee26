"""Tests for query templates and the template registry."""

import pytest

from ftsbench.errors import (
    ConfigurationError,
    InvalidTemplateError,
    MissingTemplateParamsError,
    ResolutionError,
    TemplateNameCollisionError,
    TemplateNotFoundError,
)
from ftsbench.suite.template import QueryTemplate, TemplateRegistry, format_value


class TestQueryTemplate:
    """Tests for QueryTemplate rendering."""

    def test_render_substitutes_param(self):
        """Test a single placeholder is replaced."""
        t = QueryTemplate(id="q", query="SELECT * WHERE term = '{{term}}'")

        assert t.render({"term": "climate"}) == "SELECT * WHERE term = 'climate'"

    def test_render_missing_param_names_it(self):
        """Test omitting a param fails naming it."""
        t = QueryTemplate(id="q", query="SELECT * WHERE term = '{{term}}'")

        with pytest.raises(MissingTemplateParamsError) as exc_info:
            t.render({})

        assert exc_info.value.missing == ["term"]
        assert "term" in str(exc_info.value)

    def test_render_lists_every_missing_param(self):
        """Test all missing names are reported, deduplicated, in order."""
        t = QueryTemplate(id="q", query="{{a}} {{b}} {{a}} {{c}}")

        with pytest.raises(MissingTemplateParamsError) as exc_info:
            t.render({"b": 1})

        assert exc_info.value.missing == ["a", "c"]
        assert isinstance(exc_info.value, ResolutionError)

    def test_render_repeated_placeholder(self):
        """Test every occurrence of a placeholder is replaced."""
        t = QueryTemplate(id="q", query="{{x}} OR {{x}}")

        assert t.render({"x": "news"}) == "news OR news"

    def test_render_without_placeholders(self):
        """Test text without placeholders passes through."""
        t = QueryTemplate(id="q", query="SELECT 1")

        assert t.render() == "SELECT 1"

    def test_required_params(self):
        """Test placeholder names come back deduplicated in first-seen order."""
        t = QueryTemplate(id="q", query="{{lang}} {{terms}} {{lang}} {{limit}}")

        assert t.required_params() == ["lang", "terms", "limit"]

    def test_validate_rejects_empty_id_or_query(self):
        """Test templates need both an id and a pattern."""
        with pytest.raises(InvalidTemplateError):
            QueryTemplate(id="", query="x").validate_template()
        with pytest.raises(InvalidTemplateError):
            QueryTemplate(id="t", query="").validate_template()


class TestFormatValue:
    """Tests for parameter formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("climate", "climate"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (-7, "-7"),
            (10.0, "10"),
            (0.5, "0.5"),
            (1e-05, "0.00001"),
            (["a", "b"], "a, b"),
            ((1, 2.5), "1, 2.5"),
            ([["a", "b"], "c"], "a, b, c"),
            ([], ""),
        ],
    )
    def test_format_value(self, value, expected):
        """Test each supported value type."""
        assert format_value(value) == expected


class TestTemplateRegistry:
    """Tests for TemplateRegistry."""

    def test_register_and_render(self):
        """Test registering then rendering by id."""
        registry = TemplateRegistry()
        registry.register(QueryTemplate(id="fts", query="q={{terms}}"))

        assert "fts" in registry
        assert len(registry) == 1
        assert registry.render_query("fts", {"terms": ["a", "b"]}) == "q=a, b"

    def test_duplicate_id_rejected(self):
        """Test id collisions are configuration errors."""
        registry = TemplateRegistry([QueryTemplate(id="t", query="x")])

        with pytest.raises(TemplateNameCollisionError) as exc_info:
            registry.register(QueryTemplate(id="t", query="y"))

        assert exc_info.value.template_id == "t"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_register_invalid_template(self):
        """Test registering an empty template fails."""
        registry = TemplateRegistry()

        with pytest.raises(InvalidTemplateError):
            registry.register(QueryTemplate(id="t", query=""))
        assert len(registry) == 0

    def test_unknown_template(self):
        """Test looking up an unknown id."""
        registry = TemplateRegistry()

        with pytest.raises(TemplateNotFoundError):
            registry.render_query("missing", {})

    def test_ids_in_registration_order(self):
        """Test ids() keeps registration order."""
        registry = TemplateRegistry(
            [
                QueryTemplate(id="b", query="x"),
                QueryTemplate(id="a", query="y"),
            ]
        )

        assert registry.ids() == ["b", "a"]
