"""Tests for suite parsing, query resolution and suite serialization."""

import pytest

from ftsbench.errors import ConfigurationError, ResolutionError
from ftsbench.suite.loader import dump_suite, load_suite, parse_suite, write_suite
from ftsbench.suite.models import FileQuery, InlineQuery, TemplateQuery

SUITE_YAML = """
name: fts_quality_v1
description: Core relevance queries
version: 1.0
templates:
  - id: pg_fts
    query: "SELECT id FROM articles WHERE tsv @@ plainto_tsquery('{{terms}}') LIMIT {{limit}}"
queries:
  - id: q1
    description: climate change
    engines:
      pg-native:
        template: pg_fts
        params:
          terms: climate change
          limit: 10
      es: '{"query": {"match": {"title": "climate change"}}}'
    judgments:
      - doc_id: docA
        relevance: 3
      - doc_id: 42
        relevance: 1
  - id: q2
    description: elections
    engines:
      pg-native:
        file: queries/q2.sql
"""


class TestParseSuite:
    """Tests for parse_suite."""

    def test_parse_valid_suite(self):
        """Test a complete suite parses with all three query kinds."""
        loaded = parse_suite(SUITE_YAML)
        suite = loaded.suite

        assert suite.name == "fts_quality_v1"
        assert suite.version == "1.0"
        assert [q.id for q in suite.queries] == ["q1", "q2"]
        assert "pg_fts" in loaded.registry

        q1 = suite.queries[0]
        assert isinstance(q1.engines["pg-native"], TemplateQuery)
        assert isinstance(q1.engines["es"], InlineQuery)
        assert isinstance(suite.queries[1].engines["pg-native"], FileQuery)

    def test_judgment_map_coerces_ids(self):
        """Test numeric doc ids are read as strings."""
        q1 = parse_suite(SUITE_YAML).suite.queries[0]

        assert q1.judgment_map() == {"docA": 3, "42": 1}

    def test_resolve_template_query(self):
        """Test a template-backed query renders with its params."""
        loaded = parse_suite(SUITE_YAML)
        q1 = loaded.suite.queries[0]

        text = q1.resolve_engine_query("pg-native", loaded.registry)
        assert text == (
            "SELECT id FROM articles WHERE tsv @@ "
            "plainto_tsquery('climate change') LIMIT 10"
        )

    def test_resolve_missing_engine_returns_none(self):
        """Test a query without a spec for an engine resolves to None."""
        loaded = parse_suite(SUITE_YAML)

        assert loaded.suite.queries[1].resolve_engine_query("es", loaded.registry) is None

    def test_no_queries(self):
        """Test a suite needs at least one query."""
        with pytest.raises(ConfigurationError, match="no queries"):
            parse_suite("name: empty\nqueries: []\n")

    def test_not_a_mapping(self):
        """Test non-mapping YAML is rejected."""
        with pytest.raises(ConfigurationError):
            parse_suite("- just\n- a list\n")

    def test_duplicate_query_ids(self):
        """Test query ids must be unique."""
        content = """
queries:
  - id: q1
    engines: {pg: SELECT 1}
  - id: q1
    engines: {pg: SELECT 2}
"""
        with pytest.raises(ConfigurationError, match="Duplicate query id 'q1'"):
            parse_suite(content)

    def test_query_without_id(self):
        """Test every query needs an id."""
        with pytest.raises(ConfigurationError, match="index 0 has no id"):
            parse_suite("queries:\n  - engines: {pg: SELECT 1}\n")

    def test_query_without_engines(self):
        """Test every query needs at least one engine spec."""
        with pytest.raises(ConfigurationError, match="has no engines"):
            parse_suite("queries:\n  - id: q1\n")

    def test_unknown_template_reference(self):
        """Test template references are checked at load time."""
        content = """
queries:
  - id: q1
    engines:
      pg: {template: nope}
"""
        with pytest.raises(ConfigurationError, match="unknown template 'nope'"):
            parse_suite(content)

    def test_engine_spec_with_two_sources(self):
        """Test an engine spec may set only one of query/file/template."""
        content = """
queries:
  - id: q1
    engines:
      pg: {query: SELECT 1, file: q.sql}
"""
        with pytest.raises(ConfigurationError, match="exactly one"):
            parse_suite(content)

    def test_engine_spec_with_no_source(self):
        """Test an engine spec mapping must set a source."""
        content = """
queries:
  - id: q1
    engines:
      pg: {params: {a: 1}}
"""
        with pytest.raises(ConfigurationError, match="exactly one"):
            parse_suite(content)

    def test_duplicate_template_ids(self):
        """Test template collisions fail the load."""
        content = """
templates:
  - {id: t, query: x}
  - {id: t, query: y}
queries:
  - id: q1
    engines: {pg: SELECT 1}
"""
        with pytest.raises(ConfigurationError, match="already registered"):
            parse_suite(content)

    def test_negative_relevance_rejected(self):
        """Test judgments must have grade >= 0."""
        content = """
queries:
  - id: q1
    engines: {pg: SELECT 1}
    judgments:
      - {doc_id: d1, relevance: -1}
"""
        with pytest.raises(ConfigurationError):
            parse_suite(content)


class TestLoadSuite:
    """Tests for loading suites from disk."""

    def test_file_query_resolves_relative_to_suite(self, tmp_path):
        """Test file references are read relative to the suite file."""
        (tmp_path / "queries").mkdir()
        (tmp_path / "queries" / "q2.sql").write_text("SELECT id FROM articles")
        suite_path = tmp_path / "suite.yaml"
        suite_path.write_text(SUITE_YAML)

        loaded = load_suite(suite_path)
        q2 = loaded.suite.get_query("q2")

        assert loaded.dir == tmp_path
        assert (
            q2.resolve_engine_query("pg-native", loaded.registry, loaded.dir)
            == "SELECT id FROM articles"
        )

    def test_missing_query_file_is_resolution_error(self, tmp_path):
        """Test an unreadable query file fails resolution, not loading."""
        suite_path = tmp_path / "suite.yaml"
        suite_path.write_text(SUITE_YAML)

        loaded = load_suite(suite_path)
        q2 = loaded.suite.get_query("q2")

        with pytest.raises(ResolutionError):
            q2.resolve_engine_query("pg-native", loaded.registry, loaded.dir)

    def test_missing_suite_file(self, tmp_path):
        """Test a missing suite file is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_suite(tmp_path / "missing.yaml")


class TestDumpSuite:
    """Tests for writing suites back to YAML."""

    def test_write_then_load(self, tmp_path):
        """Test a written suite loads back to the same model."""
        original = parse_suite(SUITE_YAML).suite
        path = tmp_path / "out.yaml"

        write_suite(original, path)
        reloaded = load_suite(path).suite

        assert reloaded == original

    def test_inline_query_dumped_as_string(self):
        """Test inline specs keep the bare-string form."""
        text = dump_suite(parse_suite(SUITE_YAML).suite)

        assert "es: '{\"query\"" in text
