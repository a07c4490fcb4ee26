"""Tests for the judgment export/import/merge workflow."""

import pytest

from ftsbench.errors import ConfigurationError
from ftsbench.judgment import (
    MANUAL_STRATEGY,
    UNGRADED,
    GradedDoc,
    JudgmentEntry,
    JudgmentFile,
    export_for_annotation,
    import_annotations,
    merge_into_suite,
    write_judgment_file,
)
from ftsbench.pool import PoolEntry, PooledDoc, PoolFile
from ftsbench.suite.loader import parse_suite

SUITE = """
name: s
queries:
  - id: q1
    engines: {a: qa1}
    judgments:
      - {doc_id: old, relevance: 2}
  - id: q2
    engines: {a: qa2}
    judgments:
      - {doc_id: keep, relevance: 1}
"""


def _pool() -> PoolFile:
    return PoolFile(
        suite_name="s",
        queries=[
            PoolEntry(
                query_id="q1",
                docs=[
                    PooledDoc(doc_id="id1", sources=["a"]),
                    PooledDoc(doc_id="id2", sources=["a", "b"]),
                ],
            )
        ],
    )


class TestExport:
    """Tests for export_for_annotation."""

    def test_every_doc_ungraded(self):
        """Test exported docs all carry the ungraded sentinel."""
        judgments = export_for_annotation(_pool())

        assert judgments.strategy == MANUAL_STRATEGY
        assert [e.query_id for e in judgments.queries] == ["q1"]
        assert [d.doc_id for d in judgments.queries[0].docs] == ["id1", "id2"]
        assert all(d.grade == UNGRADED for d in judgments.queries[0].docs)
        assert not any(d.graded for d in judgments.queries[0].docs)

    def test_write_then_import(self, tmp_path):
        """Test an exported file reads back unchanged."""
        path = tmp_path / "judgments.yaml"
        judgments = export_for_annotation(_pool())

        write_judgment_file(judgments, path)

        assert import_annotations(path) == judgments


class TestImport:
    """Tests for import_annotations."""

    def test_blank_grade_is_ungraded(self, tmp_path):
        """Test an emptied grade field reads as ungraded."""
        path = tmp_path / "judgments.yaml"
        path.write_text(
            "queries:\n"
            "  - query_id: q1\n"
            "    docs:\n"
            "      - {doc_id: 17, grade: 2}\n"
            "      - {doc_id: x, grade: }\n"
        )

        judgments = import_annotations(path)

        docs = judgments.queries[0].docs
        assert docs[0] == GradedDoc(doc_id="17", grade=2)
        assert docs[1].grade == UNGRADED

    @pytest.mark.parametrize(
        "content",
        ["- a\n- b\n", "queries: [{docs: []}]\n", "queries: [\n"],
    )
    def test_malformed_file(self, tmp_path, content):
        """Test unreadable judgment files are configuration errors."""
        path = tmp_path / "judgments.yaml"
        path.write_text(content)

        with pytest.raises(ConfigurationError):
            import_annotations(path)

    def test_missing_file(self, tmp_path):
        """Test a missing judgment file."""
        with pytest.raises(ConfigurationError, match="Read judgment file"):
            import_annotations(tmp_path / "nope.yaml")


class TestMerge:
    """Tests for merge_into_suite."""

    def test_only_graded_docs_kept(self):
        """Test ungraded docs are dropped and existing judgments replaced."""
        suite = parse_suite(SUITE).suite
        judgments = JudgmentFile(
            queries=[
                JudgmentEntry(
                    query_id="q1",
                    docs=[
                        GradedDoc(doc_id="id1", grade=3),
                        GradedDoc(doc_id="id2", grade=UNGRADED),
                    ],
                )
            ]
        )

        merged = merge_into_suite(judgments, suite)

        assert merged.get_query("q1").judgment_map() == {"id1": 3}

    def test_absent_queries_untouched(self):
        """Test queries not in the judgment file keep their judgments."""
        suite = parse_suite(SUITE).suite
        judgments = JudgmentFile(
            queries=[JudgmentEntry(query_id="q1", docs=[GradedDoc(doc_id="a", grade=0)])]
        )

        merged = merge_into_suite(judgments, suite)

        assert merged.get_query("q2").judgment_map() == {"keep": 1}
        assert merged.get_query("q1").judgment_map() == {"a": 0}

    def test_input_suite_not_modified(self):
        """Test merging returns a new suite."""
        suite = parse_suite(SUITE).suite
        judgments = JudgmentFile(
            queries=[JudgmentEntry(query_id="q1", docs=[GradedDoc(doc_id="n", grade=1)])]
        )

        merged = merge_into_suite(judgments, suite)

        assert merged is not suite
        assert suite.get_query("q1").judgment_map() == {"old": 2}

    def test_unknown_query_ignored(self):
        """Test judgments for queries outside the suite are skipped."""
        suite = parse_suite(SUITE).suite
        judgments = JudgmentFile(
            queries=[JudgmentEntry(query_id="zz", docs=[GradedDoc(doc_id="n", grade=1)])]
        )

        merged = merge_into_suite(judgments, suite)

        assert [q.id for q in merged.queries] == ["q1", "q2"]
        assert merged.get_query("q1").judgment_map() == {"old": 2}
