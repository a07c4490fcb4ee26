"""Judgment workflow: pool -> annotation template -> graded suite.

Usage:
    pool = read_pool_file("pool.yaml")
    write_judgment_file(export_for_annotation(pool), "judgments.yaml")
    # ...annotators replace every -1 grade...
    graded = import_annotations("judgments.yaml")
    merged = merge_into_suite(graded, load_suite("suite.yaml").suite)
    write_suite(merged, "suite.graded.yaml")
"""

from pathlib import Path

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from ftsbench.errors import ConfigurationError
from ftsbench.judgment.models import (
    MANUAL_STRATEGY,
    UNGRADED,
    GradedDoc,
    JudgmentEntry,
    JudgmentFile,
)
from ftsbench.pool.pooler import PoolFile
from ftsbench.suite.models import RelevanceJudgment, Suite
from ftsbench.utils.logger import get_logger


def export_for_annotation(pool: PoolFile) -> JudgmentFile:
    """Turn a pool into a judgment file with every document ungraded."""
    return JudgmentFile(
        strategy=MANUAL_STRATEGY,
        queries=[
            JudgmentEntry(
                query_id=entry.query_id,
                docs=[GradedDoc(doc_id=d.doc_id, grade=UNGRADED) for d in entry.docs],
            )
            for entry in pool.queries
        ],
    )


def write_judgment_file(judgments: JudgmentFile, path: str | Path) -> None:
    """Write a judgment file as YAML."""
    content = yaml.safe_dump(judgments.model_dump(), sort_keys=False, allow_unicode=True)
    Path(path).write_text(content)


def import_annotations(path: str | Path) -> JudgmentFile:
    """Read a (possibly completed) judgment file.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigurationError(f"Read judgment file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Parse judgment file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Judgment file '{path}' must be a mapping")

    try:
        return JudgmentFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid judgment file '{path}': {e}") from e


def merge_into_suite(judgments: JudgmentFile, suite: Suite) -> Suite:
    """Return a copy of ``suite`` with judgments replaced from the file.

    Queries present in the judgment file get exactly their graded documents
    (grade >= 0) as judgments; ungraded documents are dropped. Other
    queries keep their judgments. ``suite`` itself is not modified.
    """
    graded = {entry.query_id: entry.docs for entry in judgments.queries}

    queries = []
    for query in suite.queries:
        docs = graded.get(query.id)
        if docs is None:
            queries.append(query)
            continue
        new_judgments = [
            RelevanceJudgment(doc_id=d.doc_id, relevance=d.grade)
            for d in docs
            if d.graded
        ]
        get_logger("judgment").debug(
            "Query '%s': %d of %d documents graded",
            query.id,
            len(new_judgments),
            len(docs),
        )
        queries.append(query.model_copy(update={"judgments": new_judgments}))

    unknown = set(graded) - {q.id for q in suite.queries}
    if unknown:
        get_logger("judgment").warning(
            "Judgments for queries not in suite '%s': %s",
            suite.name,
            ", ".join(sorted(unknown)),
        )

    return suite.model_copy(update={"queries": queries})
