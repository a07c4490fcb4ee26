"""Relevance judgment export, import and merge."""

from ftsbench.judgment.models import (
    MANUAL_STRATEGY,
    UNGRADED,
    GradedDoc,
    JudgmentEntry,
    JudgmentFile,
)
from ftsbench.judgment.workflow import (
    export_for_annotation,
    import_annotations,
    merge_into_suite,
    write_judgment_file,
)

__all__ = [
    "MANUAL_STRATEGY",
    "UNGRADED",
    "GradedDoc",
    "JudgmentEntry",
    "JudgmentFile",
    "export_for_annotation",
    "import_annotations",
    "merge_into_suite",
    "write_judgment_file",
]
