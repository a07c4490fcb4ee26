"""Pydantic models for judgment files."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

UNGRADED = -1
MANUAL_STRATEGY = "manual"


class GradedDoc(BaseModel):
    """A document and its grade; ``UNGRADED`` until an annotator fills it in."""

    doc_id: str
    grade: int = UNGRADED

    @field_validator("doc_id", mode="before")
    @classmethod
    def _doc_id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("grade", mode="before")
    @classmethod
    def _blank_as_ungraded(cls, value: Any) -> Any:
        return UNGRADED if value is None else value

    @property
    def graded(self) -> bool:
        return self.grade >= 0


class JudgmentEntry(BaseModel):
    """Graded documents for one query."""

    query_id: str
    docs: list[GradedDoc] = Field(default_factory=list)

    @field_validator("docs", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class JudgmentFile(BaseModel):
    """A set of graded pools, as exported for annotation."""

    strategy: str = MANUAL_STRATEGY
    queries: list[JudgmentEntry] = Field(default_factory=list)

    @field_validator("queries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
