"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class LineKind(str, Enum):
    """Classification of a single line in a diff report"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class HunkTag(str, Enum):
    """Alignment tag of a hunk"""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


class Hunk(BaseModel):
    """A maximal run of aligned lines, as half-open 0-based spans"""

    tag: HunkTag
    old_start: int = Field(ge=0)
    old_end: int = Field(ge=0)
    new_start: int = Field(ge=0)
    new_end: int = Field(ge=0)


class LineRecord(BaseModel):
    """One row of the annotated diff"""

    kind: LineKind
    content: str
    old_line_number: int | None = Field(default=None, ge=1)  # 1-indexed
    new_line_number: int | None = Field(default=None, ge=1)  # 1-indexed

    @model_validator(mode="after")
    def _check_line_numbers(self) -> "LineRecord":
        has_old = self.old_line_number is not None
        has_new = self.new_line_number is not None

        if self.kind == LineKind.UNCHANGED and not (has_old and has_new):
            raise ValueError("unchanged line requires both old and new line numbers")
        if self.kind == LineKind.ADDED and (has_old or not has_new):
            raise ValueError("added line requires only a new line number")
        if self.kind == LineKind.REMOVED and (has_new or not has_old):
            raise ValueError("removed line requires only an old line number")
        return self


class DiffReport(BaseModel):
    """Full line-by-line comparison of two texts"""

    lines: list[LineRecord] = []

    def old_lines(self) -> list[str]:
        """Lines of the old document, in order"""
        return [line.content for line in self.lines if line.old_line_number is not None]

    def new_lines(self) -> list[str]:
        """Lines of the new document, in order"""
        return [line.content for line in self.lines if line.new_line_number is not None]


class DiffStats(BaseModel):
    """Per-kind line counts of a diff report"""

    added: int = Field(default=0, ge=0)
    removed: int = Field(default=0, ge=0)
    unchanged: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.added + self.removed + self.unchanged

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed)


class DiffReview(BaseModel):
    """
    Outcome of a review comparison.

    When the texts are identical (trim-insensitive) no diff is computed and
    both `report` and `stats` are None. A computed report that happens to
    contain no changes is reported with `identical=False`.
    """

    identical: bool
    report: DiffReport | None = None
    stats: DiffStats | None = None
    old_label: str = "Previous"
    new_label: str = "Current"
