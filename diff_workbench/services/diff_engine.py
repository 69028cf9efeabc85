"""
Diff Engine Service - Line-level comparison of two text versions
"""

from __future__ import annotations

from typing import Any

from diff_workbench.models.diff import DiffReport, DiffReview, DiffStats

from . import annotator
from .aligner import DEFAULT_MAX_CELLS, align
from .tokenizer import split_lines


class DiffEngine:
    """Compare two versions of a document line by line"""

    def __init__(self, max_cells: int | None = DEFAULT_MAX_CELLS):
        self.max_cells = max_cells

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "DiffEngine":
        """Build an engine from the "diff" section of the backend config"""
        cfg = config.get("diff") or {}
        return cls(max_cells=cfg.get("maxAlignmentCells", DEFAULT_MAX_CELLS))

    def compare(self, old_text: str, new_text: str) -> DiffReport:
        """
        Produce the annotated line-by-line diff of two texts.

        Raises:
            AlignmentTooLargeError: if the inputs exceed the alignment size guard
        """
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)
        hunks = align(old_lines, new_lines, max_cells=self.max_cells)
        return annotator.annotate(hunks, old_lines, new_lines)

    def stats(self, report: DiffReport) -> DiffStats:
        """Added/removed/unchanged counts for a report"""
        return annotator.compute_stats(report)

    def are_identical(self, old_text: str, new_text: str) -> bool:
        """Trim-insensitive whole-text identity check"""
        return annotator.are_identical(old_text, new_text)

    def review(
        self,
        old_text: str,
        new_text: str,
        old_label: str = "Previous",
        new_label: str = "Current",
    ) -> DiffReview:
        """Check identity first and only compute the diff when the texts differ"""
        if self.are_identical(old_text, new_text):
            return DiffReview(identical=True, old_label=old_label, new_label=new_label)

        report = self.compare(old_text, new_text)
        return DiffReview(
            identical=False,
            report=report,
            stats=self.stats(report),
            old_label=old_label,
            new_label=new_label,
        )


_default_engine = DiffEngine()


def compare(old_text: str, new_text: str) -> DiffReport:
    """Compare two texts with the default size guard"""
    return _default_engine.compare(old_text, new_text)


def stats(report: DiffReport) -> DiffStats:
    """Summarize a diff report"""
    return _default_engine.stats(report)


def are_identical(old_text: str, new_text: str) -> bool:
    """Trim-insensitive whole-text identity check"""
    return _default_engine.are_identical(old_text, new_text)
