"""
Annotator - Expand aligned hunks into line records and derive summaries
"""

from __future__ import annotations

from diff_workbench.models.diff import (
    DiffReport,
    DiffStats,
    Hunk,
    HunkTag,
    LineKind,
    LineRecord,
)


def annotate(hunks: list[Hunk], old: list[str], new: list[str]) -> DiffReport:
    """Emit one LineRecord per aligned line with independent old/new numbering"""
    lines: list[LineRecord] = []
    old_line_number = 1
    new_line_number = 1

    for hunk in hunks:
        if hunk.tag == HunkTag.EQUAL:
            for content in old[hunk.old_start:hunk.old_end]:
                lines.append(
                    LineRecord(
                        kind=LineKind.UNCHANGED,
                        content=content,
                        old_line_number=old_line_number,
                        new_line_number=new_line_number,
                    )
                )
                old_line_number += 1
                new_line_number += 1
        elif hunk.tag == HunkTag.DELETE:
            for content in old[hunk.old_start:hunk.old_end]:
                lines.append(
                    LineRecord(
                        kind=LineKind.REMOVED,
                        content=content,
                        old_line_number=old_line_number,
                    )
                )
                old_line_number += 1
        elif hunk.tag == HunkTag.INSERT:
            for content in new[hunk.new_start:hunk.new_end]:
                lines.append(
                    LineRecord(
                        kind=LineKind.ADDED,
                        content=content,
                        new_line_number=new_line_number,
                    )
                )
                new_line_number += 1

    return DiffReport(lines=lines)


def compute_stats(report: DiffReport) -> DiffStats:
    """Count line records by kind"""
    added = removed = unchanged = 0

    for line in report.lines:
        if line.kind == LineKind.ADDED:
            added += 1
        elif line.kind == LineKind.REMOVED:
            removed += 1
        else:
            unchanged += 1

    return DiffStats(added=added, removed=removed, unchanged=unchanged)


def are_identical(old_text: str, new_text: str) -> bool:
    """Whole-text comparison ignoring leading/trailing whitespace only"""
    return old_text.strip() == new_text.strip()
