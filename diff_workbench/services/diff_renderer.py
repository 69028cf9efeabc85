"""
Diff Renderer - Plain-text views of a diff report
"""

from __future__ import annotations

from diff_workbench.models.diff import DiffReport, DiffStats, LineKind

MARKERS = {
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
    LineKind.UNCHANGED: " ",
}


def render_table(report: DiffReport) -> str:
    """Two line-number columns, a change marker and the line content"""
    highest = max(
        (max(line.old_line_number or 0, line.new_line_number or 0) for line in report.lines),
        default=0,
    )
    width = len(str(highest))

    rows = []
    for line in report.lines:
        old = "" if line.old_line_number is None else str(line.old_line_number)
        new = "" if line.new_line_number is None else str(line.new_line_number)
        rows.append(f"{old:>{width}} {new:>{width}} {MARKERS[line.kind]} {line.content}")

    return "\n".join(rows)


def render_inline(report: DiffReport, context_lines: int = 3) -> str:
    """Changed lines with up to `context_lines` unchanged lines around them"""
    lines = report.lines
    visible = [False] * len(lines)

    for idx, line in enumerate(lines):
        if line.kind == LineKind.UNCHANGED:
            continue
        start = max(0, idx - context_lines)
        end = min(len(lines), idx + context_lines + 1)
        for k in range(start, end):
            visible[k] = True

    result_lines = []
    for idx, line in enumerate(lines):
        if visible[idx]:
            result_lines.append(f"{MARKERS[line.kind]} {line.content}")
        elif not result_lines or result_lines[-1] != "...":
            result_lines.append("...")

    return "\n".join(result_lines)


def render_summary(stats: DiffStats) -> str:
    """Badge text for a diff"""
    return f"{stats.added} added, {stats.removed} removed, {stats.unchanged} unchanged"
