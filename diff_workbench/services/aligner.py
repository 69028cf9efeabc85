"""
Aligner - Longest-common-subsequence alignment of two line sequences
"""

from __future__ import annotations

from diff_workbench.models.diff import Hunk, HunkTag

# Upper bound on DP table cells, roughly 2000 x 2000 lines
DEFAULT_MAX_CELLS = 4_000_000


class AlignmentTooLargeError(ValueError):
    """Raised when the LCS table for two inputs would exceed the size guard"""

    def __init__(self, old_count: int, new_count: int, max_cells: int):
        self.old_count = old_count
        self.new_count = new_count
        self.max_cells = max_cells
        super().__init__(
            f"Input too large for full alignment: {old_count} x {new_count} lines "
            f"exceeds the limit of {max_cells} table cells"
        )


def align(
    old: list[str],
    new: list[str],
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> list[Hunk]:
    """
    Align two line sequences into Equal/Delete/Insert hunks.

    Lines match on exact string equality. Equal hunks are maximal runs; each
    edit region between them yields its Delete hunk before its Insert hunk.
    On ambiguous alignments the walk matches as early as possible and consumes
    old lines before new ones.

    Raises:
        AlignmentTooLargeError: if the unmatched core of the inputs needs more
            than `max_cells` table cells. `None` disables the guard.
    """
    prefix = _common_prefix_length(old, new)
    ops = [HunkTag.EQUAL] * prefix
    ops.extend(_align_core(old[prefix:], new[prefix:], max_cells))
    return _group_ops(ops)


def _common_prefix_length(old: list[str], new: list[str]) -> int:
    """Number of leading lines shared by both sequences"""
    limit = min(len(old), len(new))
    count = 0
    while count < limit and old[count] == new[count]:
        count += 1
    return count


def _align_core(old: list[str], new: list[str], max_cells: int | None) -> list[HunkTag]:
    """Walk the LCS table and emit one operation per consumed line"""
    n, m = len(old), len(new)
    if n == 0 or m == 0:
        return [HunkTag.DELETE] * n + [HunkTag.INSERT] * m

    if max_cells is not None and (n + 1) * (m + 1) > max_cells:
        raise AlignmentTooLargeError(n, m, max_cells)

    table = _lcs_table(old, new)
    ops = []
    i = j = 0

    while i < n and j < m:
        if old[i] == new[j]:
            ops.append(HunkTag.EQUAL)
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            ops.append(HunkTag.DELETE)
            i += 1
        else:
            ops.append(HunkTag.INSERT)
            j += 1

    ops.extend([HunkTag.DELETE] * (n - i))
    ops.extend([HunkTag.INSERT] * (m - j))
    return ops


def _lcs_table(old: list[str], new: list[str]) -> list[list[int]]:
    """
    Suffix LCS lengths: table[i][j] is the LCS length of old[i:] and new[j:].
    """
    n, m = len(old), len(new)
    table = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n - 1, -1, -1):
        row = table[i]
        below = table[i + 1]
        line = old[i]
        for j in range(m - 1, -1, -1):
            if line == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    return table


def _group_ops(ops: list[HunkTag]) -> list[Hunk]:
    """Collapse per-line operations into hunks"""
    hunks = []
    i = j = k = 0

    while k < len(ops):
        old_start, new_start = i, j

        if ops[k] == HunkTag.EQUAL:
            while k < len(ops) and ops[k] == HunkTag.EQUAL:
                i += 1
                j += 1
                k += 1
            hunks.append(
                Hunk(tag=HunkTag.EQUAL, old_start=old_start, old_end=i, new_start=new_start, new_end=j)
            )
            continue

        # Edit region: everything up to the next matched line
        while k < len(ops) and ops[k] != HunkTag.EQUAL:
            if ops[k] == HunkTag.DELETE:
                i += 1
            else:
                j += 1
            k += 1

        if i > old_start:
            hunks.append(
                Hunk(tag=HunkTag.DELETE, old_start=old_start, old_end=i, new_start=new_start, new_end=new_start)
            )
        if j > new_start:
            hunks.append(
                Hunk(tag=HunkTag.INSERT, old_start=i, old_end=i, new_start=new_start, new_end=j)
            )

    return hunks
