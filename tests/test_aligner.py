"""Tests for LCS alignment"""

import pytest

from diff_workbench.models.diff import HunkTag
from diff_workbench.services.aligner import AlignmentTooLargeError, align


def tags(hunks):
    return [hunk.tag for hunk in hunks]


def spans(hunks):
    return [(h.tag, h.old_start, h.old_end, h.new_start, h.new_end) for h in hunks]


def rebuild(hunks, old, new):
    """Reassemble both sides from the hunk spans"""
    old_side = []
    new_side = []
    for hunk in hunks:
        if hunk.tag in (HunkTag.EQUAL, HunkTag.DELETE):
            old_side.extend(old[hunk.old_start:hunk.old_end])
        if hunk.tag in (HunkTag.EQUAL, HunkTag.INSERT):
            new_side.extend(new[hunk.new_start:hunk.new_end])
    return old_side, new_side


def test_both_empty_yields_no_hunks():
    assert align([], []) == []


def test_identical_yields_single_equal_hunk():
    lines = ["a", "b", "c"]
    assert spans(align(lines, list(lines))) == [(HunkTag.EQUAL, 0, 3, 0, 3)]


def test_disjoint_yields_delete_then_insert():
    hunks = align(["a", "b"], ["x", "y", "z"])
    assert spans(hunks) == [
        (HunkTag.DELETE, 0, 2, 0, 0),
        (HunkTag.INSERT, 2, 2, 0, 3),
    ]


def test_empty_old_yields_single_insert():
    assert spans(align([], ["a", "b"])) == [(HunkTag.INSERT, 0, 0, 0, 2)]


def test_empty_new_yields_single_delete():
    assert spans(align(["a", "b"], [])) == [(HunkTag.DELETE, 0, 2, 0, 0)]


def test_replacement_in_middle_groups_delete_before_insert():
    hunks = align(["a", "b", "c", "d"], ["a", "x", "y", "d"])
    assert tags(hunks) == [HunkTag.EQUAL, HunkTag.DELETE, HunkTag.INSERT, HunkTag.EQUAL]


def test_interleaved_edits_are_never_split_inside_a_region():
    old = ["a", "b", "c", "d", "e"]
    new = ["x", "b", "y", "z", "e", "w"]
    hunks = align(old, new)
    for previous, current in zip(hunks, hunks[1:]):
        assert not (previous.tag == HunkTag.INSERT and current.tag == HunkTag.DELETE)
        assert not (previous.tag == current.tag)


def test_repeated_lines_match_earliest():
    hunks = align(["a"], ["a", "a"])
    assert spans(hunks) == [
        (HunkTag.EQUAL, 0, 1, 0, 1),
        (HunkTag.INSERT, 1, 1, 1, 2),
    ]


def test_matching_is_case_and_whitespace_sensitive():
    hunks = align(["Hello", "x "], ["hello", "x"])
    assert tags(hunks) == [HunkTag.DELETE, HunkTag.INSERT]


@pytest.mark.parametrize(
    "old, new",
    [
        (["a", "b", "c"], ["a", "c"]),
        (["a", "b"], ["b", "a"]),
        (["x", "a", "b", "x"], ["a", "x", "b"]),
        (["def f():", "    pass", "", "def g():"], ["def f():", "    return 1", "", "def h():", "def g():"]),
        (["", "", "a"], ["a", "", ""]),
    ],
)
def test_hunks_reproduce_both_sides(old, new):
    hunks = align(old, new)
    assert rebuild(hunks, old, new) == (old, new)


def test_lcs_length_is_maximal():
    old = ["a", "b", "c", "a", "b", "b", "a"]
    new = ["c", "b", "a", "b", "a", "c"]
    hunks = align(old, new)
    matched = sum(h.old_end - h.old_start for h in hunks if h.tag == HunkTag.EQUAL)
    assert matched == 4


def test_size_guard_raises():
    old = [str(i) for i in range(100)]
    new = [str(i) + "!" for i in range(100)]
    with pytest.raises(AlignmentTooLargeError) as exc_info:
        align(old, new, max_cells=1000)

    assert exc_info.value.old_count == 100
    assert exc_info.value.new_count == 100
    assert "too large" in str(exc_info.value)


def test_size_guard_ignores_shared_prefix():
    shared = [str(i) for i in range(1000)]
    hunks = align(shared + ["a"], shared + ["b"], max_cells=10)
    assert tags(hunks) == [HunkTag.EQUAL, HunkTag.DELETE, HunkTag.INSERT]


def test_size_guard_can_be_disabled():
    old = [str(i) for i in range(50)]
    new = list(reversed(old))
    hunks = align(old, new, max_cells=None)
    assert rebuild(hunks, old, new) == (old, new)
