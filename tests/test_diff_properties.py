"""Property-based tests for the diff engine.

Texts are drawn from a small line alphabet so that repeated, blank and
carriage-return lines collide often, which exercises the alignment
tie-breaks far more than random Unicode would.
"""

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from diff_workbench.models.diff import LineKind
from diff_workbench.services.diff_engine import are_identical, compare, stats
from diff_workbench.services.tokenizer import split_lines

LINE_ALPHABET = ["a", "b", "c", "", " ", "\r", "a\r"]


@st.composite
def texts(draw):
    lines = draw(st.lists(st.sampled_from(LINE_ALPHABET), max_size=12))
    text = "\n".join(lines)
    if draw(st.booleans()):
        text += "\n"
    return text


def lcs_length(old, new):
    """Reference LCS length, computed independently of the aligner"""
    previous = [0] * (len(new) + 1)
    for line in old:
        current = [0]
        for j, other in enumerate(new):
            if line == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


relaxed = settings(max_examples=300, suppress_health_check=[HealthCheck.function_scoped_fixture])


@given(texts(), texts())
@relaxed
def test_both_sides_round_trip(old, new):
    report = compare(old, new)
    assert report.old_lines() == split_lines(old)
    assert report.new_lines() == split_lines(new)


@given(texts(), texts())
@relaxed
def test_stats_sum_to_line_count(old, new):
    report = compare(old, new)
    result = stats(report)
    assert result.added + result.removed + result.unchanged == len(report.lines)


@given(texts(), texts())
@relaxed
def test_unchanged_lines_form_a_longest_common_subsequence(old, new):
    result = stats(compare(old, new))
    assert result.unchanged == lcs_length(split_lines(old), split_lines(new))


@given(texts(), texts())
@relaxed
def test_removed_lines_never_follow_added_lines(old, new):
    kinds = [line.kind for line in compare(old, new).lines]
    for previous, current in zip(kinds, kinds[1:]):
        assert not (previous == LineKind.ADDED and current == LineKind.REMOVED)


@given(texts())
@relaxed
def test_text_is_identical_to_itself(text):
    assert are_identical(text, text)
    assert are_identical(text, text + "\n")
    assert stats(compare(text, text)).has_changes is False
