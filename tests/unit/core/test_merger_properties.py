#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based tests for hunk merging and assembly invariants."""

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from ldiff.api import RunConfig, diff_data  # noqa: E402
from ldiff.lcs import diff_pieces  # noqa: E402
from ldiff.merger import HunkMerger  # noqa: E402

# A small alphabet makes repeated lines, and therefore interesting matches, likely.
line_lists = st.lists(st.sampled_from(["a\n", "b\n", "c\n", "d\n", "e\n"]), max_size=30)


def _emitted(old, new, context):
    emitted = []
    merger = HunkMerger(old, new, context, lambda hunk, last: emitted.append(hunk))
    pieces = diff_pieces(old, new)
    if pieces:
        merger.run(pieces)
    return merger, emitted


@pytest.mark.unit
class TestMergerProperties:
    """Invariants that hold for any pair of inputs."""

    @given(line_lists, line_lists, st.integers(min_value=0, max_value=4))
    def test_final_length_difference(self, old, new, context):
        merger, _ = _emitted(old, new, context)
        assert merger.length_difference == len(new) - len(old)

    @given(line_lists, line_lists)
    def test_zero_context_emits_one_hunk_per_piece(self, old, new):
        _, emitted = _emitted(old, new, 0)
        assert len(emitted) == len(diff_pieces(old, new))

    @given(line_lists, line_lists, st.integers(min_value=1, max_value=4))
    def test_hunks_are_ordered_and_disjoint(self, old, new, context):
        _, emitted = _emitted(old, new, context)
        for earlier, later in zip(emitted, emitted[1:]):
            assert earlier.end_old < later.start_old
            assert earlier.end_new < later.start_new


@pytest.mark.unit
class TestAssemblyProperties:
    """Invariants of the assembled output."""

    @given(line_lists, st.sampled_from(["old", "context", "unified", "ed", "reverse_ed", "report"]))
    def test_identical_inputs_have_no_output(self, lines, format):
        data = "".join(lines).encode()
        outcome = diff_data(data, data, RunConfig(format=format))
        assert outcome.has_differences is False
        assert outcome.output == ""

    @given(line_lists, line_lists, st.sampled_from(["old", "context", "unified", "ed", "reverse_ed"]))
    def test_output_ends_with_terminator(self, old, new, format):
        outcome = diff_data("".join(old).encode(), "".join(new).encode(), RunConfig(format=format))
        if outcome.has_differences:
            assert outcome.output.endswith("\n")
