#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for ldiff/renderers/old.py."""

import pytest

from ldiff.hunk import Hunk
from ldiff.lcs import diff_pieces
from ldiff.renderers.old import render_old


def _render(old, new, last=False):
    return render_old(Hunk(old, new, diff_pieces(old, new)[0]), last)


@pytest.mark.unit
class TestRenderOld:
    """Tests for render_old()."""

    def test_change(self):
        assert _render(["a\n", "b\n", "c\n"], ["a\n", "x\n", "c\n"]) == "2c2\n< b\n---\n> x\n"

    def test_insertion(self):
        assert _render(["a\n", "c\n"], ["a\n", "b\n", "c\n"]) == "1a2\n> b\n"

    def test_deletion(self):
        assert _render(["a\n", "b\n", "c\n"], ["a\n", "c\n"]) == "2d1\n< b\n"

    def test_multi_line_change(self):
        result = _render(["a\n", "b\n", "c\n", "d\n"], ["a\n", "x\n", "y\n", "d\n"])
        assert result == "2,3c2,3\n< b\n< c\n---\n> x\n> y\n"

    def test_insertion_at_top(self):
        assert _render(["b\n"], ["a\n", "b\n"]) == "0a1\n> a\n"

    def test_missing_newline_flagged_on_last_hunk(self):
        result = _render(["a\n", "b"], ["a\n", "c"], last=True)
        assert result == "2c2\n< b\n\\ No newline at end of file\n---\n> c\n\\ No newline at end of file\n"

    def test_missing_newline_not_flagged_on_interior_hunk(self):
        assert _render(["a\n", "b"], ["a\n", "c"]) == "2c2\n< b\n---\n> c\n"
