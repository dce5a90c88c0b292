#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/__init__.py
"""Hunk renderers for the supported diff syntaxes.

Available Renderers
-------------------
- render_old: default ``diff`` output (``2c2``, ``<``/``>`` lines)
- render_context: ``diff -c`` output
- render_unified: ``diff -u`` output
- render_ed: ``diff -e`` and ``diff -f`` scripts, deferred through EdFragment
- colorize: terminal styling of assembled output with rich

Examples
--------
Render the first hunk of a comparison:
    >>> from ldiff.hunk import Hunk
    >>> from ldiff.lcs import diff_pieces
    >>> old, new = ["a\\n", "b\\n"], ["a\\n", "x\\n"]
    >>> hunk = Hunk(old, new, diff_pieces(old, new)[0])
    >>> print(render_hunk(hunk, "old"), end="")
    2c2
    < b
    ---
    > x

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ldiff.constants import FormatMode
from ldiff.exceptions import ValidationError
from ldiff.renderers.context import render_context
from ldiff.renderers.ed import EdFragment, render_ed
from ldiff.renderers.old import render_old
from ldiff.renderers.unified import render_unified

if TYPE_CHECKING:
    from ldiff.hunk import Hunk

__all__ = [
    "EdFragment",
    "render_context",
    "render_ed",
    "render_hunk",
    "render_old",
    "render_unified",
]


def render_hunk(hunk: Hunk, format: FormatMode, last: bool = False) -> str | EdFragment:
    """Render ``hunk`` in ``format``.

    Raises
    ------
    ValidationError
        If ``format`` has no per-hunk rendering (``report``) or is unknown

    """
    if format == "old":
        return render_old(hunk, last)
    if format == "unified":
        return render_unified(hunk, last)
    if format == "context":
        return render_context(hunk, last)
    if format == "ed":
        return EdFragment(hunk)
    if format == "reverse_ed":
        return EdFragment(hunk, reverse=True)
    raise ValidationError(f"Format has no hunk rendering: {format}", parameter_name="format", parameter_value=format)
