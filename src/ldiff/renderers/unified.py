#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/unified.py
"""Unified diff hunk renderer.

Produces the ``@@ -a,b +c,d @@`` block of a hunk followed by its body, one
line per unchanged (`` ``), removed (``-``) or inserted (``+``) record. The
text carries no trailing line terminator; the assembler supplies the
separator between hunks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ldiff.renderers._text import prefixed_lines

if TYPE_CHECKING:
    from ldiff.hunk import Hunk


def render_unified(hunk: Hunk, last: bool = False) -> str:
    """Render a hunk in unified format.

    Parameters
    ----------
    hunk : Hunk
        Finalized hunk, possibly covering several merged blocks
    last : bool, default False
        Flag lines missing their terminator at the end of a file

    Returns
    -------
    str
        Hunk header and body joined with ``\\n``

    """
    lines = [f"@@ -{hunk.unified_range('old')} +{hunk.unified_range('new')} @@"]
    old_lines = hunk.old_lines
    new_lines = hunk.new_lines
    old_pos = hunk.start_old
    new_pos = hunk.start_new

    for block in hunk.blocks:
        # Unchanged lines advance both sides by the same amount.
        if block.remove:
            gap = block.remove[0].position - old_pos
        else:
            gap = block.insert[0].position - new_pos
        lines.extend(prefixed_lines(old_lines[old_pos : old_pos + gap], " ", last))
        old_pos += gap
        new_pos += gap

        removed = len(block.remove)
        lines.extend(prefixed_lines(old_lines[old_pos : old_pos + removed], "-", last))
        old_pos += removed

        inserted = len(block.insert)
        lines.extend(prefixed_lines(new_lines[new_pos : new_pos + inserted], "+", last))
        new_pos += inserted

    lines.extend(prefixed_lines(old_lines[old_pos : hunk.end_old + 1], " ", last))
    return "\n".join(lines)
