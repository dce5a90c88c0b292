#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/old.py
"""Old-style (default ``diff``) hunk renderer.

Old-style output has no context, so every hunk covers exactly one change::

    2c2
    < b
    ---
    > x
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ldiff.constants import OP_ACTIONS
from ldiff.renderers._text import prefixed_lines

if TYPE_CHECKING:
    from ldiff.hunk import Hunk


def render_old(hunk: Hunk, last: bool = False) -> str:
    """Render a hunk as an old-style ``NaM`` / ``NdM`` / ``NcM`` command block."""
    op = hunk.op
    lines = [f"{hunk.context_range('old', ',')}{OP_ACTIONS[op]}{hunk.context_range('new', ',')}"]

    if hunk.has_removals:
        lines.extend(prefixed_lines(hunk.old_lines[hunk.start_old : hunk.end_old + 1], "< ", last))
    if op == "!":
        lines.append("---")
    if hunk.has_insertions:
        lines.extend(prefixed_lines(hunk.new_lines[hunk.start_new : hunk.end_new + 1], "> ", last))

    return "\n".join(lines) + "\n"
