#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/context.py
"""Context diff hunk renderer.

Each hunk is printed as two halves, the old range and the new range, with
changed lines marked ``-`` (removed), ``+`` (added) or ``!`` (changed)::

    ***************
    *** 1,3 ****
      a
    ! b
      c
    --- 1,3 ----
      a
    ! x
      c
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ldiff.constants import CONTEXT_HUNK_SEPARATOR
from ldiff.renderers._text import prefixed_lines

if TYPE_CHECKING:
    from ldiff.hunk import Hunk


def _half(lines: Sequence[str], start: int, end: int, marks: dict[int, str], last: bool) -> list[str]:
    rendered: list[str] = []
    for index in range(start, end + 1):
        mark = marks.get(index, " ")
        rendered.extend(prefixed_lines([lines[index]], f"{mark} ", last))
    return rendered


def render_context(hunk: Hunk, last: bool = False) -> str:
    """Render a hunk in context format, always ending with a line terminator."""
    old_marks = {change.position: block.op for block in hunk.blocks for change in block.remove}
    new_marks = {change.position: block.op for block in hunk.blocks for change in block.insert}

    lines = [CONTEXT_HUNK_SEPARATOR, f"*** {hunk.context_range('old', ',')} ****"]
    if old_marks:
        lines.extend(_half(hunk.old_lines, hunk.start_old, hunk.end_old, old_marks, last))

    lines.append(f"--- {hunk.context_range('new', ',')} ----")
    if new_marks:
        lines.extend(_half(hunk.new_lines, hunk.start_new, hunk.end_new, new_marks, last))

    return "\n".join(lines) + "\n"
