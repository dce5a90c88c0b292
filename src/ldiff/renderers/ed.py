#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/ed.py
"""``ed`` script renderers.

Rendering an ``ed`` hunk does not produce text right away. It yields an
:class:`EdFragment`; the assembler collects these and calls
:meth:`EdFragment.finish` while walking them from the bottom of the file up,
so that each command still refers to original line numbers when applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ldiff.constants import OP_ACTIONS
from ldiff.renderers._text import chomp

if TYPE_CHECKING:
    from ldiff.hunk import Hunk


def _ed_body(lines: Iterable[str]) -> list[str]:
    """Lines to append in ``ed`` input mode, ending with the ``.`` terminator.

    A line that is just ``.`` would end input mode, so it is written as
    ``..``, input mode is left and the extra dot is removed with ``s/.//``
    before appending resumes.
    """
    body: list[str] = []
    insert_mode = True
    for line in lines:
        text = chomp(line)
        if not insert_mode:
            body.append("a")
            insert_mode = True
        if text == ".":
            body.extend(["..", ".", "s/.//"])
            insert_mode = False
        else:
            body.append(text)
    if insert_mode:
        body.append(".")
    return body


def render_ed(hunk: Hunk, reverse: bool = False) -> str:
    """Render one ``ed`` command (``2,3c``) or, with ``reverse``, ``diff -f`` style (``c2 3``)."""
    action = OP_ACTIONS[hunk.op]
    if reverse:
        lines = [f"{action}{hunk.context_range('old', ' ')}"]
    else:
        lines = [f"{hunk.context_range('old', ',')}{action}"]

    if hunk.has_insertions:
        inserted = hunk.new_lines[hunk.start_new : hunk.end_new + 1]
        if reverse:
            lines.extend(chomp(line) for line in inserted)
            lines.append(".")
        else:
            lines.extend(_ed_body(inserted))

    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class EdFragment:
    """A rendered-but-unfinished ``ed`` hunk."""

    hunk: Hunk
    reverse: bool = False

    def finish(self) -> str:
        return render_ed(self.hunk, reverse=self.reverse)
