#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/hunk.py
"""Hunk geometry: line ranges, context windows and merging.

A :class:`Hunk` starts life covering exactly one change piece. Its ranges are
0-based and inclusive; an empty side has ``end == start - 1`` and ``start``
names the line the change is applied before. Context lines are added on
construction and neighbouring hunks whose context windows share or adjoin
lines are merged into one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Sequence

from ldiff.constants import FormatMode
from ldiff.exceptions import InvariantError
from ldiff.lcs import Change, ChangePiece
from ldiff.renderers import render_hunk

if TYPE_CHECKING:
    from ldiff.renderers.ed import EdFragment

Side = Literal["old", "new"]


@dataclass(slots=True)
class Block:
    """One change piece split into its removals and insertions."""

    remove: list[Change] = field(default_factory=list)
    insert: list[Change] = field(default_factory=list)

    @classmethod
    def from_piece(cls, piece: ChangePiece) -> Block:
        block = cls()
        for change in piece:
            if change.deleting:
                block.remove.append(change)
            elif change.adding:
                block.insert.append(change)
        return block

    @property
    def diff_size(self) -> int:
        """Net number of lines this block adds to the new sequence."""
        return len(self.insert) - len(self.remove)

    @property
    def op(self) -> str:
        """``!`` for a change, ``-`` for a deletion and ``+`` for an addition."""
        if self.remove and self.insert:
            return "!"
        return "-" if self.remove else "+"


class Hunk:
    """A renderable group of one or more change pieces plus context.

    Parameters
    ----------
    old_lines : sequence of str
        Complete original sequence
    new_lines : sequence of str
        Complete updated sequence
    piece : ChangePiece
        The change piece this hunk initially covers
    context_lines : int, default 0
        Unchanged lines to show on each side of the change
    length_difference : int, default 0
        ``len(new) - len(old)`` accumulated over every earlier piece

    Attributes
    ----------
    length_difference : int
        The incoming offset plus this hunk's own contribution; the caller
        passes it on to the next hunk.

    Raises
    ------
    InvariantError
        If ``piece`` contains neither insertions nor removals

    """

    def __init__(
        self,
        old_lines: Sequence[str],
        new_lines: Sequence[str],
        piece: ChangePiece,
        context_lines: int = 0,
        length_difference: int = 0,
    ) -> None:
        block = Block.from_piece(piece)
        if not block.remove and not block.insert:
            raise InvariantError(f"Cannot build a hunk from a piece with no insertions or removals: {piece!r}")

        self.old_lines = old_lines
        self.new_lines = new_lines
        self.blocks = [block]
        self.context_lines = context_lines

        before = length_difference
        after = before + block.diff_size
        self.length_difference = after

        # The empty side of a pure insertion or deletion is placed using the
        # offset between the two sequences before and after this block.
        if block.remove:
            self.start_old = block.remove[0].position
            self.end_old = block.remove[-1].position
        if block.insert:
            self.start_new = block.insert[0].position
            self.end_new = block.insert[-1].position
        if not block.remove:
            self.start_old = self.start_new - before
            self.end_old = self.end_new - after
        if not block.insert:
            self.start_new = self.start_old + before
            self.end_new = self.end_old + after

        self._add_context(context_lines)

    def __repr__(self) -> str:
        return (
            f"Hunk(old={self.start_old}..{self.end_old}, new={self.start_new}..{self.end_new}, "
            f"blocks={len(self.blocks)}, length_difference={self.length_difference})"
        )

    def _add_context(self, context: int) -> None:
        if context <= 0:
            return

        add_start = min(context, self.start_old)
        self.start_old -= add_start
        self.start_new -= add_start

        add_end = max(0, min(context, len(self.old_lines) - 1 - self.end_old))
        self.end_old += add_end
        self.end_new += add_end

    @property
    def op(self) -> str:
        """Operation code for the hunk as a whole."""
        removes = any(block.remove for block in self.blocks)
        inserts = any(block.insert for block in self.blocks)
        if removes and inserts:
            return "!"
        return "-" if removes else "+"

    @property
    def has_removals(self) -> bool:
        return any(block.remove for block in self.blocks)

    @property
    def has_insertions(self) -> bool:
        return any(block.insert for block in self.blocks)

    def overlaps(self, previous: Hunk) -> bool:
        """Return True when this hunk's context window shares or adjoins lines of ``previous``.

        Windows that touch are merged too, so no unchanged line is printed
        twice and none is dropped between two hunks.
        """
        return self.start_old - previous.end_old <= 1 or self.start_new - previous.end_new <= 1

    def merge(self, following: Hunk) -> bool:
        """Absorb the hunk that comes right after this one if they overlap or touch.

        On success this hunk's end ranges, blocks and length difference are
        extended to cover ``following``, which must then be discarded.

        Returns
        -------
        bool
            True if ``following`` was absorbed

        """
        if not following.overlaps(self):
            return False

        self.end_old = following.end_old
        self.end_new = following.end_new
        self.blocks.extend(following.blocks)
        self.length_difference = following.length_difference
        return True

    def context_range(self, side: Side, separator: str) -> str:
        """Return a 1-based ``start<sep>end`` range, or one number for short ranges.

        An empty range prints the number of the line preceding the change.
        """
        if side == "old":
            start, end = self.start_old + 1, self.end_old + 1
        else:
            start, end = self.start_new + 1, self.end_new + 1
        return f"{start}{separator}{end}" if start < end else str(end)

    def unified_range(self, side: Side) -> str:
        """Return a ``start,length`` range as printed in ``@@`` hunk headers."""
        if side == "old":
            start, end = self.start_old, self.end_old
        else:
            start, end = self.start_new, self.end_new

        length = end - start + 1
        if length == 0:
            return f"{start},0"
        if length == 1:
            return str(start + 1)
        return f"{start + 1},{length}"

    def render(self, format: FormatMode, last: bool = False) -> str | EdFragment:
        """Render this hunk in the given output syntax.

        Parameters
        ----------
        format : FormatMode
            Output syntax; ``"report"`` has no hunk form
        last : bool, default False
            True for the final hunk of the run, which may need to flag
            a missing newline at the end of a file

        Returns
        -------
        str or EdFragment
            Literal hunk text, or a deferred fragment for ``ed`` formats

        """
        return render_hunk(self, format, last=last)
