#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/merger.py
"""Single-pass merging of change pieces into printable hunks.

The merger holds at most one *pending* hunk. Each incoming piece becomes a
candidate hunk; if the candidate's context window overlaps or touches the
pending hunk's, the pending hunk absorbs it, otherwise the pending hunk is
handed to the sink and the candidate takes its place.
:meth:`HunkMerger.finish` hands over the final pending hunk flagged as the last one.

Two states are possible:

- ``idle``: no piece seen yet, or the run has been finished
- ``pending``: one hunk is waiting to be merged or finalized
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Literal, Sequence

from ldiff.exceptions import InvariantError
from ldiff.hunk import Hunk
from ldiff.lcs import ChangePiece

logger = logging.getLogger(__name__)

MergerState = Literal["idle", "pending"]

# Receives each finalized hunk and whether it is the last of the run.
HunkSink = Callable[[Hunk, bool], None]


class HunkMerger:
    """Fold an ordered stream of change pieces into non-overlapping hunks.

    Parameters
    ----------
    old_lines : sequence of str
        Complete original sequence
    new_lines : sequence of str
        Complete updated sequence
    context_lines : int
        Context width around each change; ``0`` disables merging entirely
    sink : callable
        Called as ``sink(hunk, last)`` for every finalized hunk, in order

    Attributes
    ----------
    length_difference : int
        ``len(new) - len(old)`` accumulated over every piece fed so far,
        merged or not
    pending : Hunk or None
        The hunk awaiting a merge decision

    """

    def __init__(
        self,
        old_lines: Sequence[str],
        new_lines: Sequence[str],
        context_lines: int,
        sink: HunkSink,
    ) -> None:
        self.old_lines = old_lines
        self.new_lines = new_lines
        self.context_lines = context_lines
        self.sink = sink
        self.length_difference = 0
        self.pending: Hunk | None = None
        self.hunks_emitted = 0

    @property
    def state(self) -> MergerState:
        return "idle" if self.pending is None else "pending"

    def feed(self, piece: ChangePiece) -> None:
        """Consume the next change piece."""
        candidate = Hunk(
            self.old_lines,
            self.new_lines,
            piece,
            self.context_lines,
            self.length_difference,
        )
        self.length_difference = candidate.length_difference

        if self.pending is None:
            self.pending = candidate
            return

        if self.context_lines > 0 and self.pending.merge(candidate):
            logger.debug("Merged %r into pending hunk", candidate)
            return

        self._emit(self.pending, last=False)
        self.pending = candidate

    def finish(self) -> None:
        """Finalize the pending hunk as the last hunk of the run.

        Raises
        ------
        InvariantError
            If no piece was ever fed; callers must short-circuit the
            no-differences case before merging

        """
        if self.pending is None:
            raise InvariantError("HunkMerger.finish() called with no pending hunk")
        self._emit(self.pending, last=True)
        self.pending = None

    def run(self, pieces: Iterable[ChangePiece]) -> int:
        """Feed every piece, finish, and return the number of hunks emitted."""
        for piece in pieces:
            self.feed(piece)
        self.finish()
        return self.hunks_emitted

    def _emit(self, hunk: Hunk, last: bool) -> None:
        self.hunks_emitted += 1
        logger.debug("Finalized hunk %d: %r (last=%s)", self.hunks_emitted, hunk, last)
        self.sink(hunk, last)
