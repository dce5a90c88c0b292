#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/lcs.py
"""Change-piece source built on difflib's longest common subsequence matcher.

The matcher's opcodes are regrouped into *pieces*: ordered lists of
:class:`Change` records, one piece per maximal run of edits. Removals carry
their position in the old sequence and insertions their position in the new
sequence, so a piece alone does not say where its empty side sits. Hunk
construction recovers that from the running length difference.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Hashable, Literal, Sequence

ChangeAction = Literal["+", "-"]


@dataclass(frozen=True, slots=True)
class Change:
    """A single inserted or removed element."""

    action: ChangeAction
    position: int
    element: Hashable

    @property
    def adding(self) -> bool:
        return self.action == "+"

    @property
    def deleting(self) -> bool:
        return self.action == "-"


ChangePiece = list[Change]


def diff_pieces(old: Sequence[Hashable], new: Sequence[Hashable]) -> list[ChangePiece]:
    """Compute the ordered change pieces that turn ``old`` into ``new``.

    Parameters
    ----------
    old : sequence
        Original sequence of comparable elements
    new : sequence
        Updated sequence of comparable elements

    Returns
    -------
    list of ChangePiece
        Non-overlapping pieces in ascending position order. Within a piece
        every removal precedes every insertion. An empty list means the
        sequences are equal.

    """
    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)
    pieces: list[ChangePiece] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        piece: ChangePiece = [Change("-", i, old[i]) for i in range(i1, i2)]
        piece.extend(Change("+", j, new[j]) for j in range(j1, j2))
        pieces.append(piece)

    return pieces
