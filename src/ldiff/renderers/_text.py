#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/_text.py
"""Line helpers shared by the hunk renderers."""

from __future__ import annotations

from typing import Iterable, Iterator

from ldiff.constants import NO_NEWLINE_MARKER


def chomp(line: str) -> str:
    """Strip one trailing ``\\n`` if present."""
    return line[:-1] if line.endswith("\n") else line


def prefixed_lines(lines: Iterable[str], prefix: str, last: bool = False) -> Iterator[str]:
    """Yield ``prefix + line`` for each line, without terminators.

    When ``last`` is set, a line that has no terminator of its own is
    followed by the missing-newline marker.
    """
    for line in lines:
        yield f"{prefix}{chomp(line)}"
        if last and not line.endswith("\n"):
            yield NO_NEWLINE_MARKER
