#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/renderers/color.py
"""Terminal colors for assembled diff output.

Styling is applied line by line after assembly, so the plain text of the
result is byte-for-byte the uncolored diff:

- Red for removed lines (``-``, ``<``, ``- ``)
- Green for added lines (``+``, ``>``, ``+ ``)
- Yellow for changed lines in context diffs (``! ``)
- Cyan for hunk headers (``@@``, ``***************``, ``2c2``)
- Bold for file headers (``---``/``+++`` or ``***``/``---``)
"""

from __future__ import annotations

import re

from rich.segment import Segment
from rich.style import Style

from ldiff.constants import CONTEXT_HUNK_SEPARATOR, FormatMode

_OLD_COMMAND_RE = re.compile(r"^\d+(,\d+)?[acd]\d+(,\d+)?$")
_CONTEXT_RANGE_RE = re.compile(r"^(\*\*\* \S+ \*\*\*\*|--- \S+ ----)$")


def style_for_line(line: str, format: FormatMode, header: bool = False) -> str | None:
    """Return the rich style for one output line, or None for plain text.

    Parameters
    ----------
    line : str
        Output line without its terminator
    format : FormatMode
        Syntax the line was rendered in
    header : bool, default False
        True for the two file-header lines of context/unified output

    """
    if header:
        return "bold"

    if format == "unified":
        if line.startswith("@@"):
            return "cyan"
        if line.startswith("+"):
            return "green"
        if line.startswith("-"):
            return "red"
    elif format == "context":
        if line == CONTEXT_HUNK_SEPARATOR or _CONTEXT_RANGE_RE.match(line):
            return "cyan"
        if line.startswith("! "):
            return "yellow"
        if line.startswith("+ "):
            return "green"
        if line.startswith("- "):
            return "red"
    elif format == "old":
        if _OLD_COMMAND_RE.match(line):
            return "cyan"
        if line.startswith(">"):
            return "green"
        if line.startswith("<"):
            return "red"
    return None


def colorize(output: str, format: FormatMode) -> list[Segment]:
    """Split assembled diff output into styled rich segments.

    Segments are printed as they are, so tabs and carriage returns inside
    lines reach the terminal unchanged. ``ed`` scripts and brief reports
    come back unstyled.
    """
    segments: list[Segment] = []
    header_lines = 2 if format in ("context", "unified") else 0

    for index, line in enumerate(output.split("\n")):
        if index:
            segments.append(Segment.line())
        if line:
            style = style_for_line(line, format, header=index < header_lines)
            segments.append(Segment(line, Style.parse(style) if style else None))

    return segments
