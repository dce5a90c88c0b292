#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/assembler.py
"""Assembly of rendered hunks into the final diff text.

The assembler owns the per-format framing: file headers for context and
unified output, the separator between unified hunks, the trailing newline
of the last hunk, and the bottom-up ordering of ``ed`` scripts.
"""

from __future__ import annotations

import logging

from ldiff.constants import CONTEXT_FORMATS, ED_FORMATS, HEADER_MARKERS, FormatMode
from ldiff.exceptions import InvariantError
from ldiff.hunk import Hunk
from ldiff.renderers.ed import EdFragment

logger = logging.getLogger(__name__)


def report_line(old_label: str, new_label: str) -> str:
    """Return the brief ``Files X and Y differ`` message."""
    return f"Files {old_label} and {new_label} differ\n"


def header_line(marker: str, label: str, timestamp: str | None) -> str:
    if timestamp:
        return f"{marker} {label}\t{timestamp}\n"
    return f"{marker} {label}\n"


class OutputAssembler:
    """Collect hunk output for one run.

    Hunks are added in file order through :meth:`add_hunk`, which matches
    the merger's sink signature. For ``ed`` and ``reverse_ed`` the rendered
    fragments are only buffered; :meth:`getvalue` finishes them in reverse.

    Parameters
    ----------
    format : FormatMode
        Output syntax for the whole run

    """

    def __init__(self, format: FormatMode) -> None:
        if format == "report":
            raise InvariantError("Brief reports do not go through hunk assembly")
        self.format = format
        self._parts: list[str] = []
        self._fragments: list[EdFragment] = []
        self._finished = False

    def write_headers(
        self,
        old_label: str,
        new_label: str,
        old_timestamp: str | None = None,
        new_timestamp: str | None = None,
    ) -> None:
        """Emit the two file-header lines of context and unified output."""
        if self.format not in CONTEXT_FORMATS:
            return
        old_marker, new_marker = HEADER_MARKERS[self.format]
        self._parts.append(header_line(old_marker, old_label, old_timestamp))
        self._parts.append(header_line(new_marker, new_label, new_timestamp))

    def add_hunk(self, hunk: Hunk, last: bool = False) -> None:
        """Render ``hunk`` and append it to the output."""
        if self._finished:
            raise InvariantError("Hunk added after the last hunk")

        rendered = hunk.render(self.format, last=last)
        self._finished = last

        if isinstance(rendered, EdFragment):
            self._fragments.append(rendered)
            return

        if last:
            if not rendered.endswith("\n"):
                rendered += "\n"
        elif self.format == "unified":
            rendered += "\n"
        self._parts.append(rendered)

    def getvalue(self) -> str:
        """Return the assembled output.

        ``ed`` fragments are finished here, last hunk first, so every
        command still addresses original line numbers when applied.
        """
        if self.format in ED_FORMATS:
            logger.debug("Emitting %d ed fragments bottom-up", len(self._fragments))
            finished = [fragment.finish() for fragment in reversed(self._fragments)]
            return "".join(self._parts + finished)
        return "".join(self._parts)
