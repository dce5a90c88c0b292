#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/api.py
"""Python API for comparing two inputs and rendering the difference.

This module wires the pipeline together: mode classification, the binary
short-circuit, change-piece computation, hunk merging and output assembly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Union

from ldiff.assembler import OutputAssembler, report_line
from ldiff.constants import (
    CONTEXT_FORMATS,
    DEFAULT_CONTEXT_LINES,
    FORMAT_MODES,
    TIMESTAMP_FORMAT,
    FormatMode,
)
from ldiff.exceptions import FileAccessError, ValidationError
from ldiff.exceptions import FileNotFoundError as LdiffFileNotFoundError
from ldiff.lcs import diff_pieces
from ldiff.merger import HunkMerger
from ldiff.mode import classify_mode, decode_lines

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for one comparison run.

    Parameters
    ----------
    format : FormatMode, default "old"
        Output syntax
    context_lines : int or None, default None
        Context width. ``None`` means 3 for context and unified output.
        Formats without context always use 0.
    binary : bool or None, default None
        ``True`` forces binary comparison, ``False`` forces text and
        ``None`` sniffs the inputs

    Raises
    ------
    ValidationError
        If ``format`` is unknown or ``context_lines`` is negative

    """

    format: FormatMode = "old"
    context_lines: int | None = None
    binary: bool | None = None

    def __post_init__(self) -> None:
        if self.format not in FORMAT_MODES:
            raise ValidationError(
                f"Invalid format: {self.format}. Must be one of: {', '.join(FORMAT_MODES)}",
                parameter_name="format",
                parameter_value=self.format,
            )
        if self.context_lines is not None and self.context_lines < 0:
            raise ValidationError(
                f"context lines must be non-negative, got {self.context_lines}",
                parameter_name="context_lines",
                parameter_value=self.context_lines,
            )

        if self.format not in CONTEXT_FORMATS:
            context = 0
        elif self.context_lines is None:
            context = DEFAULT_CONTEXT_LINES
        else:
            context = self.context_lines
        object.__setattr__(self, "context_lines", context)


@dataclass(frozen=True)
class DiffOutcome:
    """Result of one comparison run."""

    has_differences: bool
    output: str = ""

    @property
    def exit_code(self) -> int:
        return 1 if self.has_differences else 0

    def to_bytes(self) -> bytes:
        """Encode the output, restoring any bytes that were not valid UTF-8."""
        return self.output.encode("utf-8", errors="surrogateescape")


def read_input(path: PathLike) -> bytes:
    """Read a whole input file.

    Raises
    ------
    ldiff.exceptions.FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path cannot be read (permissions, directories, I/O errors)

    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise LdiffFileNotFoundError(str(path), original_error=e) from e
    except IsADirectoryError as e:
        raise FileAccessError(str(path), message=f"{path}: Is a directory", original_error=e) from e
    except PermissionError as e:
        raise FileAccessError(str(path), message=f"{path}: Permission denied", original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(path), message=f"{path}: {e.strerror or e}", original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def format_timestamp(path: PathLike) -> str:
    """Format a file's modification time for context and unified headers.

    The layout is ``YYYY-MM-DD HH:MM:SS.nnnnnnnnn +ZZZZ`` in local time.
    """
    stat = os.stat(path)
    modified = datetime.fromtimestamp(stat.st_mtime).astimezone()
    nanoseconds = stat.st_mtime_ns % 1_000_000_000
    return f"{modified.strftime(TIMESTAMP_FORMAT)}.{nanoseconds:09d} {modified.strftime('%z')}"


def diff_data(
    old_data: bytes,
    new_data: bytes,
    config: RunConfig | None = None,
    *,
    old_label: str = "old",
    new_label: str = "new",
    old_timestamp: str | None = None,
    new_timestamp: str | None = None,
) -> DiffOutcome:
    """Compare two in-memory inputs.

    Parameters
    ----------
    old_data : bytes
        Original contents
    new_data : bytes
        Updated contents
    config : RunConfig, optional
        Run settings; defaults to old-style text output with sniffing
    old_label, new_label : str
        Names used in headers and brief reports
    old_timestamp, new_timestamp : str, optional
        Timestamps for context and unified headers

    Returns
    -------
    DiffOutcome
        Whether the inputs differ and the rendered output

    Examples
    --------
    >>> outcome = diff_data(b"a\\nb\\nc\\n", b"a\\nx\\nc\\n")
    >>> print(outcome.output, end="")
    2c2
    < b
    ---
    > x
    >>> outcome.exit_code
    1

    """
    config = config or RunConfig()
    mode = classify_mode(old_data, new_data, config.binary)

    if mode == "binary":
        if old_data == new_data:
            return DiffOutcome(False)
        return DiffOutcome(True, report_line(old_label, new_label))

    old_lines = decode_lines(old_data)
    new_lines = decode_lines(new_data)
    pieces = diff_pieces(old_lines, new_lines)
    logger.debug("%d change pieces between %s and %s", len(pieces), old_label, new_label)

    if not pieces:
        return DiffOutcome(False)

    if config.format == "report":
        return DiffOutcome(True, report_line(old_label, new_label))

    assembler = OutputAssembler(config.format)
    assembler.write_headers(old_label, new_label, old_timestamp, new_timestamp)

    merger = HunkMerger(old_lines, new_lines, config.context_lines or 0, assembler.add_hunk)
    hunk_count = merger.run(pieces)
    logger.debug("Rendered %d hunks in %s format", hunk_count, config.format)

    return DiffOutcome(True, assembler.getvalue())


def diff_files(old_path: PathLike, new_path: PathLike, config: RunConfig | None = None) -> DiffOutcome:
    """Compare two files.

    Both files are read completely before anything is rendered, so a
    read failure leaves no partial output.

    Raises
    ------
    FileError
        If either file is missing or unreadable

    Examples
    --------
    >>> outcome = diff_files("v1.txt", "v2.txt", RunConfig(format="unified"))
    >>> print(outcome.output, end="")

    """
    config = config or RunConfig()
    old_data = read_input(old_path)
    new_data = read_input(new_path)

    old_timestamp = new_timestamp = None
    if config.format in CONTEXT_FORMATS:
        old_timestamp = format_timestamp(old_path)
        new_timestamp = format_timestamp(new_path)

    return diff_data(
        old_data,
        new_data,
        config,
        old_label=str(old_path),
        new_label=str(new_path),
        old_timestamp=old_timestamp,
        new_timestamp=new_timestamp,
    )
