#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/ldiff/cli/builder.py
"""Argument parser construction and exit codes for the ldiff CLI."""

from __future__ import annotations

import argparse
import re
from typing import Any, Optional, Sequence

from ldiff import __version__
from ldiff.constants import DEFAULT_CONTEXT_LINES, FormatMode
from ldiff.exceptions import FileError, ValidationError

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_TROUBLE = 2
EXIT_USAGE = 127

BANNER = f"""ldiff {__version__}
  Compare two files line by line and print the difference in old-style,
  context, unified or ed script form.
"""


COUNT_FLAGS = {"-C": "-c", "--context": "-c", "-U": "-u", "--unified": "-u"}

_COUNT_RE = re.compile(r"-?\d+")


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def normalize_count_flags(args: Sequence[str]) -> list[str]:
    """Turn a count flag that is not followed by a count into its bare form.

    ``-C``, ``-U``, ``--context`` and ``--unified`` take an optional count.
    argparse would consume the next word as that count even when it is a
    file name, so ``-U old new`` is rewritten to ``-u old new`` while
    ``-U 5``, ``-U5`` and ``--unified=5`` are left alone.
    """
    normalized: list[str] = []
    args = list(args)
    for index, arg in enumerate(args):
        if arg == "--":
            normalized.extend(args[index:])
            break
        following = args[index + 1] if index + 1 < len(args) else None
        if arg in COUNT_FLAGS and (following is None or not _COUNT_RE.fullmatch(following)):
            normalized.append(COUNT_FLAGS[arg])
        else:
            normalized.append(arg)
    return normalized


class FormatAction(argparse.Action):
    """Select the output format, and for context formats the context width.

    Every format flag writes ``format``; the last one given wins. A flag
    given without a count resets ``context_lines`` to the parser default so
    that ``-U 5 -u`` ends up with the default width. Counts are validated
    here rather than through ``type=``, because argparse would otherwise
    run the conversion on the shared ``format`` default.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        output_format: FormatMode,
        nargs: Optional[str | int] = 0,
        **kwargs: Any,
    ) -> None:
        """Initialize the action with the format it selects."""
        self.output_format = output_format
        super().__init__(option_strings, dest, nargs=nargs, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        """Store the format and context width."""
        if isinstance(values, str):
            try:
                context_lines = _validate_context_lines(values)
            except argparse.ArgumentTypeError as e:
                raise argparse.ArgumentError(self, str(e)) from e
        else:
            context_lines = parser.get_default("context_lines")

        namespace.format = self.output_format
        namespace.context_lines = context_lines


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for ldiff.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser; defaults can be replaced with ``set_defaults``
        from a configuration file before parsing

    """
    parser = argparse.ArgumentParser(
        prog="ldiff",
        usage="%(prog)s [options] oldfile newfile",
        description="Compare two files and print their differences.",
        epilog='By default, produces an "old-style" diff, with output like UNIX diff.',
    )
    parser.set_defaults(format="old", context_lines=None, binary=None, color="auto")

    parser.add_argument("files", nargs="*", metavar="FILE", help="Original and modified files")

    formats = parser.add_argument_group("output format")
    formats.add_argument(
        "-c",
        dest="format",
        action=FormatAction,
        output_format="context",
        help=f"Output a context diff with {DEFAULT_CONTEXT_LINES} lines of context.",
    )
    formats.add_argument(
        "-C",
        dest="format",
        action=FormatAction,
        output_format="context",
        nargs="?",
        metavar="LINES",
        help=f"Output a context diff with LINES (default {DEFAULT_CONTEXT_LINES}) lines of context.",
    )
    formats.add_argument(
        "--context",
        dest="format",
        action=FormatAction,
        output_format="context",
        nargs="?",
        metavar="LINES",
        help=f"Output a context diff with LINES (default {DEFAULT_CONTEXT_LINES}) lines of context.",
    )
    formats.add_argument(
        "-u",
        dest="format",
        action=FormatAction,
        output_format="unified",
        help=f"Output a unified diff with {DEFAULT_CONTEXT_LINES} lines of context.",
    )
    formats.add_argument(
        "-U",
        dest="format",
        action=FormatAction,
        output_format="unified",
        nargs="?",
        metavar="LINES",
        help=f"Output a unified diff with LINES (default {DEFAULT_CONTEXT_LINES}) lines of context.",
    )
    formats.add_argument(
        "--unified",
        dest="format",
        action=FormatAction,
        output_format="unified",
        nargs="?",
        metavar="LINES",
        help=f"Output a unified diff with LINES (default {DEFAULT_CONTEXT_LINES}) lines of context.",
    )
    formats.add_argument(
        "-e",
        dest="format",
        action=FormatAction,
        output_format="ed",
        help="Output an 'ed' script to change oldfile to newfile.",
    )
    formats.add_argument(
        "-f",
        dest="format",
        action=FormatAction,
        output_format="reverse_ed",
        help="Output an 'ed'-like script with the command letter before the line range.",
    )
    formats.add_argument(
        "-q",
        "--brief",
        dest="format",
        action=FormatAction,
        output_format="report",
        help="Report only whether or not the files differ, not the details.",
    )

    comparison = parser.add_argument_group("comparison")
    comparison.add_argument(
        "-a",
        "--text",
        dest="binary",
        action="store_const",
        const=False,
        help="Treat the files as text and compare them line by line, even if they do not seem to be text.",
    )
    comparison.add_argument(
        "--binary",
        dest="binary",
        action="store_const",
        const=True,
        help="Treat the files as binary.",
    )
    comparison.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        help="Colorize output: auto (default, if terminal), always, never",
    )

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", metavar="PATH", help="Read defaults from this configuration file")
    config.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore configuration files and the LDIFF_CONFIG environment variable",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING).",
    )
    logging_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names in log output",
    )

    parser.add_argument("--version", action="version", version=BANNER, help="Show the version banner and exit.")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        ``EXIT_TROUBLE`` for file and validation problems, otherwise
        ``EXIT_DIFFERENCES``

    """
    if isinstance(exception, (FileError, ValidationError)):
        return EXIT_TROUBLE
    return EXIT_DIFFERENCES
