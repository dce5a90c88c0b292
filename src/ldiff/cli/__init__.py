"""Command-line interface for ldiff.

Compares two files and prints their difference like UNIX ``diff``.

Exit codes: 0 when the files are the same, 1 when they differ, 2 on trouble
(missing files, bad configuration) and 127 when not given exactly two files.

Examples
--------
Old-style diff::

    $ ldiff old.txt new.txt

Unified diff with five lines of context::

    $ ldiff -U 5 old.txt new.txt

ed script::

    $ ldiff -e old.txt new.txt

Defaults from a configuration file::

    $ cat .ldiff.toml
    format = "unified"
    context_lines = 5
    $ ldiff old.txt new.txt

"""

import argparse
import logging
import os
import sys
from typing import TextIO

from ldiff.api import DiffOutcome, RunConfig, diff_files
from ldiff.cli.builder import (
    EXIT_SUCCESS,
    EXIT_USAGE,
    create_parser,
    get_exit_code_for_exception,
    normalize_count_flags,
)
from ldiff.cli.config import load_config_with_priority
from ldiff.constants import CONFIG_ENV_VAR
from ldiff.exceptions import FileError, ValidationError
from ldiff.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_defaults(args: list[str] | None) -> dict:
    """Read configuration defaults named by ``--config``, the environment or discovery."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config")
    pre_parser.add_argument("--no-config", action="store_true")
    known, _ = pre_parser.parse_known_args(args)

    if known.no_config:
        return {}
    return load_config_with_priority(explicit_path=known.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))


def _use_color(choice: str, stream: TextIO) -> bool:
    if choice == "always":
        return True
    if choice == "auto":
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
    return False


def _write_outcome(outcome: DiffOutcome, config: RunConfig, color: bool, stream: TextIO) -> None:
    """Write the assembled output in one go."""
    if not outcome.output:
        return

    if color:
        from rich.console import Console
        from rich.segment import Segments

        from ldiff.renderers.color import colorize

        console = Console(file=stream, force_terminal=True, highlight=False)
        console.print(Segments(colorize(outcome.output, config.format)), soft_wrap=True, end="")
        return

    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        stream.flush()
        buffer.write(outcome.to_bytes())
        buffer.flush()
    else:
        stream.write(outcome.output)


def main(args: list[str] | None = None, output: TextIO | None = None, error: TextIO | None = None) -> int:
    """Run ldiff and return its exit code.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments, defaults to ``sys.argv[1:]``
    output : TextIO, optional
        Stream for the diff, defaults to stdout
    error : TextIO, optional
        Stream for usage text and error messages, defaults to stderr

    Returns
    -------
    int
        0 if the files are the same, 1 if they differ, 2 on trouble,
        127 if not given exactly two files

    """
    output = output or sys.stdout
    error = error or sys.stderr
    args = sys.argv[1:] if args is None else args

    try:
        defaults = _load_defaults(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS
    except ValidationError as e:
        print(f"ldiff: {e.message}", file=error)
        return get_exit_code_for_exception(e)

    parser = create_parser()
    parser.set_defaults(**defaults)
    try:
        parsed_args = parser.parse_intermixed_args(normalize_count_flags(args))
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    if len(parsed_args.files) != 2:
        parser.print_help(file=error)
        return EXIT_USAGE

    _setup_logging_level(parsed_args)

    old_path, new_path = parsed_args.files
    try:
        config = RunConfig(
            format=parsed_args.format,
            context_lines=parsed_args.context_lines,
            binary=parsed_args.binary,
        )
        logger.debug("Comparing %s and %s with %s", old_path, new_path, config)
        outcome = diff_files(old_path, new_path, config)
    except (FileError, ValidationError) as e:
        print(f"ldiff: {e.message}", file=error)
        return get_exit_code_for_exception(e)

    _write_outcome(outcome, config, _use_color(parsed_args.color, output), output)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
