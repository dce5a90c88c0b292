#  Copyright (c) 2025 Tom Villani, Ph.D.
"""ldiff: render the difference between two files in classic diff syntaxes.

Supported output formats are old-style ``diff``, context (``-c``), unified
(``-u``), ``ed`` scripts (``-e``), forward ``ed`` scripts (``-f``) and a brief
differ/same report (``-q``). Inputs containing NUL bytes are compared as
binary buffers.

Examples
--------
Compare two files and print a unified diff:
    >>> from ldiff import RunConfig, diff_files
    >>> outcome = diff_files("old.txt", "new.txt", RunConfig(format="unified"))
    >>> print(outcome.output, end="")

Compare in-memory data:
    >>> from ldiff import diff_data
    >>> diff_data(b"a\\n", b"b\\n").output
    '1c1\\n< a\\n---\\n> b\\n'

"""

from ldiff.api import DiffOutcome, RunConfig, diff_data, diff_files

__version__ = "1.0.0"

__all__ = [
    "DiffOutcome",
    "RunConfig",
    "__version__",
    "diff_data",
    "diff_files",
]
