#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ldiff/mode.py
"""Text versus binary classification of the two inputs.

The comparison mode decides whether inputs are split into line records and
run through the LCS engine, or compared wholesale as byte buffers.
"""

from __future__ import annotations

import logging

from ldiff.constants import BINARY_SNIFF_SIZE, ComparisonMode

logger = logging.getLogger(__name__)


def looks_binary(data: bytes, sniff_size: int = BINARY_SNIFF_SIZE) -> bool:
    """Return True when the leading ``sniff_size`` bytes contain a NUL byte."""
    return b"\0" in data[:sniff_size]


def classify_mode(old_data: bytes, new_data: bytes, binary: bool | None = None) -> ComparisonMode:
    """Decide how two raw inputs should be compared.

    Parameters
    ----------
    old_data : bytes
        Raw contents of the original input
    new_data : bytes
        Raw contents of the updated input
    binary : bool or None, default None
        Explicit override. ``True`` forces binary comparison, ``False``
        forces text comparison and ``None`` sniffs the content.

    Returns
    -------
    ComparisonMode
        ``"binary"`` or ``"text"``

    """
    if binary is not None:
        mode: ComparisonMode = "binary" if binary else "text"
        logger.debug("Comparison mode forced to %s", mode)
        return mode

    mode = "binary" if looks_binary(old_data) or looks_binary(new_data) else "text"
    logger.debug("Comparison mode sniffed as %s", mode)
    return mode


def split_lines(text: str) -> list[str]:
    """Split text into line records that keep their ``\\n`` terminator.

    Only ``\\n`` ends a line; a trailing fragment without a terminator
    becomes the final record.

    Examples
    --------
    >>> split_lines("a\\nb")
    ['a\\n', 'b']
    >>> split_lines("")
    []

    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def decode_lines(data: bytes) -> list[str]:
    """Decode raw bytes into line records.

    Undecodable bytes are kept as surrogate escapes so the original bytes
    can be written back out unchanged.
    """
    return split_lines(data.decode("utf-8", errors="surrogateescape"))
