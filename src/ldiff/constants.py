#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for ldiff.

This module centralizes the literal types, magic numbers and output markers
used across ldiff. Constants are organized by category:

1. Type Definitions - Literal types for formats and modes
2. Comparison Behavior - Binary sniffing and context defaults
3. Output Framing - Header markers and timestamp layout
4. Configuration Discovery - Config file names and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FormatMode = Literal["old", "context", "unified", "ed", "reverse_ed", "report"]
ComparisonMode = Literal["text", "binary"]
ColorMode = Literal["auto", "always", "never"]

FORMAT_MODES: tuple[FormatMode, ...] = ("old", "context", "unified", "ed", "reverse_ed", "report")

# Formats that show surrounding unchanged lines
CONTEXT_FORMATS: frozenset[str] = frozenset({"context", "unified"})

# Formats whose fragments are buffered and emitted bottom-up
ED_FORMATS: frozenset[str] = frozenset({"ed", "reverse_ed"})

# =============================================================================
# Comparison Behavior
# =============================================================================

DEFAULT_CONTEXT_LINES = 3

# Only this many leading bytes of each input are inspected for NUL bytes
BINARY_SNIFF_SIZE = 4096

# =============================================================================
# Output Framing
# =============================================================================

# (old, new) header markers
HEADER_MARKERS: dict[str, tuple[str, str]] = {
    "context": ("***", "---"),
    "unified": ("---", "+++"),
}

# Change operation code -> command letter for old-style and ed output
OP_ACTIONS: dict[str, str] = {"+": "a", "-": "d", "!": "c"}

CONTEXT_HUNK_SEPARATOR = "***************"
NO_NEWLINE_MARKER = "\\ No newline at end of file"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES = [".ldiff.toml", ".ldiff.yaml", ".ldiff.yml", ".ldiff.json"]
CONFIG_ENV_VAR = "LDIFF_CONFIG"
PYPROJECT_TOOL_SECTION = "ldiff"
