"""Test utilities for the ldiff test suite.

Helpers for building line sequences with controlled differences and for
writing input files.
"""

import shutil
import tempfile
from pathlib import Path


def numbered_lines(count: int, prefix: str = "line") -> list[str]:
    """Return ``count`` distinct newline-terminated lines."""
    return [f"{prefix} {index}\n" for index in range(1, count + 1)]


def change_lines(lines: list[str], *indexes: int) -> list[str]:
    """Return a copy of ``lines`` with the lines at ``indexes`` replaced."""
    changed = list(lines)
    for index in indexes:
        changed[index] = f"changed {index}\n"
    return changed


def join(lines: list[str]) -> bytes:
    return "".join(lines).encode("utf-8")


def write_pair(directory: Path, old: str | bytes, new: str | bytes) -> tuple[Path, Path]:
    """Write ``old.txt`` and ``new.txt`` into ``directory`` and return their paths."""
    old_path = directory / "old.txt"
    new_path = directory / "new.txt"
    for path, content in ((old_path, old), (new_path, new)):
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
    return old_path, new_path


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
