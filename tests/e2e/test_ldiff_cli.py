"""End-to-end tests for the ldiff command.

Runs ``python -m ldiff`` in a subprocess and checks exit codes and the exact
bytes written to stdout and stderr.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def _run_cli(args: list[str], env_overrides: dict | None = None) -> subprocess.CompletedProcess:
    """Run ldiff with the given arguments and capture raw output."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env.pop("LDIFF_CONFIG", None)
    env.update(env_overrides or {})
    return subprocess.run([sys.executable, "-m", "ldiff"] + args, capture_output=True, env=env)


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestLdiffCli:
    """Exercise the installed entry point the way a shell user would."""

    def test_identical(self, file_pair):
        old_path, new_path = file_pair("a\n", "a\n")
        result = _run_cli([str(old_path), str(new_path)])
        assert result.returncode == 0
        assert result.stdout == b""

    def test_old_style(self, file_pair):
        old_path, new_path = file_pair("a\nb\nc\n", "a\nx\nc\nd\n")
        result = _run_cli([str(old_path), str(new_path)])
        assert result.returncode == 1
        assert result.stdout == b"2c2\n< b\n---\n> x\n3a4\n> d\n"

    def test_unified(self, file_pair):
        old_path, new_path = file_pair("a\nb\nc\n", "a\nx\nc\n")
        result = _run_cli(["-u", str(old_path), str(new_path)])
        assert result.returncode == 1
        lines = result.stdout.decode().split("\n")
        assert lines[0].startswith(f"--- {old_path}\t")
        assert lines[2:] == ["@@ -1,3 +1,3 @@", " a", "-b", "+x", " c", ""]

    def test_ed_script_is_bottom_up(self, file_pair):
        old_path, new_path = file_pair("1\n2\n3\n4\n5\n", "0\n1\n2\n4\n5\n6\n")
        result = _run_cli(["-e", str(old_path), str(new_path)])
        assert result.stdout == b"5a\n6\n.\n3d\n0a\n0\n.\n"

    def test_invalid_utf8_round_trips(self, file_pair):
        old_path, new_path = file_pair(b"caf\xe9\n", b"cafe\n")
        result = _run_cli(["-a", str(old_path), str(new_path)])
        assert result.stdout == b"1c1\n< caf\xe9\n---\n> cafe\n"

    def test_binary(self, file_pair):
        old_path, new_path = file_pair(b"\0\1\2", b"\0\1\3")
        result = _run_cli([str(old_path), str(new_path)])
        assert result.returncode == 1
        assert result.stdout == f"Files {old_path} and {new_path} differ\n".encode()

    def test_missing_file(self, file_pair, temp_dir):
        old_path, _ = file_pair("a\n", "b\n")
        missing = temp_dir / "gone.txt"
        result = _run_cli([str(old_path), str(missing)])
        assert result.returncode == 2
        assert result.stdout == b""
        assert f"{missing}: No such file or directory".encode() in result.stderr

    def test_usage(self):
        result = _run_cli([])
        assert result.returncode == 127
        assert b"usage: ldiff" in result.stderr

    def test_env_config(self, file_pair, tmp_path):
        old_path, new_path = file_pair("a\n", "b\n")
        config_file = tmp_path / "ldiff.yaml"
        config_file.write_text("format: reverse_ed\n")
        result = _run_cli([str(old_path), str(new_path)], {"LDIFF_CONFIG": str(config_file)})
        assert result.stdout == b"c1\nb\n.\n"

    def test_verbose_logs_to_stderr(self, file_pair):
        old_path, new_path = file_pair("a\n", "b\n")
        result = _run_cli(["-v", str(old_path), str(new_path)])
        assert result.stdout == b"1c1\n< a\n---\n> b\n"
        assert b"DEBUG:" in result.stderr
