"""
End-to-end tests for the stylegate CLI.

The external analysis tools, sed and git are replaced by the fake runner;
the downstream analysis script is a real shell script that records the
arguments it receives.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from stylegate.cli.main import main
from stylegate.core.engine import DefaultStylegateEngine

RECORDING_SCRIPT = """#!/bin/sh
out="$(dirname "$0")/received"
mkdir -p "$out"
i=0
for a in "$@"; do
  i=$((i + 1))
  printf '%s' "$a" > "$out/arg$i"
done
printf '%s' "$#" > "$out/count"
printf '%s' "${NEST_VPATH-unset}" > "$out/vpath"
exit 0
"""


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "src"
    (root / "extras").mkdir(parents=True)
    (root / "nest").mkdir()
    (root / "nest" / "main.cpp").write_text("int main() { return 0; }\n")
    script = root / "extras" / "static_code_analysis.sh"
    script.write_text(RECORDING_SCRIPT)
    script.chmod(0o644)
    monkeypatch.chdir(root)
    monkeypatch.setenv("NEST_VPATH", "/home/me/build")
    return root


def received(repo: Path) -> dict:
    out = repo / "extras" / "received"
    count = int((out / "count").read_text())
    return {
        "count": count,
        "args": [(out / f"arg{i}").read_text() for i in range(1, count + 1)],
        "vpath": (out / "vpath").read_text(),
    }


def run_with(runner, *args: str) -> int:
    with patch("stylegate.cli.main.DefaultStylegateEngine", lambda: DefaultStylegateEngine(runner=runner)):
        return main(list(args))


def test_single_file_dispatches_once(repo: Path, runner):
    exit_code = run_with(runner, "--file=nest/main.cpp")

    assert exit_code == 0
    data = received(repo)
    assert data["count"] == 8
    assert data["args"] == [
        "false",
        "false",
        "nest/main.cpp",
        "",
        "vera++",
        "cppcheck",
        "clang-format-3.6",
        "pep8",
    ]
    assert data["vpath"] == "unset"
    assert os.access(repo / "extras" / "static_code_analysis.sh", os.X_OK)
    assert ("git", "diff") not in [c[:2] for c in runner.calls]


def test_changed_files_are_passed_as_one_argument(repo: Path, runner):
    runner.on("git", "diff", stdout="nest/a.cpp\nextras/b.py\n")

    assert run_with(runner, "--git-start=v1", "--incremental") == 0

    data = received(repo)
    assert data["args"][1] == "true"
    assert data["args"][2] == "nest/a.cpp\nextras/b.py"
    assert ("git", "diff", "--name-only", "v1..HEAD") in runner.calls


def test_nothing_to_check(repo: Path, runner, capsys):
    runner.on("git", "diff", stdout="")

    assert run_with(runner) == 0
    assert "There are no files to check." in capsys.readouterr().out
    assert not (repo / "extras" / "received").exists()


def test_old_cppcheck_aborts_before_dispatch(repo: Path, runner, capsys):
    runner.on("cppcheck", "--version", stdout="Cppcheck 1.68\n")

    assert run_with(runner, "--file=nest/main.cpp") == 1
    err = capsys.readouterr().err
    assert "[ERROR] Failed to verify the CPPCHECK installation." in err
    assert "is of version 1.68" in err
    assert not (repo / "extras" / "received").exists()


def test_custom_tool_reference_is_verified_and_forwarded(repo: Path, runner):
    runner.on("/opt/clang-format", "--version", stdout="clang-format version 3.6.0\n")

    assert run_with(runner, "--file=nest/main.cpp", "--clang-format=/opt/clang-format") == 0
    assert runner.calls_to("/opt/clang-format")
    assert received(repo)["args"][6] == "/opt/clang-format"


def test_missing_tool_aborts(repo: Path, runner, capsys):
    runner.on("vera++", returncode=127, stderr="No such file or directory")

    assert run_with(runner, "--file=nest/main.cpp") == 1
    assert "Failed to verify the VERA++ installation. Executable: vera++" in capsys.readouterr().err
