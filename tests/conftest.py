import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from stylegate.core.config import CheckConfig
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.runner import CommandResult

CPPCHECK_OK = "Cppcheck 1.69"
CLANG_FORMAT_OK = "clang-format version 3.6.2 (tags/RELEASE_362/final)"


@dataclass
class FakeRunner:
    """
    CommandRunner double.

    Responses are keyed by argv prefix (longest prefix wins); unknown
    commands succeed with empty output. `sed` is emulated for the
    s/pattern/replacement/flags expressions the tool uses, and only
    accepts the switches listed in `sed_flags`.
    """

    responses: dict[tuple[str, ...], CommandResult] = field(default_factory=dict)
    sed_flags: tuple[str, ...] = ("-r", "-E")
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def on(self, *args: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> "FakeRunner":
        self.responses[tuple(args)] = CommandResult(args=tuple(args), returncode=returncode, stdout=stdout, stderr=stderr)
        return self

    def run(self, args: Sequence[str], *, cwd=None, input_text=None) -> CommandResult:
        argv = tuple(str(a) for a in args)
        self.calls.append(argv)
        if argv[0] == "sed":
            return self._sed(argv, input_text or "")
        for n in range(len(argv), 0, -1):
            canned = self.responses.get(argv[:n])
            if canned is not None:
                return CommandResult(args=argv, returncode=canned.returncode, stdout=canned.stdout, stderr=canned.stderr)
        return CommandResult(args=argv, returncode=0)

    def calls_to(self, executable: str) -> list[tuple[str, ...]]:
        return [c for c in self.calls if c[0] == executable]

    def _sed(self, argv: tuple[str, ...], text: str) -> CommandResult:
        flag, expression = argv[1], argv[2]
        if flag not in self.sed_flags:
            return CommandResult(args=argv, returncode=1, stderr=f"sed: invalid option -- '{flag[1:]}'")
        _, pattern, replacement, flags = expression.split("/")
        count = 0 if "g" in flags else 1
        out = "".join(re.sub(pattern, replacement, line, count=count) + "\n" for line in text.splitlines())
        return CommandResult(args=argv, returncode=0, stdout=out)


@pytest.fixture
def runner() -> FakeRunner:
    """A runner for which the default toolchain verifies cleanly."""
    r = FakeRunner()
    r.on("cppcheck", "--version", stdout=CPPCHECK_OK + "\n")
    r.on("clang-format-3.6", "--version", stdout=CLANG_FORMAT_OK + "\n")
    return r


@pytest.fixture
def ctx(tmp_path: Path, runner: FakeRunner) -> VerifyContext:
    return VerifyContext(repo_root=tmp_path, runner=runner)


@pytest.fixture
def config(tmp_path: Path) -> CheckConfig:
    return CheckConfig(repo_root=tmp_path)
