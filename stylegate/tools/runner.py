# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Stylegate Contributors
#
# This file is part of Stylegate.
#
# Stylegate is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Stylegate is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# Shell convention for "command not found / not executable".
LAUNCH_FAILURE_RETURNCODE = 127


@dataclass(frozen=True, slots=True)
class CommandResult:
    """
    Outcome of one external command.

    A command that could not be started at all is reported with
    returncode 127 and the OS error text in `stderr`.
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """
    Narrow seam over process execution.

    Tool checks, the regex-dialect probe and the git oracle all run their
    commands through a runner so tests can substitute canned results.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: str | Path | None = None,
        input_text: str | None = None,
    ) -> CommandResult:
        raise NotImplementedError()


@dataclass(frozen=True, slots=True)
class SubprocessRunner:
    """
    Runs commands with subprocess, capturing stdout and stderr as text.

    Blocking; there is no timeout.
    """

    env: Mapping[str, str] | None = None

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: str | Path | None = None,
        input_text: str | None = None,
    ) -> CommandResult:
        argv = tuple(str(a) for a in args)
        try:
            result = subprocess.run(
                argv,
                cwd=None if cwd is None else str(cwd),
                input=input_text,
                capture_output=True,
                text=True,
                check=False,
                env=None if self.env is None else dict(self.env),
            )
        except OSError as e:
            # FileNotFoundError, PermissionError, ...
            return CommandResult(args=argv, returncode=LAUNCH_FAILURE_RETURNCODE, stderr=str(e))

        return CommandResult(
            args=argv,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
