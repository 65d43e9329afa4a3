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

import os
import stat
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from stylegate.core.config import CheckConfig
from stylegate.errors import DispatchError

# The downstream script also runs on CI; this front-end never does.
RUNS_ON_CI = "false"

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _flag(value: bool) -> str:
    return "true" if value else "false"


class AnalysisDispatcher:
    """
    Hands the selected files and the verified toolchain to the downstream
    analysis script and returns its exit status unchanged.

    Positional arguments passed to the script:
      1. runs-on-CI flag (always "false")
      2. incremental flag ("true" / "false")
      3. files to check, newline separated, as one argument
      4. build path (always empty; the variable is cleared)
      5-8. vera++, cppcheck, clang-format and pep8 executables
    """

    def build_argv(self, config: CheckConfig, files: Sequence[str]) -> list[str]:
        tools = config.tools
        return [
            config.layout.analysis_script,
            RUNS_ON_CI,
            _flag(config.incremental),
            "\n".join(files),
            "",
            tools.vera,
            tools.cppcheck,
            tools.clang_format,
            tools.pep8,
        ]

    def build_env(self, config: CheckConfig) -> dict[str, str]:
        env = dict(os.environ)
        # keep local build settings out of the analysis
        env.pop(config.layout.vpath_env_var, None)
        return env

    def ensure_executable(self, script: Path) -> None:
        """
        Best effort: add execute bits to the script if it lacks them.

        A failure is reported and ignored; launching the script will
        surface any real problem.
        """
        if not script.exists() or os.access(script, os.X_OK):
            return
        try:
            script.chmod(script.stat().st_mode | _EXECUTE_BITS)
        except OSError as e:
            print(f"[WARNING] Could not make {script} executable: {e}", file=sys.stderr)

    def dispatch(self, config: CheckConfig, files: Sequence[str]) -> int:
        script = config.repo_root / config.layout.analysis_script
        self.ensure_executable(script)

        argv = self.build_argv(config, files)
        try:
            result = subprocess.run(
                argv,
                cwd=str(config.repo_root),
                env=self.build_env(config),
                check=False,
            )
        except OSError as e:
            raise DispatchError(config.layout.analysis_script, str(e)) from e

        return result.returncode
