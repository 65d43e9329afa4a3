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

from dataclasses import dataclass

from stylegate.core.config import CheckConfig
from stylegate.core.dispatcher import AnalysisDispatcher
from stylegate.core.selector import FileSelector
from stylegate.core.verifier import ToolVerifier, VerifiedTool, default_toolchain
from stylegate.tools.dialect import RegexDialect, detect_regex_dialect
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.runner import CommandRunner, SubprocessRunner
from stylegate.vcs.git import GitVCSProvider

EXIT_NOTHING_TO_CHECK = 0


@dataclass(frozen=True)
class RunResult:
    exit_code: int
    dialect: RegexDialect
    verified: tuple[VerifiedTool, ...]
    files: tuple[str, ...]
    dispatched: bool


# Default engine wiring


class DefaultStylegateEngine:
    """
    The orchestrator: probe, verify, select, dispatch.

    Every step blocks until its external commands finish. Errors from any
    step propagate as StylegateError; nothing after a failed step runs.
    """

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner if runner is not None else SubprocessRunner()
        self.verifier = ToolVerifier()
        self.selector = FileSelector(vcs=GitVCSProvider(runner=self.runner))
        self.dispatcher = AnalysisDispatcher()

    def describe_selection(self, config: CheckConfig) -> str:
        if config.file_to_check:
            return f"File to check: {config.file_to_check}"

        vcs = self.selector.vcs
        where: list[str] = []
        branch = vcs.current_branch(config.repo_root)
        if branch:
            where.append(f"branch '{branch}'")
        commit = vcs.current_commit(config.repo_root)
        if commit:
            where.append(f"HEAD {commit[:12]}")
        suffix = ", ".join(where)
        return f"Files changed in {config.commit_range}" + (f" ({suffix})" if suffix else "")

    def run(self, config: CheckConfig) -> RunResult:
        dialect = detect_regex_dialect(self.runner)

        ctx = VerifyContext(
            repo_root=config.repo_root,
            runner=self.runner,
            dialect=dialect,
            layout=config.layout,
        )
        verified = self.verifier.verify(ctx, default_toolchain(config.tools))

        print(self.describe_selection(config))
        files = self.selector.select(config)
        if not files:
            print()
            print("There are no files to check.")
            return RunResult(
                exit_code=EXIT_NOTHING_TO_CHECK,
                dialect=dialect,
                verified=verified,
                files=files,
                dispatched=False,
            )

        exit_code = self.dispatcher.dispatch(config, files)
        return RunResult(
            exit_code=exit_code,
            dialect=dialect,
            verified=verified,
            files=files,
            dispatched=True,
        )
