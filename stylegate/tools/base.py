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

from collections.abc import Sequence
from dataclasses import dataclass

from stylegate.errors import ToolUnavailableError, VersionUnparseableError
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.runner import CommandResult
from stylegate.tools.version import ToolVersion


@dataclass(frozen=True, slots=True)
class CommandLineTool:
    """
    Shared plumbing for the concrete tool checks.

    Subclasses set `tool_id` / `display_name` and implement `verify()`.
    """

    executable: str

    tool_id = ""
    display_name = ""

    def run(self, ctx: VerifyContext, *args: str) -> CommandResult:
        return ctx.runner.run([self.executable, *args], cwd=ctx.repo_root)

    def smoke_test(self, ctx: VerifyContext, args: Sequence[str], message: str | None = None) -> None:
        """
        Run the tool with `args`; a non-zero exit or a failed launch aborts.
        """
        result = self.run(ctx, *args)
        if not result.ok:
            raise ToolUnavailableError(
                message or self.unavailable_message(),
                tool=self.tool_id,
                executable=self.executable,
            )

    def unavailable_message(self) -> str:
        return f"Failed to verify the {self.display_name} installation. Executable: {self.executable}"

    def version_output(self, ctx: VerifyContext) -> str:
        """
        Output of `<tool> --version`, whatever its exit status.
        """
        result = self.run(ctx, "--version")
        return result.stdout.strip()

    def parse_version(self, text: str, requirement: str, *, leading: bool = False) -> ToolVersion:
        try:
            if leading:
                return ToolVersion.parse_leading(text)
            return ToolVersion.parse(text)
        except ValueError as e:
            raise VersionUnparseableError(
                self.version_message(requirement, text),
                tool=self.tool_id,
                executable=self.executable,
            ) from e

    def version_message(self, requirement: str, found: object) -> str:
        return (
            f"Failed to verify the {self.display_name} installation. {requirement} is required. "
            f"The executable '{self.executable}' is of version {found}."
        )
