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

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from stylegate.core.config import ProjectLayout
from stylegate.tools.dialect import RegexDialect
from stylegate.tools.runner import CommandRunner
from stylegate.tools.version import ToolVersion


@dataclass(frozen=True, slots=True)
class VerifyContext:
    """
    Everything a tool check needs besides its own executable.

    IMPORTANT:
    - Shared by all four checks of a run; checks must not mutate it.
    - `dialect` is filled in by the regex-dialect probe before any check
      that extracts a version with sed.
    """

    repo_root: Path
    runner: CommandRunner
    dialect: RegexDialect = RegexDialect.EXTENDED_R
    layout: ProjectLayout = field(default_factory=ProjectLayout)


class ExternalTool(Protocol):
    """
    Contract for one external analysis tool.

    A tool check smoke-tests the executable and, where the tool carries a
    version requirement, verifies it. Any failure is raised as a
    ToolError subclass; returning means the tool is usable.
    """

    @property
    def tool_id(self) -> str:
        """
        Stable id, also the name of the command-line option
        ("vera++", "pep8", "cppcheck", "clang-format").
        """
        raise NotImplementedError()

    @property
    def display_name(self) -> str:
        """
        Human-readable name used in diagnostics ("CPPCHECK").
        """
        raise NotImplementedError()

    @property
    def executable(self) -> str:
        """
        Configured executable name or path.
        """
        raise NotImplementedError()

    def verify(self, ctx: VerifyContext) -> ToolVersion | None:
        """
        Run the checks for this tool.

        Returns:
            The detected version for version-constrained tools, else None.

        Raises:
            ToolUnavailableError, VersionMismatchError, VersionUnparseableError
        """
        raise NotImplementedError()
