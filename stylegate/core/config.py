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

DEFAULT_GIT_START = "master"
DEFAULT_GIT_END = "HEAD"


@dataclass(frozen=True, slots=True)
class ToolRefs:
    """
    Executable names (or paths) of the four external analysis tools.
    """

    vera: str = "vera++"
    pep8: str = "pep8"
    cppcheck: str = "cppcheck"  # 1.69 or later
    clang_format: str = "clang-format-3.6"  # exactly 3.6


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """
    Repository-relative files and names the checks rely on.

    Paths are resolved against the repository root at use time.
    """

    sentinel_source: str = "./nest/main.cpp"
    sentinel_python: str = "./extras/parse_travis_log.py"
    clang_format_style: str = "./.clang-format"
    vera_profile: str = "nest"
    analysis_script: str = "./extras/static_code_analysis.sh"
    vpath_env_var: str = "NEST_VPATH"


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """
    Fully resolved configuration of one run.

    Exactly one of `file_to_check` or the (git_start, git_end) range
    selects the files; an explicit file wins.
    """

    repo_root: Path
    file_to_check: str | None = None
    git_start: str = DEFAULT_GIT_START
    git_end: str = DEFAULT_GIT_END
    tools: ToolRefs = field(default_factory=ToolRefs)
    incremental: bool = False
    layout: ProjectLayout = field(default_factory=ProjectLayout)

    @property
    def commit_range(self) -> str:
        return f"{self.git_start}..{self.git_end}"
