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

from stylegate.tools.runner import CommandRunner, SubprocessRunner


@dataclass(frozen=True, slots=True)
class GitVCSProvider:
    """
    Git-based VCS provider, used as the change oracle.

    Provides:
      - Files changed in a commit range
      - Current commit SHA
      - Current branch name

    All operations are read-only and safe to run in any Git repository.
    """

    runner: CommandRunner = field(default_factory=SubprocessRunner)

    def changed_files(self, repo_root: str | Path, start: str, end: str) -> tuple[str, ...] | None:
        """
        List files that differ between two commits.

        Args:
            repo_root: Path to repository root
            start: Commit reference the diff starts from
            end: Commit reference the diff ends at

        Returns:
            Paths in the order git reports them, or None if git fails
            (unknown ref, not a repository, git missing)
        """
        result = self.runner.run(["git", "diff", "--name-only", f"{start}..{end}"], cwd=repo_root)
        if not result.ok:
            return None
        return tuple(line for line in result.stdout.splitlines() if line.strip())

    def current_commit(self, repo_root: str | Path) -> str | None:
        """
        Get the current commit SHA (HEAD).

        Args:
            repo_root: Path to repository root

        Returns:
            Commit SHA string, or None if not in a Git repository
        """
        result = self.runner.run(["git", "rev-parse", "HEAD"], cwd=repo_root)
        if result.ok:
            return result.stdout.strip()
        return None

    def current_branch(self, repo_root: str | Path) -> str | None:
        """
        Get the current branch name.

        Args:
            repo_root: Path to repository root

        Returns:
            Branch name, or None if not in a Git repository or detached HEAD
        """
        result = self.runner.run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root)
        if not result.ok:
            return None
        branch = result.stdout.strip()
        # "HEAD" means detached HEAD state
        if branch == "HEAD":
            return None
        return branch
