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

import sys
from dataclasses import dataclass, field
from pathlib import Path

from stylegate.core.config import CheckConfig
from stylegate.vcs.git import GitVCSProvider


@dataclass(frozen=True, slots=True)
class FileSelector:
    """
    Decides which files the downstream analysis gets.

    An explicit file wins; otherwise every file git reports as changed in
    the configured commit range, unfiltered and in git's order.
    """

    vcs: GitVCSProvider = field(default_factory=GitVCSProvider)

    def select(self, config: CheckConfig) -> tuple[str, ...]:
        if config.file_to_check and Path(config.file_to_check).is_file():
            return (config.file_to_check,)

        files = self.vcs.changed_files(config.repo_root, config.git_start, config.git_end)
        if files is None:
            # Same outcome as an empty diff, but say why.
            print(
                f"[WARNING] git diff failed for commit range {config.commit_range}; no files selected.",
                file=sys.stderr,
            )
            return ()
        return files
