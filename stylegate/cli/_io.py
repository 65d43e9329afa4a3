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
from dataclasses import replace
from pathlib import Path

from stylegate.core.config import DEFAULT_GIT_END, DEFAULT_GIT_START, CheckConfig, ProjectLayout, ToolRefs
from stylegate.core.loader import CONFIG_FILE_NAMES, DefaultConfigFileLoader, FileSettings
from stylegate.errors import MissingInputError


def ensure_readable_file(path: str) -> str:
    """
    argparse `type=` hook for --file: the path must name an existing,
    readable regular file. Returns the path as given.
    """
    p = Path(path)
    if not path or not p.is_file() or not os.access(p, os.R_OK):
        raise MissingInputError(path)
    return path


def default_config_file(repo_root: Path) -> Path | None:
    for name in CONFIG_FILE_NAMES:
        candidate = repo_root / name
        if candidate.is_file():
            return candidate
    return None


def load_file_settings(repo_root: Path, explicit: str | None) -> FileSettings:
    """
    Settings from --config, else from a config file in the repo root,
    else nothing.
    """
    path = Path(explicit) if explicit else default_config_file(repo_root)
    if path is None:
        return FileSettings()
    return DefaultConfigFileLoader().load(path)


def build_config(
    *,
    repo_root: Path,
    settings: FileSettings,
    file_to_check: str | None = None,
    git_start: str | None = None,
    git_end: str | None = None,
    incremental: bool | None = None,
    tools: dict[str, str | None] | None = None,
) -> CheckConfig:
    """
    Layer defaults, file settings and command-line values (highest wins).
    """
    cli_tools = {k: v for k, v in (tools or {}).items() if v is not None}
    tool_refs = replace(ToolRefs(), **{**settings.tools, **cli_tools})
    layout = replace(ProjectLayout(), **settings.layout)

    return CheckConfig(
        repo_root=repo_root,
        file_to_check=file_to_check,
        git_start=_first(git_start, settings.git_start, DEFAULT_GIT_START),
        git_end=_first(git_end, settings.git_end, DEFAULT_GIT_END),
        tools=tool_refs,
        incremental=bool(_first(incremental, settings.incremental, False)),
        layout=layout,
    )


def _first(*values):
    for v in values:
        if v is not None:
            return v
    return None
