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

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from stylegate.core.config import ProjectLayout, ToolRefs
from stylegate.errors import ConfigError

CONFIG_FILE_NAMES = ("stylegate.yaml", "stylegate.yml", "stylegate.json")

_TOOL_KEYS = tuple(f.name for f in fields(ToolRefs))
_LAYOUT_KEYS = tuple(f.name for f in fields(ProjectLayout))


@dataclass(frozen=True, slots=True)
class FileSettings:
    """
    Values read from a configuration file.

    Only keys present in the file are set; None means "not configured".
    """

    tools: Mapping[str, str] = field(default_factory=dict)
    git_start: str | None = None
    git_end: str | None = None
    incremental: bool | None = None
    layout: Mapping[str, str] = field(default_factory=dict)


class DefaultConfigFileLoader:
    """
    Loads FileSettings from stylegate.yaml / stylegate.yml / stylegate.json

    Example (YAML):

        tools:
          cppcheck: /opt/cppcheck/bin/cppcheck
          clang_format: clang-format-3.6
        git:
          start: origin/master
        layout:
          vera_profile: nest
    """

    def load(self, path: Path) -> FileSettings:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.is_file():
            raise ConfigError(f"Configuration file does not exist: {path}", details={"path": str(path)})

        data = self._read_config_file(path)

        if data is None:
            return FileSettings()

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}", details={"path": str(path)})

        git = self._section(data, "git", path)
        incremental = data.get("incremental")
        if incremental is not None and not isinstance(incremental, bool):
            raise ConfigError(f"'incremental' must be true or false: {path}", details={"path": str(path)})

        return FileSettings(
            tools=self._string_map(self._section(data, "tools", path), _TOOL_KEYS, "tools", path),
            git_start=self._optional_str(git.get("start"), "git.start", path),
            git_end=self._optional_str(git.get("end"), "git.end", path),
            incremental=incremental,
            layout=self._string_map(self._section(data, "layout", path), _LAYOUT_KEYS, "layout", path),
        )

    def _read_config_file(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}", details={"path": str(path)}) from e

        try:
            if path.suffix.lower() == ".json":
                return json.loads(raw)
            # YAML is a superset of JSON, so anything else goes through PyYAML
            return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot parse configuration file {path}: {e}", details={"path": str(path)}) from e

    def _section(self, data: Mapping[str, Any], key: str, path: Path) -> Mapping[str, Any]:
        raw = data.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(f"'{key}' must be a mapping: {path}", details={"path": str(path), "key": key})
        return raw

    def _string_map(
        self,
        raw: Mapping[str, Any],
        allowed: tuple[str, ...],
        section: str,
        path: Path,
    ) -> dict[str, str]:
        out: dict[str, str] = {}
        for key, value in raw.items():
            # accept "clang-format" and "vera++" spellings too
            norm = str(key).replace("-", "_").rstrip("+")
            if norm not in allowed:
                raise ConfigError(
                    f"Unknown key '{section}.{key}' in {path}",
                    details={"path": str(path), "supported": list(allowed)},
                )
            text = self._optional_str(value, f"{section}.{key}", path)
            if text:
                out[norm] = text
        return out

    def _optional_str(self, value: Any, name: str, path: Path) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ConfigError(f"'{name}' must be a string: {path}", details={"path": str(path), "key": name})
        return str(value)
