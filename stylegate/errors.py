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

from collections.abc import Mapping
from typing import Any


class StylegateError(Exception):
    """
    Base class for all stylegate errors.

    Every error is fatal for the current run: the CLI prints a single
    "[ERROR] ..." line and exits with status 1.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "stylegate_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class UsageError(StylegateError):
    """Raised for command-line tokens that match no known option."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: {token}", code="unknown_option", details={"token": token})
        self.token = token


class MissingInputError(StylegateError):
    """Raised when --file names something that is not a readable regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"The specified file does not exist. File: {path}",
            code="file_not_found",
            details={"path": path},
        )
        self.path = path


class ConfigError(StylegateError):
    """Raised when a stylegate configuration file cannot be used."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code="invalid_config", details=details)


class ToolError(StylegateError):
    """Base class for failures of an external analysis tool."""

    def __init__(self, message: str, *, tool: str, executable: str, code: str = "tool_error") -> None:
        super().__init__(message, code=code, details={"tool": tool, "executable": executable})
        self.tool = tool
        self.executable = executable


class ToolUnavailableError(ToolError):
    """The tool failed its smoke-test invocation or could not be launched."""

    def __init__(self, message: str, *, tool: str, executable: str) -> None:
        super().__init__(message, tool=tool, executable=executable, code="tool_unavailable")


class VersionMismatchError(ToolError):
    """The tool reports a version that does not satisfy the requirement."""

    def __init__(self, message: str, *, tool: str, executable: str, code: str = "version_mismatch") -> None:
        super().__init__(message, tool=tool, executable=executable, code=code)


class VersionUnparseableError(VersionMismatchError):
    """
    The tool's version output has no major.minor pair.

    Treated like a mismatch: the requirement cannot be shown to hold.
    """

    def __init__(self, message: str, *, tool: str, executable: str) -> None:
        super().__init__(message, tool=tool, executable=executable, code="version_unparseable")


class DispatchError(StylegateError):
    """The downstream analysis script could not be started."""

    def __init__(self, script: str, reason: str) -> None:
        super().__init__(
            f"Failed to run the analysis script {script}: {reason}",
            code="dispatch_failed",
            details={"script": script},
        )
