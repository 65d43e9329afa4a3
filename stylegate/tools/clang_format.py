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
from typing import Final

from stylegate.errors import VersionMismatchError
from stylegate.tools.base import CommandLineTool
from stylegate.tools.dialect import sed_substitute
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.version import ToolVersion

# Up to 3.5 some required style options are missing; 3.7 formats differently.
REQUIRED_VERSION: Final[ToolVersion] = ToolVersion(3, 6)

# "clang-format version 3.6.2 (tags/RELEASE_362/final)" -> "3.6"
VERSION_EXPRESSION = r"s/^.*([0-9]\.[0-9])\..*/\1/"


@dataclass(frozen=True, slots=True)
class ClangFormatTool(CommandLineTool):
    """
    clang-format, exactly version 3.6.

    The version is cut out of `--version` with sed, using the
    extended-regex switch found by the dialect probe.
    """

    tool_id = "clang-format"
    display_name = "CLANG-FORMAT"

    def verify(self, ctx: VerifyContext) -> ToolVersion | None:
        self.smoke_test(ctx, [f"-style={ctx.layout.clang_format_style}", ctx.layout.sentinel_source])

        extracted = sed_substitute(ctx.runner, ctx.dialect, VERSION_EXPRESSION, self.version_output(ctx))
        requirement = f"Version {REQUIRED_VERSION}"
        version = self.parse_version(extracted, requirement)
        # "3.06" parses to the same pair but is not the 3.6 release
        if version != REQUIRED_VERSION or extracted != str(REQUIRED_VERSION):
            raise VersionMismatchError(
                self.version_message(requirement, extracted),
                tool=self.tool_id,
                executable=self.executable,
            )
        return version
