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
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.version import ToolVersion

# Older releases halt on some of the project's sources.
MINIMUM_VERSION: Final[ToolVersion] = ToolVersion(1, 69)

_VERSION_PREFIX = "Cppcheck "


@dataclass(frozen=True, slots=True)
class CppcheckTool(CommandLineTool):
    """
    cppcheck static analyzer, version 1.69 or later.
    """

    tool_id = "cppcheck"
    display_name = "CPPCHECK"

    def verify(self, ctx: VerifyContext) -> ToolVersion | None:
        self.smoke_test(ctx, ["--enable=all", "--inconclusive", "--std=c++03", ctx.layout.sentinel_source])

        raw = self.version_output(ctx).removeprefix(_VERSION_PREFIX)
        requirement = f"Version {MINIMUM_VERSION} or later"
        version = self.parse_version(raw, requirement, leading=True)
        if version < MINIMUM_VERSION:
            raise VersionMismatchError(
                self.version_message(requirement, version),
                tool=self.tool_id,
                executable=self.executable,
            )
        return version
