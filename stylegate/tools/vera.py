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

from stylegate.errors import ToolUnavailableError
from stylegate.tools.base import CommandLineTool
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.version import ToolVersion

PROFILE_DOCS_URL = "https://nest.github.io/nest-simulator/coding_guidelines_c++#vera-profile-nest"


@dataclass(frozen=True, slots=True)
class VeraTool(CommandLineTool):
    """
    vera++ style checker.

    Besides launching, vera++ must be able to find the project's profile.
    """

    tool_id = "vera++"
    display_name = "VERA++"

    def verify(self, ctx: VerifyContext) -> ToolVersion | None:
        self.smoke_test(ctx, [ctx.layout.sentinel_source])

        profile = ctx.layout.vera_profile
        result = self.run(ctx, "--profile", profile, ctx.layout.sentinel_source)
        if not result.ok:
            raise ToolUnavailableError(
                f"Failed to verify the {self.display_name} installation. "
                f"The profile '{profile}' could not be found. See {PROFILE_DOCS_URL}",
                tool=self.tool_id,
                executable=self.executable,
            )
        return None
