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

from stylegate.tools.base import CommandLineTool
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.version import ToolVersion


@dataclass(frozen=True, slots=True)
class Pep8Tool(CommandLineTool):
    """pep8 style checker; no version requirement."""

    tool_id = "pep8"
    display_name = "PEP8"

    def verify(self, ctx: VerifyContext) -> ToolVersion | None:
        self.smoke_test(ctx, ["--ignore=E121", ctx.layout.sentinel_python])
        return None
