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

from collections.abc import Sequence
from dataclasses import dataclass

from stylegate.core.config import ToolRefs
from stylegate.tools.clang_format import ClangFormatTool
from stylegate.tools.cppcheck import CppcheckTool
from stylegate.tools.interfaces import ExternalTool, VerifyContext
from stylegate.tools.pep8 import Pep8Tool
from stylegate.tools.vera import VeraTool
from stylegate.tools.version import ToolVersion


@dataclass(frozen=True, slots=True)
class VerifiedTool:
    tool_id: str
    executable: str
    version: ToolVersion | None = None


def default_toolchain(refs: ToolRefs) -> tuple[ExternalTool, ...]:
    """
    The four checks in the order they run.
    """
    return (
        VeraTool(refs.vera),
        Pep8Tool(refs.pep8),
        CppcheckTool(refs.cppcheck),
        ClangFormatTool(refs.clang_format),
    )


class ToolVerifier:
    """
    Verifies a toolchain one tool at a time.

    The first failing check raises and nothing after it runs, so the
    downstream analysis never starts against an unverified toolchain.
    """

    def verify(self, ctx: VerifyContext, toolchain: Sequence[ExternalTool]) -> tuple[VerifiedTool, ...]:
        verified: list[VerifiedTool] = []
        for tool in toolchain:
            version = tool.verify(ctx)
            verified.append(VerifiedTool(tool_id=tool.tool_id, executable=tool.executable, version=version))
        return tuple(verified)
