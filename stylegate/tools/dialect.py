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

from enum import Enum

from stylegate.tools.runner import CommandRunner

SED = "sed"

# Any harmless substitution works; only the exit status matters.
_PROBE_EXPRESSION = "s/[aeou]/_/g"
_PROBE_INPUT = "hello\n"


class RegexDialect(str, Enum):
    """
    The sed switch that enables extended regular expressions.

    GNU sed accepts -r (and, in recent versions, -E); BSD/macOS sed only -E.
    """

    EXTENDED_R = "r"
    EXTENDED_E = "E"

    @property
    def flag(self) -> str:
        return f"-{self.value}"


def detect_regex_dialect(runner: CommandRunner) -> RegexDialect:
    """
    Find out which extended-regex switch the local sed accepts.

    Tries -r first and falls back to -E. This never fails: when neither
    switch works, later sed-based extraction yields no version and the
    tool check reports it as unparseable.
    """
    result = runner.run([SED, RegexDialect.EXTENDED_R.flag, _PROBE_EXPRESSION], input_text=_PROBE_INPUT)
    if result.ok:
        return RegexDialect.EXTENDED_R
    return RegexDialect.EXTENDED_E


def sed_substitute(runner: CommandRunner, dialect: RegexDialect, expression: str, text: str) -> str:
    """
    Apply a sed substitution to `text` with the given dialect.

    Lines the expression does not match pass through unchanged, as with
    sed itself. Returns an empty string if sed cannot run.
    """
    result = runner.run([SED, dialect.flag, expression], input_text=text)
    if not result.ok:
        return ""
    return result.stdout.strip()
