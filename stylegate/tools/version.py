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

import re
from dataclasses import dataclass

_MAJOR_MINOR = re.compile(r"(\d+)\.(\d+)")


@dataclass(frozen=True, slots=True, order=True)
class ToolVersion:
    """
    A two-component tool version.

    Ordering is numeric on (major, minor), so 1.100 > 1.69.
    """

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    @classmethod
    def parse(cls, text: str) -> "ToolVersion":
        """
        Parse a string that is exactly "<major>.<minor>" (surrounding
        whitespace ignored).

        Raises:
            ValueError if the text is not a numeric major.minor pair.
        """
        m = _MAJOR_MINOR.fullmatch(text.strip())
        if m is None:
            raise ValueError(f"Not a major.minor version: {text.strip()!r}")
        return cls(major=int(m.group(1)), minor=int(m.group(2)))

    @classmethod
    def parse_leading(cls, text: str) -> "ToolVersion":
        """
        Parse the major.minor pair at the start of `text`, ignoring
        anything after it ("2.13.0 dev" -> 2.13).

        Raises:
            ValueError if the text does not start with major.minor.
        """
        m = _MAJOR_MINOR.match(text.strip())
        if m is None:
            raise ValueError(f"No leading major.minor version in {text.strip()!r}")
        return cls(major=int(m.group(1)), minor=int(m.group(2)))
