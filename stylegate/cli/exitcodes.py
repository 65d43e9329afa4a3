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

# Shell-script semantics: 0 = success or nothing to do, 1 = any failure.
# A dispatched run exits with the analysis script's own status instead.
EXIT_OK = 0
EXIT_FAILURE = 1
