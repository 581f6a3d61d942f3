# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
from enum import Enum
from typing import Tuple

# Filename globs removed from the root directory, processed in this order.
PATTERNS: Tuple[str, ...] = (
    "*_error*.txt",
    "*_errors.txt",
    "clippy_*.txt",
    "test_*.txt",
    "*_test_*.txt",
    "workspace_*.txt",
    "check_*.txt",
    "*.log",
)


class ExitCode(int, Enum):
    """Process exit codes returned by the CLI."""

    SUCCESS = 0

    # Location of the running script could not be determined
    PATH_RESOLUTION_ERROR = 2

    # Root directory missing, not a directory or not listable
    DIRECTORY_ACCESS_ERROR = 3
