# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import Optional


class LogCleanerError(Exception):
    """Base class for all log cleaner errors."""


class PathResolutionError(LogCleanerError):
    """The root directory could not be derived from the running script."""


class DirectoryAccessError(LogCleanerError):
    """The root directory does not exist or cannot be listed."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = path
        message = f"Cannot access directory '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileDeletionError(LogCleanerError):
    """A single file could not be removed. Never fatal for a cleanup run."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Could not remove '{path.name}': {reason}")
