# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from log_cleaner.core.cleaner import LogCleaner
from log_cleaner.core.errors import (
    DirectoryAccessError,
    FileDeletionError,
    LogCleanerError,
    PathResolutionError,
)
from log_cleaner.core.utils.config_model import CleanerConfig
from log_cleaner.core.utils.logging import logging_config
from log_cleaner.core.utils.types import ExitCode, PATTERNS

logger = logging.getLogger(__name__)


def clean_logs(
    root_dir: Union[str, Path, None] = None,
    console: Optional[Console] = None,
) -> int:
    """
    Remove development log files from a directory.

    Args:
        root_dir (Union[str, Path, None]): Directory to clean. If None, the parent of the
         directory containing the running script is used.
        console (Optional[Console]): Rich console for progress output. Defaults to stdout.

    Returns:
        int: Number of files removed.

    Raises:
        PathResolutionError: If root_dir is None and the script location is unknown.
        DirectoryAccessError: If the directory does not exist or cannot be listed.

    Example:
        >>> removed = clean_logs(Path("."))
    """
    config = CleanerConfig(root_dir=Path(root_dir) if root_dir is not None else None)
    removed = LogCleaner(config, console=console).run()
    logger.debug(f"Removed {removed} file(s)")
    return removed


def exit_code_for(error: LogCleanerError) -> ExitCode:
    """Exit code a process should terminate with after a fatal cleanup error"""
    if isinstance(error, PathResolutionError):
        return ExitCode.PATH_RESOLUTION_ERROR
    if isinstance(error, DirectoryAccessError):
        return ExitCode.DIRECTORY_ACCESS_ERROR
    raise ValueError(f"{type(error).__name__} is not a fatal cleanup error")


__all__ = [
    "clean_logs",
    "exit_code_for",
    "logging_config",
    "CleanerConfig",
    "LogCleaner",
    "LogCleanerError",
    "PathResolutionError",
    "DirectoryAccessError",
    "FileDeletionError",
    "ExitCode",
    "PATTERNS",
]
