# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import fnmatch
import logging
import os
import stat
import sys
from pathlib import Path
from typing import List, Union

from log_cleaner.core.errors import (
    DirectoryAccessError,
    FileDeletionError,
    PathResolutionError,
)

logger = logging.getLogger(__name__)

# argv[0] values that do not point at a script on disk
_NON_SCRIPT_ARGV = {"", "-", "-c", "-m"}


def resolve_root_dir(script_path: Union[str, Path, None] = None) -> Path:
    """
    Return the parent of the directory containing the running script.

    Args:
        script_path (Union[str, Path, None]): Location of the script. Defaults to sys.argv[0].

    Raises:
        PathResolutionError: If the script location is unknown or cannot be resolved.
    """
    if script_path is None:
        script_path = sys.argv[0] if sys.argv else ""

    if str(script_path) in _NON_SCRIPT_ARGV:
        raise PathResolutionError(
            "Unable to determine the location of the running script"
        )

    try:
        script_dir = Path(script_path).resolve().parent
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(
            f"Unable to resolve script location '{script_path}': {e}"
        ) from e

    logger.debug(f"Script directory resolved to {script_dir}")
    return script_dir.parent


def check_directory(dir_path: Path) -> None:
    """Raise DirectoryAccessError unless dir_path is an existing directory."""
    try:
        mode = dir_path.stat().st_mode
    except FileNotFoundError as e:
        raise DirectoryAccessError(dir_path, "does not exist") from e
    except PermissionError as e:
        raise DirectoryAccessError(dir_path, "permission denied") from e
    except OSError as e:
        raise DirectoryAccessError(dir_path, e.strerror or str(e)) from e

    if not stat.S_ISDIR(mode):
        raise DirectoryAccessError(dir_path, "not a directory")


def matches_pattern(file_name: str, pattern: str) -> bool:
    """
    Glob match on a base name. Case handling follows the platform,
    case-insensitive on Windows and case-sensitive elsewhere.
    """
    return fnmatch.fnmatch(file_name, pattern)


def list_matching_files(dir_path: Path, pattern: str) -> List[Path]:
    """
    List regular files directly inside dir_path whose name matches pattern.
    Subdirectories are not descended into and symlinks are skipped.
    Order is whatever the filesystem returns.
    """
    try:
        with os.scandir(dir_path) as entries:
            return [
                Path(entry.path)
                for entry in entries
                if entry.is_file(follow_symlinks=False)
                and matches_pattern(entry.name, pattern)
            ]
    except OSError as e:
        raise DirectoryAccessError(dir_path, e.strerror or str(e)) from e


def force_remove(file_path: Path) -> None:
    """
    Delete a file, clearing the read-only attribute and retrying if needed.

    Raises:
        FileNotFoundError: If the file disappeared before it could be removed.
        FileDeletionError: If the file exists but cannot be removed.
    """
    try:
        file_path.unlink()
        return
    except FileNotFoundError:
        raise
    except PermissionError as e:
        first_error = e
    except OSError as e:
        raise FileDeletionError(file_path, e) from e

    # Windows refuses to delete read-only files
    try:
        file_path.chmod(file_path.stat().st_mode | stat.S_IWRITE)
        file_path.unlink()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise FileDeletionError(file_path, e) from first_error
