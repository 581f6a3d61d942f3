# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from typing import List, Optional, Set

from rich.console import Console

from log_cleaner.core.errors import FileDeletionError
from log_cleaner.core.utils.config_model import CleanerConfig
from log_cleaner.core.utils.general_utils import (
    check_directory,
    force_remove,
    list_matching_files,
    resolve_root_dir,
)

logger = logging.getLogger(__name__)


class LogCleaner:
    """
    Delete files matching a fixed list of glob patterns from one directory.

    Only regular files directly inside the root directory are considered.
    A file that cannot be removed is logged and skipped, the remaining files
    are still processed. PathResolutionError and DirectoryAccessError
    propagate to the caller.

    Args:
        config (CleanerConfig): Root directory and patterns. Defaults to CleanerConfig().
        console (Console): Rich console that progress lines are printed to.

    Example:
        >>> removed = LogCleaner(CleanerConfig(root_dir=Path("."))).run()
    """

    def __init__(
        self,
        config: Optional[CleanerConfig] = None,
        console: Optional[Console] = None,
    ):
        self.config = config if config is not None else CleanerConfig()
        self.console = console if console is not None else Console()
        self.removed: List[Path] = []
        self.skipped: List[Path] = []

    def root_dir(self) -> Path:
        """Configured root directory, or the parent of the running script's directory."""
        if self.config.root_dir is not None:
            return self.config.root_dir
        return resolve_root_dir()

    def run(self) -> int:
        """Remove every matching file and return how many were removed."""
        self.removed = []
        self.skipped = []

        self.console.print("Cleaning up development log files...", highlight=False)

        root_dir = self.root_dir()
        check_directory(root_dir)
        logger.debug(f"Cleaning {root_dir}")

        # Overlapping patterns must not count the same file twice
        seen: Set[Path] = set()

        for pattern in self.config.patterns:
            matches = list_matching_files(root_dir, pattern)
            logger.debug(f"Pattern {pattern!r} matched {len(matches)} file(s)")

            for file_path in matches:
                if file_path in seen:
                    continue
                seen.add(file_path)
                self._remove(file_path)

        self._report()
        return len(self.removed)

    def _remove(self, file_path: Path) -> None:
        # File names are printed verbatim, never as markup or emoji codes
        self.console.print(
            f"  Removing: {file_path.name}",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        try:
            force_remove(file_path)
        except FileNotFoundError:
            logger.debug(f"{file_path.name} was removed by another process")
            self.skipped.append(file_path)
            return
        except FileDeletionError as e:
            logger.warning(f"Skipping file. {e}")
            self.skipped.append(file_path)
            return

        self.removed.append(file_path)

    def _report(self) -> None:
        if not self.removed:
            self.console.print("No log files found to clean.", highlight=False)
        else:
            self.console.print()
            self.console.print(
                f"Cleaned up {len(self.removed)} log file(s).", highlight=False
            )
