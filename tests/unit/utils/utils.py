# SPDX-FileCopyrightText: <text>Copyright 2024-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import io
import logging
from pathlib import Path
from typing import Iterable, List

from rich.console import Console


def clear_loggers() -> None:
    """Close the log handlers."""
    for _, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.PlaceHolder):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)


def create_files(dir_path: Path, names: Iterable[str]) -> List[Path]:
    """Create empty files inside dir_path, making parent directories as needed."""
    paths = []
    for name in names:
        path = Path(dir_path, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
        paths.append(path)
    return paths


def remaining_files(dir_path: Path) -> List[str]:
    """Sorted base names of the regular files directly inside dir_path."""
    return sorted(p.name for p in Path(dir_path).iterdir() if p.is_file())


def capture_console() -> Console:
    """Console writing to an in-memory buffer, read back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=200)
