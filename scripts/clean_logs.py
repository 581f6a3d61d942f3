# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import sys

from rich.console import Console
from rich.markup import escape

from log_cleaner.api import (
    clean_logs,
    DirectoryAccessError,
    exit_code_for,
    logging_config,
    PathResolutionError,
)
from log_cleaner.core.utils.general_utils import resolve_root_dir


def main():
    """Entry point for cleaning script. Cleans the parent of scripts/"""
    logging_config()

    try:
        clean_logs(resolve_root_dir(__file__))
    except (PathResolutionError, DirectoryAccessError) as e:
        Console(stderr=True).print(
            f"[bold red]Error:[/bold red] {escape(str(e))}", emoji=False, soft_wrap=True
        )
        sys.exit(exit_code_for(e).value)


if __name__ == "__main__":
    main()
