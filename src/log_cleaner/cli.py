# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import logging
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Column, Table

from log_cleaner.core.utils.types import PATTERNS

# pylint: disable=import-outside-toplevel

# Root module name, nested modules log through it using __name__.
ROOT_MODULE_NAME = "log_cleaner"

# Initialise CLI app
app = typer.Typer(pretty_exceptions_enable=False, add_completion=False)


class AppLogLevel(str, Enum):
    """Log levels"""

    INFO = "info"
    DEBUG = "debug"
    QUIET = "quiet"


def to_logging_level(log_level: AppLogLevel) -> int:
    """Map a CLI log level onto a logging module level"""
    if log_level == AppLogLevel.DEBUG:
        return logging.DEBUG
    if log_level == AppLogLevel.QUIET:
        return logging.ERROR
    return logging.INFO


def version_callback(value: bool):
    """Get current version"""

    if value:
        from importlib.metadata import version

        __version__ = version("log-cleaner")

        print(f"Version: {__version__}")
        raise typer.Exit()


@app.command(name="patterns")
def patterns_cli():
    """List the filename patterns removed by a cleanup"""
    table = Table(
        Column(header="#", justify="right", style="dim"),
        Column(header="Pattern", style="green", no_wrap=True),
    )
    for index, pattern in enumerate(PATTERNS, start=1):
        table.add_row(str(index), pattern)

    Console().print(table, highlight=False)


def run_cleanup() -> int:
    """Clean the default root directory, converting fatal errors to exit codes"""
    from log_cleaner.api import (
        clean_logs,
        DirectoryAccessError,
        exit_code_for,
        PathResolutionError,
    )

    try:
        return clean_logs()
    except (PathResolutionError, DirectoryAccessError) as e:
        Console(stderr=True).print(
            f"[bold red]Error:[/bold red] {escape(str(e))}", emoji=False, soft_wrap=True
        )
        raise typer.Exit(code=exit_code_for(e).value) from e


@app.callback(
    invoke_without_command=True,
    epilog="Run without a command to clean the repository root",
)
def cli_root(
    ctx: typer.Context,
    log_level: Annotated[
        AppLogLevel, typer.Option(help="Diagnostic logging verbosity")
    ] = AppLogLevel.INFO,
    version: Annotated[  # pylint: disable=unused-argument
        Optional[bool],
        typer.Option(
            "--version",
            help="Show the project version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
):
    """Remove development log files from the repository root"""

    if ctx.resilient_parsing:
        return

    from log_cleaner.core.utils.logging import logging_config

    logging_config(ROOT_MODULE_NAME, to_logging_level(log_level))

    if ctx.invoked_subcommand is not None:
        return

    run_cleanup()


def main():
    """Invoke typer CLI"""
    app()


if __name__ == "__main__":
    main()
