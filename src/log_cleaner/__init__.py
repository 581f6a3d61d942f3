# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
from typing import TYPE_CHECKING

__version__ = "0.1.0"
# pylint: disable=import-outside-toplevel

# noinspection PyUnresolvedReferences
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
    "__version__",
]


if TYPE_CHECKING:
    from log_cleaner.api import (
        CleanerConfig,
        clean_logs,
        exit_code_for,
        DirectoryAccessError,
        ExitCode,
        FileDeletionError,
        LogCleaner,
        LogCleanerError,
        logging_config,
        PathResolutionError,
        PATTERNS,
    )
else:

    def __getattr__(attr):
        # Defer importing rich and pydantic until something is actually used
        if attr in __all__ and attr != "__version__":
            from log_cleaner import api

            return getattr(api, attr)

        raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")


def __dir__():
    return list(__all__)
