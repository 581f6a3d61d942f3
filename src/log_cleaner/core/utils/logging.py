# SPDX-FileCopyrightText: <text>Copyright 2024-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import logging
import sys


def logging_config(
    logger_name: str = "log_cleaner",
    log_level: int = logging.INFO,
) -> None:
    """
    Configure log_cleaner package logging to the console.

     Args:
        logger_name (str): Root logger name (e.g., 'log_cleaner'). Defaults to 'log_cleaner'.
        log_level (int): Logging level (e.g logging.INFO, logging.ERROR). Defaults to logging.INFO.

     Example:
        >>> logging_config("log_cleaner", logging.INFO)
    """
    # The root name is used to allow nested modules to pick up the same logger using __name__.
    setup_logging(logger_name, log_level)
    logging.getLogger(logger_name).propagate = False


def setup_logging(logger_name, log_level=logging.INFO, stdout: bool = True):
    """
    Create logger, if it doesn't exist and set log level.
    If the module name is used as logger_name, then nested modules can access via __name__.
    """
    set_log_level(logger_name, log_level)

    if stdout:
        add_stdout_handler(logger_name)


def set_log_level(logger_name, log_level=logging.INFO):
    """
    Retrieve global logger and set level,
    getLogger will create a logger if it doesn't exist.
    """
    global_logger = logging.getLogger(logger_name)
    global_logger.setLevel(log_level)


def add_stdout_handler(logger_name):
    """Add logging to stdout, at most once per logger"""
    global_logger = logging.getLogger(logger_name)

    for handler in global_logger.handlers:
        if getattr(handler, "log_cleaner_stdout", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    handler.log_cleaner_stdout = True
    global_logger.addHandler(handler)
