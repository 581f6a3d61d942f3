# SPDX-FileCopyrightText: <text>Copyright 2024-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import io
import logging
import unittest
from unittest.mock import patch

from log_cleaner.core.utils.logging import (
    add_stdout_handler,
    logging_config,
    set_log_level,
)
from tests.unit.utils.utils import clear_loggers


class TestLogging(unittest.TestCase):
    """Unit tests for functions in logging.py file."""

    def tearDown(self):
        """Close and remove handlers from loggers."""
        clear_loggers()

    def test_set_log_level(self):
        """Test set_log_level function."""
        # Create logger.
        logger_name = "test_logger"
        logger = logging.getLogger(logger_name)

        # Only second message should be printed, as logging is set to ERROR.
        with self.assertLogs(logger) as al:
            set_log_level(logger_name, logging.ERROR)
            logger.info("First message")
            logger.error("Second message")
            logger.info("Third message")
        self.assertEqual(al.output, ["ERROR:test_logger:Second message"])

    def test_add_stdout_handler(self):
        """Test records are written to stdout with the level prefix."""
        logger_name = "test_stdout_logger"
        logger = logging.getLogger(logger_name)
        set_log_level(logger_name, logging.INFO)

        stdout = io.StringIO()
        with patch("sys.stdout", stdout):
            add_stdout_handler(logger_name)
        logger.warning("Could not remove file")

        self.assertEqual(stdout.getvalue(), "[WARNING] Could not remove file\n")

    def test_stdout_handler_added_once(self):
        """Test repeated configuration does not duplicate output."""
        logger_name = "test_repeat_logger"
        add_stdout_handler(logger_name)
        add_stdout_handler(logger_name)

        self.assertEqual(len(logging.getLogger(logger_name).handlers), 1)


class TestLoggingConfig(unittest.TestCase):
    """Unit tests for the package logging setup."""

    def tearDown(self):
        """Close and remove handlers from loggers."""
        clear_loggers()
        logging.getLogger("log_cleaner").propagate = True
        logging.getLogger("log_cleaner").setLevel(logging.NOTSET)

    def test_logging_config(self):
        """Test the package logger is configured and does not propagate."""
        logging_config("log_cleaner", logging.DEBUG)
        root_logger = logging.getLogger("log_cleaner")

        self.assertEqual(root_logger.level, logging.DEBUG)
        self.assertFalse(root_logger.propagate)
        self.assertEqual(len(root_logger.handlers), 1)

    def test_nested_module_uses_package_level(self):
        """Test module loggers pick up the package level through __name__."""
        logging_config("log_cleaner", logging.ERROR)
        module_logger = logging.getLogger("log_cleaner.core.cleaner")

        self.assertFalse(module_logger.isEnabledFor(logging.WARNING))
        self.assertTrue(module_logger.isEnabledFor(logging.ERROR))


if __name__ == "__main__":
    unittest.main()
