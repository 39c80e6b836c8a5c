#!/usr/bin/env python3
"""Tests for logging setup."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from gist_uploader.logging_utils import (
    TqdmConsoleHandler,
    add_file_logging,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for console logging setup."""

    def test_console_only(self, restore_root_logger):
        """Only a console handler is installed."""
        setup_logging()
        root = logging.getLogger()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], TqdmConsoleHandler)
        assert root.handlers[0].level == logging.INFO

    def test_verbose(self, restore_root_logger):
        """Verbose enables debug output."""
        setup_logging(verbose=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert root.handlers[0].level == logging.DEBUG

    def test_repeat_setup_does_not_duplicate(self, restore_root_logger):
        """Calling twice replaces handlers instead of adding more."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_console_output(self, restore_root_logger, capsys):
        """Messages go to stdout without decoration."""
        setup_logging()
        get_logger("gist_uploader.test").info("hello console")
        get_logger("gist_uploader.test").debug("hidden")

        out = capsys.readouterr().out
        assert "hello console\n" in out
        assert "hidden" not in out


class TestAddFileLogging:
    """Tests for the rotating file log."""

    def test_file_handler_added(self, tmp_path, restore_root_logger):
        """Should log to a rotating file next to the console."""
        setup_logging()
        add_file_logging(str(tmp_path), log_basename="test")
        root = logging.getLogger()

        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "test_0.log")
        assert len(root.handlers) == 2

        get_logger("gist_uploader.test").debug("written to file")
        file_handlers[0].flush()
        assert "DEBUG - written to file" in (tmp_path / "test_0.log").read_text()

    def test_console_level_kept(self, tmp_path, restore_root_logger, capsys):
        """Debug lines reach the file but not the console."""
        setup_logging()
        add_file_logging(str(tmp_path))

        get_logger("gist_uploader.test").debug("file only")

        assert "file only" not in capsys.readouterr().out
        assert (tmp_path / "gist_0.log").exists()
