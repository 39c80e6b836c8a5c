#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import logging
import os
import sys
import tempfile
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gist_uploader.config import UploadOptions


@pytest.fixture
def temp_file():
    """Create a small temporary file for upload testing."""
    fd, path = tempfile.mkstemp(suffix=".txt")
    os.write(fd, b"Test file content for upload testing")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_large_file():
    """Create a temporary file above the default 50KB ceiling."""
    fd, path = tempfile.mkstemp(suffix=".bin")
    os.write(fd, b"x" * 1024 * 100)  # 100KB
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def upload_options():
    """Options for a real upload run."""
    return UploadOptions(upload=True, dry_run=False, token="test_token", quiet=True)


@pytest.fixture
def dry_run_options():
    """Options for a dry run."""
    return UploadOptions(upload=False, dry_run=True, token="test_token", quiet=True)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
