#!/usr/bin/env python3
"""
Exception types raised by the gist uploader.
"""

from typing import Optional


class GistUploaderError(Exception):
    """Base class for all gist uploader errors."""


class ConfigurationError(GistUploaderError):
    """Invalid flags or environment. Always fatal."""

    def __init__(self, message: str, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class NoFilesToUploadError(GistUploaderError):
    """Raised when selection leaves nothing to upload."""

    def __init__(self, message: str = "no files to upload"):
        super().__init__(message)


class GistCreationError(GistUploaderError):
    """The remote API refused or failed to create a gist."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UploadCancelledError(GistUploaderError):
    """Upload skipped because the run was cancelled."""
