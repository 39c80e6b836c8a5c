#!/usr/bin/env python3
"""
Local File Module

A candidate file on disk and the gist it turns into.
"""

import os
from typing import Any, Dict, Optional

from .logging_utils import get_logger
from .utils import format_size

logger = get_logger(__name__)

# Upload status values
PENDING = "pending"
UPLOADING = "uploading"
UPLOADED = "uploaded"
FAILED = "failed"
DRY_RUN = "dry-run"


class LocalFile:
    """
    One local file considered for upload.

    The existence, size and name accessors never raise; they report failure
    through their return value so callers can skip a file and move on.
    """

    def __init__(self, file_path: str, dry_run: bool = False):
        self.file_path = file_path
        self.dry_run = dry_run
        self.status = PENDING

    def __repr__(self) -> str:
        return f"LocalFile({self.file_path!r}, dry_run={self.dry_run})"

    def exists(self) -> bool:
        """Return True if anything exists at the path."""
        try:
            os.stat(self.file_path)
        except (OSError, ValueError) as e:
            logger.debug(f"stat failed for {self.file_path}: {e}")
            return False
        return True

    def is_file(self) -> bool:
        """Return True if the path is a regular file."""
        try:
            return os.path.isfile(self.file_path)
        except ValueError:
            return False

    def size(self) -> Optional[int]:
        """
        Get the file size in bytes.

        Returns:
            Size in bytes, or None if the file cannot be stat'ed
        """
        try:
            return os.path.getsize(self.file_path)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not read size of {self.file_path}: {e}")
            return None

    def name(self) -> Optional[str]:
        """
        Get the display name used for the gist file.

        Returns:
            Base name of the path, or None if the path has no usable name
        """
        name = os.path.basename(self.file_path)
        if not name or name in (".", ".."):
            return None
        return name

    def read_content(self) -> str:
        """
        Read the file as text. Undecodable bytes are replaced.

        Raises:
            OSError: If the file cannot be read
        """
        with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def describe(self) -> Dict[str, Any]:
        """Row describing this file for dry-run output."""
        size = self.size()
        return {
            "name": self.name() or "",
            "path": self.file_path,
            "size": format_size(size) if size is not None else "Unknown",
        }

    def upload(self, client, public: bool = False, description: str = "") -> Optional[str]:
        """
        Create a gist holding this file.

        Args:
            client: GistClient used for the API call
            public: Whether the gist is public
            description: Gist description

        Returns:
            URL of the new gist, or None on a dry run

        Raises:
            ValueError: If the path has no usable file name
            OSError: If the file cannot be read
            GistCreationError: If the API call fails
        """
        if self.dry_run:
            self.status = DRY_RUN
            return None

        name = self.name()
        if name is None:
            self.status = FAILED
            raise ValueError(f"Invalid file name: {self.file_path}")

        self.status = UPLOADING
        try:
            content = self.read_content()
            gist = client.create_gist(
                {name: content}, public=public, description=description
            )
        except Exception:
            self.status = FAILED
            raise

        self.status = UPLOADED
        return gist["html_url"]
