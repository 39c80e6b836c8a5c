#!/usr/bin/env python3
"""
Selection Service Module

Turns command line paths into the list of files eligible for upload.
"""

import logging
from typing import List

from ..config import UploadOptions
from ..exceptions import NoFilesToUploadError
from ..local_file import LocalFile
from ..utils import format_kb

logger = logging.getLogger("gist_uploader")


class SelectionService:
    """Service for validating files before upload."""

    def __init__(self, options: UploadOptions):
        """
        Initialize the selection service.

        Args:
            options: Options for this run
        """
        self.options = options

    def select(self, paths: List[str]) -> List[LocalFile]:
        """
        Filter paths down to files that exist and fit under the size ceiling.

        Excluded files are logged as warnings and skipped.

        Args:
            paths: File paths as given on the command line

        Returns:
            Files to upload, in input order

        Raises:
            NoFilesToUploadError: If no file survives selection
        """
        selected = []
        for path in paths:
            local_file = LocalFile(path, self.options.dry_run)
            if self._is_eligible(local_file):
                selected.append(local_file)

        if not selected:
            raise NoFilesToUploadError()

        logger.debug(f"Selected {len(selected)} of {len(paths)} files")
        return selected

    def _is_eligible(self, local_file: LocalFile) -> bool:
        path = local_file.file_path

        if not local_file.exists():
            logger.warning(f"Warning: {path} not found, excluding from upload")
            return False

        if not local_file.is_file():
            logger.warning(f"Warning: {path} is not a regular file, excluding from upload")
            return False

        if self.options.allow_large_files:
            return True

        size = local_file.size()
        if size is None:
            logger.warning(f"Warning: could not read size of {path}, excluding from upload")
            return False

        ceiling = self.options.max_file_size
        if size > ceiling:
            logger.warning(
                f"Warning: excluding {path} from upload. "
                f"File exceeds {format_kb(ceiling)}: {size} ({format_kb(size)})"
            )
            return False

        return True
