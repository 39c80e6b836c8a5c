#!/usr/bin/env python3
"""
Command Handlers Module

Contains handler functions for each CLI command.
Separates command routing from business logic.
"""

import logging
import threading
from typing import List, Optional

from .config import UploadOptions
from .gist_client import GistClient
from .services import SelectionService, UploadService, UploadOutcome

logger = logging.getLogger("gist_uploader")


def handle_upload_command(
    client: GistClient,
    options: UploadOptions,
    files: List[str],
    cancel_event: Optional[threading.Event] = None,
) -> List[UploadOutcome]:
    """
    Handle the upload and dry-run commands.

    Args:
        client: Gist API client instance
        options: Options for this run
        files: File paths from the command line
        cancel_event: Optional event used to cancel pending uploads

    Returns:
        Outcomes of the uploads (empty on a dry run)

    Raises:
        NoFilesToUploadError: If no file passes validation
    """
    if options.dry_run:
        logger.info("Doing dry run, nothing will be uploaded")

    selection_service = SelectionService(options)
    upload_service = UploadService(client, options)

    files_to_upload = selection_service.select(files)
    return upload_service.dispatch(files_to_upload, cancel_event)
