#!/usr/bin/env python3
"""
Gist Uploader - Command Line Interface

A tool for uploading local files to GitHub as gists, one gist per file.
"""

import argparse
import sys

from . import __version__
from .gist_client import GistClient
from .logging_utils import setup_logging, add_file_logging, get_logger
from .config import config, build_options, GITHUB_API_TOKEN_ENV, KB
from .commands import handle_upload_command
from .exceptions import ConfigurationError, NoFilesToUploadError

# Get logger for this module
logger = get_logger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    max_kb = config.get("max_file_size_kb")
    parser = argparse.ArgumentParser(
        prog="gist-uploader",
        description="Upload files to GitHub as gists, one gist per file",
        epilog=f"Requires a GitHub token in the {GITHUB_API_TOKEN_ENV} environment variable. Files larger than {max_kb}KB are skipped unless -allow-large-files is given.",
    )

    parser.add_argument("files", nargs="*", help="Path to file(s) you want to upload")
    parser.add_argument(
        "-upload",
        "--upload",
        dest="upload",
        action="store_true",
        help="Upload files",
    )
    parser.add_argument(
        "-dryrun",
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Print files that would have been uploaded",
    )
    parser.add_argument(
        "-allow-large-files",
        "--allow-large-files",
        dest="allow_large_files",
        action="store_true",
        help=f"Override max upload size {max_kb}KB",
    )
    parser.add_argument(
        "-public",
        "--public",
        dest="public",
        action="store_true",
        help="Create public gists (default: secret)",
    )
    parser.add_argument(
        "--description",
        default="",
        help="Description for the created gists",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress progress and summary output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _initialize_file_logging() -> None:
    """Attach the rotating file log, or stay console only if the log folder can't be created."""
    try:
        config.ensure_log_folder()
    except OSError as e:
        logger.debug(f"Log folder unavailable, logging to console only: {e}")
        return

    add_file_logging(
        config.get("log_folder"),
        log_basename=config.get("log_basename"),
        max_bytes=config.get("max_log_size_mb", 5) * 1024 * 1024,
        backup_count=config.get("max_log_backups", 10),
    )


def _fatal(message: str) -> None:
    logger.error(f"Error: {message}")
    sys.exit(1)


def main():
    """Main function to handle command line arguments and run the upload."""
    parser = _create_argument_parser()
    args = parser.parse_args()

    setup_logging(verbose=args.verbose)

    try:
        options = build_options(args)
    except ConfigurationError as e:
        if e.show_usage:
            parser.print_usage()
        _fatal(str(e))

    _initialize_file_logging()

    client = GistClient(
        options.token,
        base_url=config.get("api_url"),
        timeout=config.get("timeout"),
    )
    logger.debug(
        f"Ceiling {options.max_file_size // KB}KB, allow large files: {options.allow_large_files}"
    )

    try:
        handle_upload_command(client, options, args.files)
    except NoFilesToUploadError as e:
        _fatal(str(e))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
