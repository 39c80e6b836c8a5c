#!/usr/bin/env python3
"""
Configuration management for the gist uploader.

Process-wide settings live in a read-only singleton built from defaults and
environment overrides. Per-run options are an immutable UploadOptions value
built from the parsed command line.
"""

import os
from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional

from .exceptions import ConfigurationError

# GitHub API token environment variable name
GITHUB_API_TOKEN_ENV = "GITHUB_API_TOKEN"

KB = 1024


class Config:
    _instance: Optional["Config"] = None
    _initialized = False

    # Default configuration settings
    DEFAULT_CONFIG = {
        "log_folder": os.path.join(os.path.expanduser("~"), ".gist-uploader", "logs"),
        "log_basename": "gist",  # Base name for log files
        "max_log_size_mb": 5,
        "max_log_backups": 10,
        "max_file_size_kb": 50,
        "api_url": "https://api.github.com",
        "timeout": 30,  # seconds
    }

    # Environment variables that override a default
    ENV_OVERRIDES = {
        "log_folder": "GIST_UPLOADER_LOG_FOLDER",
        "max_file_size_kb": "GIST_UPLOADER_MAX_FILE_SIZE_KB",
        "api_url": "GIST_UPLOADER_API_URL",
        "timeout": "GIST_UPLOADER_TIMEOUT",
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._load_config()
            self._initialized = True

    def _load_config(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        Build the configuration from defaults and environment overrides.
        Nothing is written to disk.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            Dict: Configuration settings
        """
        if environ is None:
            environ = os.environ

        config = self.DEFAULT_CONFIG.copy()
        for key, env_name in self.ENV_OVERRIDES.items():
            raw = environ.get(env_name)
            if not raw:
                continue

            default = self.DEFAULT_CONFIG[key]
            if isinstance(default, int):
                try:
                    value = int(raw)
                except ValueError:
                    # Keep the default on bad input
                    continue
                if value <= 0:
                    continue
                config[key] = value
            else:
                config[key] = raw

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default if not found
        """
        return self._config.get(key, default)

    def ensure_log_folder(self) -> None:
        """Create the log folder if it doesn't exist."""
        log_folder = self._config["log_folder"]
        if log_folder and not os.path.exists(log_folder):
            os.makedirs(log_folder, exist_ok=True)


@dataclass(frozen=True)
class UploadOptions:
    """Options for a single run, fixed once the command line is parsed."""

    upload: bool
    dry_run: bool
    token: str
    allow_large_files: bool = False
    max_file_size: int = 50 * KB
    public: bool = False
    description: str = ""
    quiet: bool = False


def build_options(args, environ: Optional[Mapping[str, str]] = None) -> UploadOptions:
    """
    Validate parsed arguments and the environment into UploadOptions.

    Args:
        args: Parsed command line arguments
        environ: Environment mapping (default: os.environ)

    Returns:
        UploadOptions for this run

    Raises:
        ConfigurationError: If the token is missing or the flags conflict
    """
    if environ is None:
        environ = os.environ

    token = environ.get(GITHUB_API_TOKEN_ENV, "")
    if not token:
        raise ConfigurationError(
            f"Environment variable required but missing: {GITHUB_API_TOKEN_ENV}"
        )

    if not args.upload and not args.dry_run:
        raise ConfigurationError("Nothing to do", show_usage=True)

    if args.upload and args.dry_run:
        raise ConfigurationError("Can't upload and dryrun at the same time")

    if args.upload and not args.files:
        raise ConfigurationError("Selected -upload with no files")

    return UploadOptions(
        upload=args.upload,
        dry_run=args.dry_run,
        token=token,
        allow_large_files=args.allow_large_files,
        max_file_size=config.get("max_file_size_kb") * KB,
        public=args.public,
        description=args.description or "",
        quiet=args.quiet,
    )


# Create a single instance of the Config class
config = Config()
