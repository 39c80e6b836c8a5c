#!/usr/bin/env python3
"""
GitHub Gist API client.
"""

import requests
from requests_toolbelt.sessions import BaseUrlSession
from requests_toolbelt.utils.user_agent import user_agent
from typing import Dict, Any, Optional

from . import __version__
from .exceptions import GistCreationError
from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30  # seconds
API_VERSION = "2022-11-28"


class GistClient:
    """GitHub REST client for creating gists with a static token."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the gist client.

        Args:
            token: GitHub API token sent as a bearer token
            base_url: API root (default: https://api.github.com)
            timeout: Timeout in seconds for API calls
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/") + "/"
        self.timeout = timeout
        self.session = BaseUrlSession(base_url=self.base_url)
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": user_agent("gist-uploader", __version__),
            }
        )

    def create_gist(
        self,
        files: Dict[str, str],
        public: bool = False,
        description: str = "",
    ) -> Dict[str, Any]:
        """
        Create a gist.

        Args:
            files: Mapping of gist file name to text content
            public: Whether the gist is public (secret otherwise)
            description: Gist description

        Returns:
            Dict with the created gist, including 'html_url'

        Raises:
            GistCreationError: If the request fails or GitHub rejects it
        """
        payload = {
            "description": description,
            "public": public,
            "files": {name: {"content": content} for name, content in files.items()},
        }

        try:
            response = self.session.post("gists", json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            try:
                error_message = e.response.json().get("message", str(e))
            except (ValueError, AttributeError):
                error_message = str(e)
            logger.debug(f"Gist creation rejected ({status_code}): {error_message}")
            raise GistCreationError(
                f"HTTP {status_code}: {error_message}", status_code=status_code
            ) from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"Gist creation request failed: {e}")
            raise GistCreationError(f"Request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise GistCreationError(
                "Invalid JSON in response", status_code=response.status_code
            ) from e

        if not data.get("html_url"):
            raise GistCreationError(
                "Response did not include a gist URL", status_code=response.status_code
            )

        logger.debug(f"Created gist {data.get('id')}: {data['html_url']}")
        return data
