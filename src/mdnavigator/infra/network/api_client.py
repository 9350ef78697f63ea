from __future__ import annotations

"""
Markdown Viewer API Client.

Thin HTTP wrapper around the two server endpoints the navigator consumes:
the per-directory listing and the shutdown signal. Failures are translated
into the domain error taxonomy so controllers never see transport details.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from mdnavigator.domain import constants as const
from mdnavigator.domain.errors import FetchError, ShutdownError
from mdnavigator.domain.tree_models import ListingEntry
from mdnavigator.infra.network.common import (
    USER_AGENT,
    build_url,
    encode_path_param,
    resolve_view_url,
)

logger = logging.getLogger(__name__)


class ViewerApiClient:
    """
    Client for a running Markdown viewer server.

    Args:
        base_url: Server root, e.g. ``http://127.0.0.1:8080``.
        timeout: Per-request timeout in seconds; None waits indefinitely.
        shutdown_http_error_is_failure: Treat a non-2xx shutdown response as
            a failure instead of a delivered signal.
    """

    def __init__(
            self,
            base_url: str = const.DEFAULT_BASE_URL,
            timeout: Optional[float] = None,
            shutdown_http_error_is_failure: bool = False,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.shutdown_http_error_is_failure = shutdown_http_error_is_failure
        self._headers = {"User-Agent": USER_AGENT}

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ViewerApiClient":
        return cls(
            base_url=config.get("base_url") or const.DEFAULT_BASE_URL,
            timeout=config.get("request_timeout"),
            shutdown_http_error_is_failure=bool(config.get("shutdown_http_error_is_failure", False)),
        )

    # -------------------------------------------------------------------------
    # URL HELPERS
    # -------------------------------------------------------------------------

    def list_url(self, path: str) -> str:
        return f"{build_url(self.base_url, const.LIST_ENDPOINT)}?path={encode_path_param(path)}"

    def view_url(self, target: Optional[str]) -> str:
        return resolve_view_url(self.base_url, target)

    # -------------------------------------------------------------------------
    # ENDPOINTS
    # -------------------------------------------------------------------------

    def list_directory(self, path: str) -> Optional[List[ListingEntry]]:
        """
        Fetch the immediate children of a directory.

        Args:
            path: Absolute server-side directory path.

        Returns:
            Optional[List[ListingEntry]]: Entries in server order; None when
            the server answered with a JSON null.

        Raises:
            FetchError: Non-2xx status, transport failure or malformed body.
        """
        url = self.list_url(path)
        logger.debug(f"Listing request: GET {url}")

        try:
            response = requests.get(url, headers=self._headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Listing transport failure for '{path}': {e}")
            raise FetchError(path, f"Request failed: {e}") from e

        if not _is_success(response.status_code):
            logger.error(f"Listing for '{path}' rejected with HTTP {response.status_code}")
            raise FetchError(path, "Failed to fetch", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Listing for '{path}' is not valid JSON: {e}")
            raise FetchError(path, "Invalid listing payload", status_code=response.status_code) from e

        if payload is None:
            return None
        if not isinstance(payload, list):
            raise FetchError(
                path,
                f"Listing must be an array, got {type(payload).__name__}",
                status_code=response.status_code,
            )

        try:
            return [ListingEntry.from_dict(item) for item in payload]
        except ValueError as e:
            logger.error(f"Listing for '{path}' contains a malformed entry: {e}")
            raise FetchError(path, str(e), status_code=response.status_code) from e

    def shutdown(self) -> str:
        """
        Ask the server to terminate.

        Returns:
            str: Response body sent by the server.

        Raises:
            ShutdownError: Transport failure, or a non-2xx status when
                ``shutdown_http_error_is_failure`` is enabled.
        """
        url = build_url(self.base_url, const.SHUTDOWN_ENDPOINT)
        logger.info(f"Sending shutdown signal: POST {url}")

        try:
            response = requests.post(url, headers=self._headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Shutdown signal could not be delivered: {e}")
            raise ShutdownError(str(e)) from e

        if not _is_success(response.status_code):
            if self.shutdown_http_error_is_failure:
                logger.error(f"Shutdown rejected with HTTP {response.status_code}")
                raise ShutdownError(f"HTTP {response.status_code}")
            logger.warning(f"Shutdown answered with HTTP {response.status_code}; treating as delivered.")

        return response.text


def _is_success(status_code: int) -> bool:
    """Only 2xx counts; redirects that requests did not follow do not."""
    return 200 <= status_code < 300
