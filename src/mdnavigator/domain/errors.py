from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure the navigator can observe is recovered locally by the
controller that owns the affected piece of state. These exceptions carry
enough context for that recovery and for diagnostic logging.
"""

from typing import Optional


class NavigatorError(Exception):
    """Base class for recoverable client-side failures."""


class FetchError(NavigatorError):
    """
    A directory listing could not be obtained.

    Raised for non-2xx responses, transport exceptions and payloads that do
    not decode into a listing.

    Attributes:
        path: Server-side directory path that was requested.
        status_code: HTTP status when a response was received.
    """

    def __init__(self, path: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class ShutdownError(NavigatorError):
    """The shutdown request did not reach the server."""
