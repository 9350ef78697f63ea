from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A scripted stand-in for the viewer API client.
3. Task runners that let tests decide when a request completes.
"""

import os
import sys
from typing import Any, Callable, Dict, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mdnavigator.core.services.event_bus import EventBus  # noqa: E402
from mdnavigator.core.services.tasks import run_inline  # noqa: E402
from mdnavigator.domain.errors import FetchError, ShutdownError  # noqa: E402
from mdnavigator.domain.tree_models import ListingEntry  # noqa: E402
from mdnavigator.infra.network.common import resolve_view_url  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FakeViewerClient:
    """
    Scripted replacement for ViewerApiClient.

    ``listings`` maps a directory path to a list of entry dicts, None (null
    body) or an exception instance to raise. Unknown paths raise a 404
    FetchError, like the server does for a missing directory.
    """

    def __init__(self, listings: Optional[Dict[str, Any]] = None, shutdown_error: Optional[Exception] = None):
        self.base_url = "http://127.0.0.1:8080"
        self.listings: Dict[str, Any] = dict(listings or {})
        self.shutdown_error = shutdown_error
        self.list_calls: List[str] = []
        self.shutdown_calls = 0

    def list_directory(self, path: str) -> Optional[List[ListingEntry]]:
        self.list_calls.append(path)
        if path not in self.listings:
            raise FetchError(path, "Failed to fetch", status_code=404)

        outcome = self.listings[path]
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is None:
            return None
        return [ListingEntry.from_dict(item) for item in outcome]

    def shutdown(self) -> str:
        self.shutdown_calls += 1
        if self.shutdown_error is not None:
            raise self.shutdown_error
        return "Server is shutting down..."

    def view_url(self, target: Optional[str]) -> str:
        return resolve_view_url(self.base_url, target)


class DeferredRunner:
    """Task runner that holds requests until the test completes them."""

    def __init__(self) -> None:
        self.pending: List[Any] = []

    def __call__(self, task: Callable[[], Any], on_complete: Callable[[Any], None]) -> None:
        self.pending.append((task, on_complete))

    def complete(self, index: int = 0) -> None:
        task, on_complete = self.pending.pop(index)
        run_inline(task, on_complete)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_listings() -> Dict[str, Any]:
    """
    Return a small server tree.

    Structure:
    /
      a.txt
      sub/          (empty)
      docs/
        guide.md
        api/
          ref.md
    """
    return {
        "/": [
            {"name": "a.txt", "path": "/a.txt", "is_dir": False},
            {"name": "sub", "path": "/sub", "is_dir": True},
            {"name": "docs", "path": "/docs", "is_dir": True},
        ],
        "/sub": [],
        "/docs": [
            {"name": "guide.md", "path": "/docs/guide.md", "is_dir": False},
            {"name": "api", "path": "/docs/api", "is_dir": True},
        ],
        "/docs/api": [
            {"name": "ref.md", "path": "/docs/api/ref.md", "is_dir": False},
        ],
    }


@pytest.fixture
def fake_client(sample_listings: Dict[str, Any]) -> FakeViewerClient:
    return FakeViewerClient(sample_listings)


@pytest.fixture
def failing_shutdown_client() -> FakeViewerClient:
    return FakeViewerClient({}, shutdown_error=ShutdownError("Connection refused"))


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def deferred_runner() -> DeferredRunner:
    return DeferredRunner()


@pytest.fixture
def make_client() -> Callable[..., FakeViewerClient]:
    """Factory for clients with custom listings or shutdown behavior."""
    return FakeViewerClient
