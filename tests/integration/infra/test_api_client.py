from __future__ import annotations

"""
Integration tests for the Viewer API Client.

Utilizes mocking to verify listing and shutdown requests, URL encoding
and the translation of transport failures into domain errors without
making real network calls.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from mdnavigator.domain.errors import FetchError, ShutdownError
from mdnavigator.domain.tree_models import ListingEntry
from mdnavigator.infra.network import ViewerApiClient, encode_path_param


def _response(status: int = 200, payload=None, text: str = "") -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status
    mock_response.json.return_value = payload
    mock_response.text = text
    return mock_response


# -----------------------------------------------------------------------------
# LISTING TESTS
# -----------------------------------------------------------------------------

def test_list_directory_success() -> None:
    """TC-01: Entries are decoded in server order."""
    payload = [
        {"name": "a.txt", "path": "/a.txt", "is_dir": False},
        {"name": "sub", "path": "/sub", "is_dir": True},
    ]
    client = ViewerApiClient("http://127.0.0.1:8080")

    with patch("requests.get", return_value=_response(payload=payload)) as mock_get:
        entries = client.list_directory("/")

    assert entries == [
        ListingEntry("a.txt", "/a.txt", False),
        ListingEntry("sub", "/sub", True),
    ]
    args, kwargs = mock_get.call_args
    assert args[0] == "http://127.0.0.1:8080/api/list?path=%2F"
    assert kwargs["timeout"] is None


def test_list_url_encodes_slashes() -> None:
    """TC-02: Scenario: expanding '/sub' requests path=%2Fsub."""
    client = ViewerApiClient("http://127.0.0.1:8080/")

    with patch("requests.get", return_value=_response(payload=[])) as mock_get:
        client.list_directory("/sub")

    assert mock_get.call_args[0][0] == "http://127.0.0.1:8080/api/list?path=%2Fsub"


def test_encode_path_param_matches_uri_component() -> None:
    assert encode_path_param("/my docs/ä&b") == "%2Fmy%20docs%2F%C3%A4%26b"
    assert encode_path_param("/a-b_c.d!~*'()") == "%2Fa-b_c.d!~*'()"


@pytest.mark.parametrize("payload", [None, []])
def test_list_directory_empty_bodies(payload) -> None:
    """TC-03: null passes through as None; [] as an empty list."""
    client = ViewerApiClient()

    with patch("requests.get", return_value=_response(payload=payload)):
        assert client.list_directory("/empty") == payload


def test_list_directory_http_error() -> None:
    """TC-04: Non-2xx responses raise FetchError with the status."""
    client = ViewerApiClient()

    with patch("requests.get", return_value=_response(status=404)):
        with pytest.raises(FetchError) as exc_info:
            client.list_directory("/missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.path == "/missing"
    assert str(exc_info.value) == "Failed to fetch"


@pytest.mark.parametrize("status", [300, 302, 304])
def test_list_directory_unfollowed_redirect_is_error(status) -> None:
    """Redirects that were not followed are not a listing."""
    client = ViewerApiClient()

    with patch("requests.get", return_value=_response(status=status, payload=[])):
        with pytest.raises(FetchError) as exc_info:
            client.list_directory("/moved")

    assert exc_info.value.status_code == status


def test_list_directory_transport_error() -> None:
    """TC-05: Connection failures raise FetchError."""
    client = ViewerApiClient(timeout=2.0)

    with patch("requests.get", side_effect=requests.exceptions.ConnectionError("refused")) as mock_get:
        with pytest.raises(FetchError) as exc_info:
            client.list_directory("/")

    assert exc_info.value.status_code is None
    assert mock_get.call_args[1]["timeout"] == 2.0


def test_list_directory_malformed_payloads() -> None:
    """TC-06: Invalid JSON, non-arrays and bad entries raise FetchError."""
    client = ViewerApiClient()

    bad_json = _response()
    bad_json.json.side_effect = ValueError("Expecting value")
    with patch("requests.get", return_value=bad_json):
        with pytest.raises(FetchError):
            client.list_directory("/")

    with patch("requests.get", return_value=_response(payload={"error": "x"})):
        with pytest.raises(FetchError):
            client.list_directory("/")

    with patch("requests.get", return_value=_response(payload=[{"name": "a"}])):
        with pytest.raises(FetchError):
            client.list_directory("/")


# -----------------------------------------------------------------------------
# SHUTDOWN TESTS
# -----------------------------------------------------------------------------

def test_shutdown_success() -> None:
    """TC-07: The signal is a POST to /api/shutdown."""
    client = ViewerApiClient("http://127.0.0.1:8080")

    with patch("requests.post", return_value=_response(text="Server is shutting down...")) as mock_post:
        body = client.shutdown()

    assert body == "Server is shutting down..."
    assert mock_post.call_args[0][0] == "http://127.0.0.1:8080/api/shutdown"


def test_shutdown_transport_error() -> None:
    """TC-08: Network failures raise ShutdownError."""
    client = ViewerApiClient()

    with patch("requests.post", side_effect=requests.exceptions.ConnectionError("refused")):
        with pytest.raises(ShutdownError):
            client.shutdown()


def test_shutdown_http_error_lenient_by_default() -> None:
    """TC-09: Any resolved response counts as delivered."""
    client = ViewerApiClient()

    with patch("requests.post", return_value=_response(status=405, text="Method not allowed")):
        assert client.shutdown() == "Method not allowed"


def test_shutdown_http_error_strict() -> None:
    """TC-10: Opt-in strict mode treats non-2xx as failure."""
    client = ViewerApiClient(shutdown_http_error_is_failure=True)

    with patch("requests.post", return_value=_response(status=500)):
        with pytest.raises(ShutdownError, match="HTTP 500"):
            client.shutdown()


def test_shutdown_redirect_strict_and_lenient() -> None:
    """A 302 is only a failure in strict mode."""
    strict = ViewerApiClient(shutdown_http_error_is_failure=True)
    lenient = ViewerApiClient()

    with patch("requests.post", return_value=_response(status=302, text="Found")):
        with pytest.raises(ShutdownError, match="HTTP 302"):
            strict.shutdown()
        assert lenient.shutdown() == "Found"


def test_from_config_and_view_url() -> None:
    client = ViewerApiClient.from_config({
        "base_url": "http://docs.local:9000",
        "request_timeout": 3.0,
        "shutdown_http_error_is_failure": True,
    })

    assert client.timeout == 3.0
    assert client.shutdown_http_error_is_failure is True
    assert client.view_url("/view/a.md") == "http://docs.local:9000/view/a.md"
    assert client.view_url(None) == ""
