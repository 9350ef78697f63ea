from __future__ import annotations

"""
Network Communication Infrastructure.

HTTP access to the Markdown viewer server. Everything outside this package
talks to the server through ViewerApiClient.
"""

from mdnavigator.infra.network.api_client import ViewerApiClient
from mdnavigator.infra.network.common import (
    USER_AGENT,
    build_url,
    encode_path_param,
    resolve_view_url,
)

__all__ = [
    "ViewerApiClient",
    "USER_AGENT",
    "build_url",
    "encode_path_param",
    "resolve_view_url",
]
