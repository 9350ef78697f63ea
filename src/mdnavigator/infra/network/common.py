from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from mdnavigator.domain import constants as const

USER_AGENT = f"mdnavigator-client/{const.CURRENT_CONFIG_VERSION}"


def build_url(base_url: str, endpoint: str) -> str:
    """Join the server root and an absolute endpoint path."""
    return base_url.rstrip("/") + endpoint


def encode_path_param(path: str) -> str:
    """Percent-encode a path for a query string, slashes included."""
    return quote(path, safe="-_.!~*'()")


def resolve_view_url(base_url: str, target: Optional[str]) -> str:
    """Absolute URL of a content frame target, or empty when unset."""
    if not target:
        return ""
    return build_url(base_url, target)
