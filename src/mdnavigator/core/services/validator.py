from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration coming from disk, the environment or the CLI into
strictly typed values before it reaches the API client or the controllers.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from mdnavigator.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Unknown keys are dropped; missing keys take their default. In lenient
    mode invalid values fall back to the default and a warning is recorded.

    Args:
        config: Raw configuration data.
        strict: Raise instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and
        warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("base_url", "root_path", "log_level"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("shutdown_http_error_is_failure", "open_in_browser"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["request_timeout"] = _as_timeout(merged.get("request_timeout"), warnings, strict)

    # Domain-specific normalization
    merged["base_url"] = _normalize_base_url(merged["base_url"], defaults["base_url"], warnings, strict)
    if not merged["root_path"].startswith("/"):
        warnings.append(f"Field 'root_path' made absolute: '/{merged['root_path']}'.")
        merged["root_path"] = "/" + merged["root_path"]
    merged["log_level"] = merged["log_level"].upper()

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_timeout(value: Any, warnings: List[str], strict: bool) -> Optional[float]:
    """Positive number of seconds, or None for no timeout."""
    if value is None:
        return None
    if isinstance(value, bool):
        msg = "Invalid field 'request_timeout': expected number, received bool."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Timeout disabled.")
        return None

    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("", "none", "off", "0"):
            return None
        try:
            value = float(s)
        except ValueError:
            msg = f"Invalid field 'request_timeout': '{value}' is not a number."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Timeout disabled.")
            return None

    if isinstance(value, (int, float)):
        if value <= 0:
            return None
        return float(value)

    msg = f"Invalid field 'request_timeout': expected number, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Timeout disabled.")
    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_base_url(url: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Require an http(s) URL; strip the trailing slash."""
    candidate = url if "://" in url else f"http://{url}"
    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        msg = f"Invalid field 'base_url': '{url}' is not an http(s) URL."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    if candidate != url:
        warnings.append(f"Field 'base_url' assumed http scheme: '{candidate}'.")
    return candidate.rstrip("/")
