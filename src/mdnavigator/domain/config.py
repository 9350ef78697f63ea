from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of client preferences using JSON in the user
data directory, merges them over defaults and applies ``MDV_*`` environment
overrides shared with the viewer server.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from mdnavigator.domain import constants as const
from mdnavigator.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
ENV_PREFIX = "MDV_"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default client configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Server
        "base_url": const.DEFAULT_BASE_URL,
        "root_path": const.DEFAULT_ROOT_PATH,
        "request_timeout": None,
        "shutdown_http_error_is_failure": False,

        # Presentation
        "open_in_browser": True,

        # Diagnostics
        "log_level": "INFO",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk and apply environment overrides.

    Missing or corrupted files fall back to defaults.

    Args:
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()

    if os.path.exists(CONFIG_FILE):
        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                config.update({k: v for k, v in data.items() if k in config})
            else:
                logger.warning("Corrupted config file. Using defaults.")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config: {e}. Using defaults.")
    else:
        logger.debug("Config file not found. Using defaults.")

    return apply_env_overrides(config, os.environ if environ is None else environ)


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Environment Overrides
# -----------------------------------------------------------------------------
def apply_env_overrides(config: Dict[str, Any], environ: Mapping[str, str]) -> Dict[str, Any]:
    """
    Overlay ``MDV_*`` variables onto a configuration.

    ``MDV_PORT`` rebuilds the local server URL and is superseded by an
    explicit ``MDV_BASE_URL``. Values are kept as strings; the validator
    performs type coercion.

    Args:
        config: Base configuration.
        environ: Environment mapping.

    Returns:
        Dict[str, Any]: A new dictionary with overrides applied.
    """
    out = dict(config)

    port = environ.get(f"{ENV_PREFIX}PORT")
    if port:
        out["base_url"] = f"http://{const.DEFAULT_HOST}:{port.strip()}"

    mapping = {
        "BASE_URL": "base_url",
        "ROOT": "root_path",
        "TIMEOUT": "request_timeout",
        "LOG_LEVEL": "log_level",
    }
    for suffix, key in mapping.items():
        value = environ.get(f"{ENV_PREFIX}{suffix}")
        if value:
            out[key] = value

    return out
