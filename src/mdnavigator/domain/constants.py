from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: versioning, the
Markdown viewer HTTP API contract, tree glyphs and the markup identifiers
shared with the page that hosts the tree and the shutdown dialog.
"""

from typing import Dict

CURRENT_CONFIG_VERSION = "1.0.0"
APP_NAME = "mdnavigator"

# -----------------------------------------------------------------------------
# SERVER API CONTRACT
# -----------------------------------------------------------------------------
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_BASE_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
DEFAULT_ROOT_PATH = "/"

LIST_ENDPOINT = "/api/list"
SHUTDOWN_ENDPOINT = "/api/shutdown"
VIEW_PREFIX = "/view"

CONTENT_FRAME_NAME = "content_frame"

# -----------------------------------------------------------------------------
# TREE GLYPHS
# -----------------------------------------------------------------------------
GLYPH_COLLAPSED = "\u25b6"
GLYPH_EXPANDED = "\u25bc"
GLYPH_FILE = "\U0001f4c4"

# -----------------------------------------------------------------------------
# PAGE MARKUP CONTRACT
# -----------------------------------------------------------------------------
DOM_IDS: Dict[str, str] = {
    "tree": "tree-container",
    "modal": "shutdown-modal",
    "yes": "shutdown-yes-btn",
    "no": "shutdown-no-btn",
    "trigger": "shutdown-btn",
}

CSS_NODE_CONTAINER = "node-container"
CSS_NODE_LABEL = "node-label"
CSS_ICON = "icon"
CSS_CHILDREN = "children"
CSS_EXPANDED = "expanded"
CSS_EMPTY = "empty"

# -----------------------------------------------------------------------------
# USER FACING MESSAGES (fallbacks when the locale file is unavailable)
# -----------------------------------------------------------------------------
MSG_LOAD_ERROR = "Error loading directory."
MSG_SHUTDOWN_PROMPT = "Are you sure you want to shut down the server?"
MSG_SHUTDOWN_DONE = "Server has been shut down. You can close this window."
MSG_SHUTDOWN_FAILED = "Failed to send shutdown signal. Please close the terminal manually."
ERROR_TEXT_COLOR = "red"
