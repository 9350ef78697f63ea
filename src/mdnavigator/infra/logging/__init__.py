from __future__ import annotations

"""
Logging facade for the navigator.

Re-exports the configuration model and lifecycle helpers so that callers
import from ``mdnavigator.infra.logging`` only.
"""

from .config import LoggingConfig
from .core import (
    configure_logging,
    get_default_gui_log_path,
    get_logger,
    get_recent_logs,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "get_recent_logs",
    "get_default_gui_log_path",
]
