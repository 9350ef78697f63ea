from __future__ import annotations

"""
Logging Core Orchestrator.

Configures the root logger once per process. Records are pushed onto a queue
and written by a QueueListener thread so that file I/O never stalls the Tk
main loop while a directory listing is being applied.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from mdnavigator.infra.fs import get_user_data_dir
from mdnavigator.infra.logging.config import _LEVEL_MAP, LoggingConfig
from mdnavigator.infra.logging.handlers import (
    _create_rotating_file_handler,
    _create_stream_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_mdnavigator_configured"
_QUEUE_LISTENER_ATTR: str = "_mdnavigator_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_gui_log_path(file_name: str = "mdnavigator.log") -> str:
    """Location of the persistent GUI log inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the navigator handlers to the root logger.

    Subsequent calls are no-ops unless ``force`` is set, in which case the
    previous listener is stopped and its handlers are detached first.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if logging was already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        sinks: List[logging.Handler] = []
        if cfg.console:
            sinks.append(_create_stream_handler(level_int, logging.Formatter(cfg.console_fmt)))
        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                sinks.append(fh)

        if not sinks:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
        listener.start()
        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        atexit.register(_safe_stop_listener, listener)
        return root

    except Exception:
        # Emergency console so that failures remain visible
        _remove_our_handlers(root)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        root.addHandler(sh)
        root.warning("Logging setup failed. Switched to emergency console.")
        return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_recent_logs(n_lines: int = 100) -> str:
    """
    Return the last lines of the persistent GUI log.

    Args:
        n_lines: Number of trailing lines.

    Returns:
        str: Log tail, or a short notice when the file is unavailable.
    """
    log_path = get_default_gui_log_path()
    if not os.path.exists(log_path):
        return "Log file not found."

    try:
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            return "".join(f.readlines()[-n_lines:])
    except OSError as e:
        return f"Error retrieving logs: {e}"


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: Optional[str]) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
