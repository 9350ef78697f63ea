from __future__ import annotations

"""
Logging Configuration Model.

Immutable settings consumed by configure_logging, plus the mapping used to
translate user supplied level names.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the navigator logging subsystem.

    Attributes:
        level: Minimum severity captured by every handler.
        console: Emit records on stderr.
        log_file: Rotating log destination, disabled when None.
        max_bytes: Size threshold that triggers a rollover.
        backup_count: Rolled segments kept on disk.
        console_fmt: Format for terminal records.
        file_fmt: Format for persisted records.
        datefmt: Timestamp format for persisted records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
