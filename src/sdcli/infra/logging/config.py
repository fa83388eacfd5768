from __future__ import annotations

"""
Logging Configuration Models.

Defines the immutable settings of the logging subsystem and how a single
invocation of the tool derives them from its debug flag and SD_LOG_FILE.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

# Severity names accepted in LoggingConfig.level
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEBUG_LEVEL = "DEBUG"
DEFAULT_LEVEL = "INFO"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path of the SD_LOG_FILE log.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Format of stderr output.
        file_fmt: Format of file entries, pid included.
        datefmt: Timestamp format of file entries.
    """
    level: str = DEFAULT_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(process)d | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_invocation(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the configuration of one command-line invocation.

        Args:
            debug: Whether -d/--debug was given.
            log_file: Raw SD_LOG_FILE value; '~' is expanded, blank disables it.

        Returns:
            LoggingConfig: DEBUG level with the debug flag, INFO otherwise.
        """
        path = os.path.expanduser(log_file.strip()) if log_file and log_file.strip() else None
        return cls(
            level=DEBUG_LEVEL if debug else DEFAULT_LEVEL,
            console=True,
            log_file=path,
        )
