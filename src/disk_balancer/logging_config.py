"""
Logging configuration for the disk balancer command line.

Library modules only create loggers. The CLI calls setup_logging.

setup_logging may run more than once in a process. Each call removes the
handlers the previous call installed, so the latest level and log file win
and handlers do not pile up. Handlers installed by anything else are left
alone.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_installed: List[logging.Handler] = []


def reset_logging() -> None:
    """Remove and close the handlers installed by setup_logging."""
    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def setup_logging(
    component_name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        component_name: Name shown in every record and used for the returned logger
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path that receives a copy of the output
        format_string: Custom format string (default provided)
    """
    if format_string is None:
        format_string = f"[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s"

    reset_logging()

    formatter = logging.Formatter(format_string, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    logger = logging.getLogger(component_name)
    logger.debug("%s logging initialized (level=%s)", component_name, logging.getLevelName(level))
    return logger
