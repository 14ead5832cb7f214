# =============================================================================
# File: logger.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
import os
import sys
import traceback
from logging.handlers import RotatingFileHandler
from typing import Optional

_configured_loggers = set()


def get_logger(name: str = "copywriter", log_path: Optional[str] = None) -> logging.Logger:
    """
    Returns a configured logger instance.
    - Console handler on stderr, so report lines on stdout stay clean.
    - Rotating file handler only when a log path is given or COPYWRITER_LOG_PATH is set.
    - Avoids duplicate handlers for the same logger.
    """
    full_name = name if name.startswith("copywriter") else f"copywriter.{name}"
    logger = logging.getLogger(full_name)
    level = logging.DEBUG if os.getenv("COPYWRITER_DEBUG_MODE", "0") == "1" else logging.INFO
    logger.setLevel(level)

    if full_name in _configured_loggers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"
    )

    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler)
    ]

    # Console handler
    if not stream_handlers:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    # Rotating file handler
    if log_path is None:
        log_path = os.getenv("COPYWRITER_LOG_PATH") or None
    if log_path:
        try:
            log_dir = os.path.dirname(log_path)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)
            fh = RotatingFileHandler(
                log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        except OSError as e:
            print(f"Warning: Failed to create log file handler for {log_path}: {e}", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)

    # Avoid log message duplication in child loggers
    logger.propagate = False
    _configured_loggers.add(full_name)

    return logger


def set_level(level: int) -> None:
    """Apply a level to every logger handed out so far (used by --verbose)."""
    for name in _configured_loggers:
        logging.getLogger(name).setLevel(level)
