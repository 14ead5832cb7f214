# =============================================================================
# File: log_sanitizer.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import re
from typing import Any


def sanitize_for_log(value: Any, max_length: int = 200) -> str:
    """
    Sanitize input for safe logging by removing/encoding dangerous characters.

    File names and author strings come straight from the command line and the
    file system, so they may carry newlines or terminal control characters.

    Args:
        value: Input value to sanitize
        max_length: Longest string kept before truncation

    Returns:
        str: Sanitized string safe for logging
    """
    if value is None:
        return "None"

    str_value = str(value)

    # Remove newlines, carriage returns, and other control characters
    sanitized = re.sub(r"[\r\n\t\x00-\x1f\x7f-\x9f]", "_", str_value)

    # Limit length to prevent log flooding
    if len(sanitized) > max_length:
        sanitized = sanitized[: max_length - 3] + "..."

    return sanitized
