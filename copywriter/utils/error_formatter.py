# =============================================================================
# File: error_formatter.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from copywriter.exceptions.custom_exceptions import FileProcessingError
from copywriter.utils.log_sanitizer import sanitize_for_log


def format_error_message(error: BaseException) -> str:
    """Render an exception as a single sanitized report line."""
    if isinstance(error, FileProcessingError):
        message = error.message
    elif isinstance(error, UnicodeDecodeError):
        message = f"not valid {error.encoding} text ({error.reason} at byte {error.start})"
    elif isinstance(error, OSError) and error.strerror:
        message = error.strerror
    else:
        message = str(error) or "unknown error"
    return sanitize_for_log(f"{type(error).__name__}: {message}", max_length=300)


def format_summary_line(
    updated: int,
    unchanged: int,
    skipped: int,
    errors: int,
    dry_run: bool = False,
) -> str:
    """Format the closing summary printed after a run."""
    verb = "would update" if dry_run else "updated"
    return f"{verb} {updated}, unchanged {unchanged}, skipped {skipped}, errors {errors}"
