# =============================================================================
# File: diff_formatter.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import difflib


def build_diff(path: str, old: str, new: str, context_lines: int = 3) -> str:
    """Unified diff of a file's current and proposed content, for dry-run previews."""
    lines = difflib.unified_diff(
        old.splitlines(),
        new.splitlines(),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        n=context_lines,
        lineterm="",
    )
    return "\n".join(lines)
