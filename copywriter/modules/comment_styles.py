# =============================================================================
# File: comment_styles.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from typing import Dict, List, Optional

from copywriter.models.comment_style import CommentStyle

HASH = CommentStyle.line("#")
DOUBLE_SLASH = CommentStyle.line("//")
DOUBLE_DASH = CommentStyle.line("--")
C_BLOCK = CommentStyle.block("/*", "*/")
MARKUP_BLOCK = CommentStyle.block("<!--", "-->")

# File extensions and their comment styles
COMMENT_STYLES: Dict[str, CommentStyle] = {
    # Hash-style comments
    ".py": HASH,
    ".pyi": HASH,
    ".pyw": HASH,
    ".rb": HASH,
    ".sh": HASH,
    ".bash": HASH,
    ".zsh": HASH,
    ".pl": HASH,
    ".pm": HASH,
    ".r": HASH,
    ".toml": HASH,
    ".yaml": HASH,
    ".yml": HASH,
    ".cmake": HASH,
    ".ps1": HASH,
    # Double-slash comments
    ".rs": DOUBLE_SLASH,
    ".go": DOUBLE_SLASH,
    ".js": DOUBLE_SLASH,
    ".jsx": DOUBLE_SLASH,
    ".mjs": DOUBLE_SLASH,
    ".cjs": DOUBLE_SLASH,
    ".ts": DOUBLE_SLASH,
    ".tsx": DOUBLE_SLASH,
    ".java": DOUBLE_SLASH,
    ".kt": DOUBLE_SLASH,
    ".kts": DOUBLE_SLASH,
    ".swift": DOUBLE_SLASH,
    ".scala": DOUBLE_SLASH,
    ".cs": DOUBLE_SLASH,
    ".cpp": DOUBLE_SLASH,
    ".cc": DOUBLE_SLASH,
    ".cxx": DOUBLE_SLASH,
    ".hpp": DOUBLE_SLASH,
    ".hh": DOUBLE_SLASH,
    ".hxx": DOUBLE_SLASH,
    ".dart": DOUBLE_SLASH,
    ".groovy": DOUBLE_SLASH,
    ".proto": DOUBLE_SLASH,
    # Double-dash comments
    ".lua": DOUBLE_DASH,
    ".sql": DOUBLE_DASH,
    ".hs": DOUBLE_DASH,
    # C block comments
    ".c": C_BLOCK,
    ".h": C_BLOCK,
    ".css": C_BLOCK,
    ".scss": C_BLOCK,
    ".less": C_BLOCK,
    # Markup comments
    ".html": MARKUP_BLOCK,
    ".htm": MARKUP_BLOCK,
    ".xhtml": MARKUP_BLOCK,
    ".xml": MARKUP_BLOCK,
    ".svg": MARKUP_BLOCK,
    ".vue": MARKUP_BLOCK,
}


def style_for(extension: str) -> Optional[CommentStyle]:
    """
    Look up the comment style for a file extension.

    Accepts the extension with or without its leading dot, in any case.
    Returns None for extensions outside the table.
    """
    if not extension:
        return None
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return COMMENT_STYLES.get(ext)


def style_for_path(path: str) -> Optional[CommentStyle]:
    return style_for(os.path.splitext(path)[1])


def supported_extensions() -> List[str]:
    return sorted(COMMENT_STYLES)
