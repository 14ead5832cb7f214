# =============================================================================
# File: detector.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""
Finds an existing copyright header at the top of a file body and an existing
license footer at its end.

Detection is conservative. Only the leading comment block, after any blank
lines, is considered a header candidate, and only a line carrying the
``Copyright`` keyword makes it one. The transformer inserts a fresh header
whenever the match is missing a year or names someone else.
"""

import re
from typing import List, Optional, Tuple

from copywriter.models.comment_style import CommentStyle
from copywriter.models.detection import FooterMatch, HeaderMatch
from copywriter.modules.composer import LICENSE_MARKER

COPYRIGHT_PATTERN = re.compile(
    r"copyright\b(?:[ \t]*(?:\(c\)|©))?[ \t]*"
    r"(?P<start>\d{4})(?:[ \t]*[-–][ \t]*(?P<end>\d{4}))?"
    r"(?P<holder>[^\r\n]*)",
    re.IGNORECASE,
)
COPYRIGHT_KEYWORD = re.compile(r"\bcopyright\b", re.IGNORECASE)


def _comment_text(line: str, token: str) -> str:
    return line.strip()[len(token):].strip()


def _line_offsets(lines: List[str]) -> List[int]:
    offsets = []
    pos = 0
    for line in lines:
        offsets.append(pos)
        pos += len(line)
    return offsets


def _leading_block(content: str, style: CommentStyle) -> Optional[Tuple[int, str]]:
    """Return (end, block_text) of the comment block starting at offset 0."""
    if style.is_line:
        end = 0
        for line in content.splitlines(keepends=True):
            if not line.lstrip().startswith(style.token):
                break
            end += len(line)
        return (end, content[:end]) if end else None

    if not content.startswith(style.open):
        return None
    close_at = content.find(style.close, len(style.open))
    if close_at == -1:
        return None
    end = close_at + len(style.close)
    return end, content[:end]


def _blank_prefix(content: str) -> int:
    """Length of the whitespace-only lines at the top of content."""
    size = 0
    for line in content.splitlines(keepends=True):
        if line.strip():
            break
        size += len(line)
    return size


def _opens_with_marker(block: str, style: CommentStyle) -> bool:
    if style.is_line:
        first = block.splitlines()[0]
        return _comment_text(first, style.token) == LICENSE_MARKER
    interior = block[len(style.open):]
    for line in interior.splitlines():
        text = line.strip().lstrip("*").strip()
        if text:
            return text == LICENSE_MARKER
    return False


def names_author(holder: Optional[str], author: str) -> bool:
    """True when holder names author as whole words, ignoring case."""
    if not holder or not author.strip():
        return False
    pattern = rf"(?<!\w){re.escape(author.strip())}(?!\w)"
    return re.search(pattern, holder, re.IGNORECASE) is not None


def _clean_holder(holder: str, style: CommentStyle) -> Optional[str]:
    holder = holder.strip()
    if not style.is_line and holder.endswith(style.close):
        holder = holder[: -len(style.close)].strip()
    return holder or None


def detect(content: str, style: CommentStyle, author: Optional[str] = None) -> Optional[HeaderMatch]:
    """
    Detect a copyright header at the top of ``content``.

    Args:
        content: File body with any shebang/BOM prelude already removed
        style: Comment style of the file
        author: When given, a copyright line naming this author is preferred

    Returns:
        HeaderMatch for the leading comment block, with ``year_start`` None when
        the block mentions copyright but carries no parsable year; None when
        there is no leading comment block or it is not a copyright header.
    """
    lead = _blank_prefix(content)
    found = _leading_block(content[lead:], style)
    if found is None:
        return None
    end, block = found

    if _opens_with_marker(block, style):
        return None

    matches = list(COPYRIGHT_PATTERN.finditer(block))
    if not matches:
        if COPYRIGHT_KEYWORD.search(block):
            return HeaderMatch(start=lead, end=lead + end)
        return None

    chosen = matches[0]
    if author:
        for m in matches:
            if names_author(m.group("holder"), author):
                chosen = m
                break

    year_end = chosen.group("end")
    return HeaderMatch(
        start=lead,
        end=lead + end,
        year_start=int(chosen.group("start")),
        year_end=int(year_end) if year_end else None,
        holder=_clean_holder(chosen.group("holder"), style),
        years_start_pos=lead + chosen.start("start"),
        years_end_pos=lead + (chosen.end("end") if year_end else chosen.end("start")),
    )


def detect_footer(content: str, style: CommentStyle) -> Optional[FooterMatch]:
    """
    Detect a license footer at the end of ``content``.

    A footer is a trailing comment block whose first line is the ``License:``
    marker. Trailing whitespace after the block belongs to the footer span.
    """
    stripped = content.rstrip()
    if not stripped:
        return None

    if style.is_line:
        lines = stripped.splitlines(keepends=True)
        offsets = _line_offsets(lines)
        first = len(lines)
        while first > 0 and lines[first - 1].lstrip().startswith(style.token):
            first -= 1
        for i in range(first, len(lines)):
            if _comment_text(lines[i], style.token) == LICENSE_MARKER:
                start = offsets[i]
                return FooterMatch(start=start, end=len(content), text=stripped[start:])
        return None

    if not stripped.endswith(style.close):
        return None
    body_end = len(stripped) - len(style.close)
    start = stripped.rfind(style.open, 0, body_end)
    while start != -1:
        if style.close in stripped[start + len(style.open):body_end]:
            return None
        # The opener has to begin its own line
        before = stripped[:start].rstrip(" \t")
        if (not before or before.endswith("\n")) and _opens_with_marker(stripped[start:], style):
            return FooterMatch(start=start, end=len(content), text=stripped[start:])
        start = stripped.rfind(style.open, 0, start)
    return None
