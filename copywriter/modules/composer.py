# =============================================================================
# File: composer.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""
Builds the exact header and footer text written into source files.

Header:  ``# Copyright (c) 2019-2024 Ada Lovelace``  or
         ``/* Copyright (c) 2019-2024 Ada Lovelace */``
Footer:  a ``License:`` marker line followed by the license body, either
         prefixed line by line or wrapped once in a block comment.

All text is produced with ``\\n`` line endings; the transformer converts them
to the file's own line ending.
"""

from typing import Optional

from copywriter.exceptions.custom_exceptions import MissingLicenseError
from copywriter.models.comment_style import CommentStyle
from copywriter.models.header_spec import YearRange

COPYRIGHT_PREFIX = "Copyright (c)"
LICENSE_MARKER = "License:"


def render_years(start: int, end: Optional[int] = None) -> str:
    return YearRange(start=start, end=end).render()


def _neutralize(text: str, style: CommentStyle) -> str:
    # Literal delimiters would end the comment early or open a new one
    for delimiter in (style.close, style.open):
        text = text.replace(delimiter, f"{delimiter[:-1]} {delimiter[-1:]}")
    return text


def compose_header(style: CommentStyle, author: str, years: YearRange) -> str:
    """Return the one-line copyright header, without a trailing newline."""
    text = f"{COPYRIGHT_PREFIX} {years.render()} {author.strip()}"
    if style.is_line:
        return f"{style.token} {text}"
    return f"{style.open} {_neutralize(text, style)} {style.close}"


def compose_footer(style: CommentStyle, license_text: Optional[str]) -> str:
    """
    Return the license footer, without a trailing newline.

    Raises:
        MissingLicenseError: If there is no license text to render.
    """
    if license_text is None or not license_text.strip():
        raise MissingLicenseError("No license text available to compose a footer")

    lines = [LICENSE_MARKER] + [line.rstrip() for line in license_text.strip("\r\n").splitlines()]

    if style.is_line:
        return "\n".join(f"{style.token} {line}" if line else style.token for line in lines)

    body = "\n".join(_neutralize(line, style) for line in lines)
    return f"{style.open}\n{body}\n{style.close}"
