# =============================================================================
# File: transformer_service.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import re
from typing import Optional, Tuple

from copywriter.logger import get_logger
from copywriter.models.comment_style import CommentStyle
from copywriter.models.detection import HeaderMatch
from copywriter.models.header_spec import HeaderSpec, YearRange
from copywriter.models.transform_result import (
    SectionAction,
    TransformAction,
    TransformResult,
)
from copywriter.modules.composer import compose_footer, compose_header
from copywriter.modules.detector import detect, detect_footer, names_author
from copywriter.utils.diff_formatter import build_diff

logger = get_logger("transformer_service")

BOM = "\ufeff"
# PEP 263 source encoding declaration
CODING_PATTERN = re.compile(r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")
DOCTYPE_PATTERN = re.compile(r"^[ \t]*<!DOCTYPE\b[^>]*>[ \t]*\r?\n?$", re.IGNORECASE)


class FileTransformer:
    """
    Decides insert / update / no-op for one file's header and footer.

    Every method is a pure function of its arguments: the caller supplies the
    file content and the current year and performs any I/O itself.
    """

    @classmethod
    def transform(
        cls,
        content: str,
        style: CommentStyle,
        author: str,
        license_text: Optional[str],
        current_year: int,
        replace_footer: bool = False,
    ) -> TransformResult:
        """
        Compute the new content of a file.

        Args:
            content: Current file content
            style: Comment style for the file's extension
            author: Copyright holder
            license_text: License body for the footer, None when unavailable
            current_year: End of the copyright year range
            replace_footer: Rewrite an existing footer whose text differs

        Returns:
            TransformResult: UNCHANGED, or UPDATED with the full new content.

        Raises:
            MissingLicenseError: If a footer must be inserted and license_text is None.
        """
        spec = HeaderSpec(author=author, years=YearRange(start=current_year))
        newline = cls._newline(content)
        prelude, body = cls.split_prelude(content, style)

        body, header_action = cls._apply_header(body, style, spec, newline)
        body, footer_action = cls._apply_footer(body, style, license_text, newline, replace_footer)

        new_content = prelude + body
        if new_content == content:
            return TransformResult(action=TransformAction.UNCHANGED)

        return TransformResult(
            action=TransformAction.UPDATED,
            header_action=header_action,
            footer_action=footer_action,
            new_content=new_content,
        )

    @staticmethod
    def preview(path: str, content: str, result: TransformResult, context_lines: int = 3) -> TransformResult:
        """
        Turn an UPDATED result into its dry-run form, carrying a unified diff of
        the old and new content. UNCHANGED results are returned as they are.
        """
        if not result.changed:
            return result
        diff = build_diff(path, content, result.new_content, context_lines)
        return result.model_copy(update={"action": TransformAction.WOULD_UPDATE, "diff": diff})

    @classmethod
    def needs_footer(cls, content: str, style: CommentStyle) -> bool:
        """True when the file has no license footer and one would be appended."""
        _, body = cls.split_prelude(content, style)
        return detect_footer(body, style) is None

    @classmethod
    def split_prelude(cls, content: str, style: CommentStyle) -> Tuple[str, str]:
        """
        Split off the lines that must stay above the header.

        The prelude is a UTF-8 BOM, a shebang line, a coding declaration in the
        first two lines of a '#'-commented file, or an XML declaration and a
        document type declaration in a markup file.
        """
        size = len(BOM) if content.startswith(BOM) else 0
        for index, line in enumerate(content[size:].splitlines(keepends=True)[:2]):
            if index == 0 and line.startswith("#!"):
                size += len(line)
            elif index == 0 and style.open == "<!--" and line.startswith("<?xml"):
                size += len(line)
            elif style.open == "<!--" and DOCTYPE_PATTERN.match(line):
                size += len(line)
            elif style.is_line and style.token == "#" and CODING_PATTERN.match(line):
                size += len(line)
            else:
                break

        prelude, body = content[:size], content[size:]
        if prelude.lstrip(BOM) and not prelude.endswith("\n"):
            prelude += cls._newline(content)
        return prelude, body

    @staticmethod
    def _newline(content: str) -> str:
        return "\r\n" if "\r\n" in content else "\n"

    @staticmethod
    def _is_own_header(match: Optional[HeaderMatch], author: str) -> bool:
        if match is None or not match.has_year:
            return False
        return names_author(match.holder, author)

    @classmethod
    def _apply_header(
        cls, body: str, style: CommentStyle, spec: HeaderSpec, newline: str
    ) -> Tuple[str, SectionAction]:
        current_year = spec.years.start
        match = detect(body, style, author=spec.author)

        if cls._is_own_header(match, spec.author):
            if match.latest_year >= current_year:
                return body, SectionAction.UNCHANGED
            first_year = min(y for y in (match.year_start, match.year_end) if y is not None)
            years = YearRange(start=first_year, end=current_year)
            logger.debug(f"Updating copyright years {match.year_start}-{match.year_end} to {years.render()}")
            updated = body[: match.years_start_pos] + years.render() + body[match.years_end_pos :]
            return updated, SectionAction.UPDATED

        if match is not None:
            logger.debug("Leading copyright block is not an updatable header; inserting a fresh one")

        header = compose_header(style, spec.author, spec.years).replace("\n", newline)
        if body.strip():
            return header + newline + newline + body, SectionAction.INSERTED
        return header + newline, SectionAction.INSERTED

    @classmethod
    def _apply_footer(
        cls,
        body: str,
        style: CommentStyle,
        license_text: Optional[str],
        newline: str,
        replace_footer: bool,
    ) -> Tuple[str, SectionAction]:
        match = detect_footer(body, style)

        if match is None:
            footer = compose_footer(style, license_text).replace("\n", newline)
            return body.rstrip() + newline + newline + footer + newline, SectionAction.INSERTED

        if replace_footer and license_text is not None:
            footer = compose_footer(style, license_text).replace("\n", newline)
            if cls._normalize(match.text) != cls._normalize(footer):
                return body[: match.start] + footer + newline, SectionAction.UPDATED

        return body, SectionAction.UNCHANGED

    @staticmethod
    def _normalize(text: str) -> str:
        return "\n".join(line.rstrip() for line in text.strip().splitlines())
