# =============================================================================
# File: tree_walker.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from copywriter.config.appsettings import AppSettings
from copywriter.exceptions.custom_exceptions import (
    ConfigurationError,
    FileProcessingError,
    MissingLicenseError,
)
from copywriter.logger import get_logger
from copywriter.models.comment_style import CommentStyle
from copywriter.models.run_options import RunOptions
from copywriter.models.run_summary import FileAction, FileReport, RunSummary
from copywriter.modules.comment_styles import style_for_path
from copywriter.services.transformer_service import FileTransformer
from copywriter.utils.error_formatter import format_error_message
from copywriter.utils.file_io import read_text, write_text_atomic
from copywriter.utils.log_sanitizer import sanitize_for_log

logger = get_logger("tree_walker")


class TreeWalker:
    """
    Enumerates target files under a path and applies the FileTransformer to each.

    Per-file failures are recorded in the RunSummary and the walk continues;
    a missing license is detected for the whole tree before anything is written.
    """

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()

    def process(
        self,
        root_path: str,
        options: RunOptions,
        license_text: Optional[str],
        current_year: Optional[int] = None,
    ) -> RunSummary:
        """
        Process a single file or a whole directory tree.

        Args:
            root_path: File or directory to process
            options: Run options (author, dry-run, footer policy)
            license_text: License body, None if no license could be found
            current_year: Year to stamp; defaults to the process clock

        Returns:
            RunSummary: Counts and one report per visited file.

        Raises:
            ConfigurationError: If root_path does not exist
            MissingLicenseError: If license_text is None and some file needs a footer
        """
        if not os.path.exists(root_path):
            raise ConfigurationError(f"Path does not exist or is not accessible: {root_path}")

        year = current_year or datetime.now().year
        summary = RunSummary()
        targets: List[Tuple[str, CommentStyle]] = []

        for path in self.iter_files(root_path):
            style = style_for_path(path)
            if style is None:
                summary.record(FileReport(path=path, action=FileAction.SKIPPED, message="unsupported extension"))
                continue
            if os.path.islink(path) and not self.settings.walker.follow_symlinks:
                summary.record(FileReport(path=path, action=FileAction.SKIPPED, message="symbolic link"))
                continue
            targets.append((path, style))

        if license_text is None:
            self._ensure_no_footer_needed(targets)

        for path, style in targets:
            report = self._process_file(path, style, options, license_text, year)
            summary.record(report)

        logger.info(
            f"Processed {sanitize_for_log(root_path)}: updated={summary.updated} "
            f"unchanged={summary.unchanged} skipped={summary.skipped} errors={len(summary.errors)}"
        )
        return summary

    def iter_files(self, root_path: str) -> Iterator[str]:
        """Yield every file under root_path in a stable order, pruning skipped directories."""
        if not os.path.isdir(root_path):
            yield root_path
            return

        skip_dirs = set(self.settings.walker.skip_dirs)
        for dirpath, dirnames, filenames in os.walk(
            root_path, followlinks=self.settings.walker.follow_symlinks
        ):
            dirnames[:] = sorted(d for d in dirnames if d not in skip_dirs)
            for name in sorted(filenames):
                yield os.path.join(dirpath, name)

    def _ensure_no_footer_needed(self, targets: List[Tuple[str, CommentStyle]]) -> None:
        for path, style in targets:
            if self._too_large(path):
                continue
            try:
                content = read_text(path)
            except (OSError, UnicodeDecodeError):
                # Reported when the file is processed
                continue
            if FileTransformer.needs_footer(content, style):
                raise MissingLicenseError(
                    f"No license file found and {path} needs a license footer; "
                    "pass --license or add a LICENSE file"
                )

    def _too_large(self, path: str) -> bool:
        try:
            return os.path.getsize(path) > self.settings.walker.max_file_size
        except OSError:
            return False

    def _process_file(
        self,
        path: str,
        style: CommentStyle,
        options: RunOptions,
        license_text: Optional[str],
        year: int,
    ) -> FileReport:
        if self._too_large(path):
            logger.debug(f"Skipping large file: {sanitize_for_log(path)}")
            return FileReport(
                path=path,
                action=FileAction.SKIPPED,
                message=f"larger than {self.settings.walker.max_file_size} bytes",
            )

        try:
            content = read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            message = format_error_message(e)
            logger.warning(f"Cannot read {sanitize_for_log(path)}: {message}")
            return FileReport(path=path, action=FileAction.ERROR, message=message)

        result = FileTransformer.transform(
            content,
            style,
            options.author,
            license_text,
            year,
            replace_footer=options.replace_footer,
        )
        if not result.changed:
            return FileReport(path=path, action=FileAction.UNCHANGED)

        if options.dry_run:
            result = FileTransformer.preview(
                path, content, result, self.settings.output.diff_context_lines
            )
            return FileReport(path=path, action=FileAction.WOULD_UPDATE, diff=result.diff)

        try:
            write_text_atomic(path, result.new_content)
        except FileProcessingError as e:
            message = format_error_message(e)
            logger.warning(f"Cannot write {sanitize_for_log(path)}: {message}")
            return FileReport(path=path, action=FileAction.ERROR, message=message)

        logger.debug(
            f"Updated {sanitize_for_log(path)} "
            f"(header {result.header_action.value}, footer {result.footer_action.value})"
        )
        return FileReport(path=path, action=FileAction.UPDATED)
