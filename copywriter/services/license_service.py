# =============================================================================
# File: license_service.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from typing import Optional

from copywriter.config.appsettings import AppSettings
from copywriter.exceptions.custom_exceptions import DiscoveryError
from copywriter.logger import get_logger
from copywriter.models.run_options import RunOptions
from copywriter.utils.file_io import read_text
from copywriter.utils.log_sanitizer import sanitize_for_log

logger = get_logger("license_service")


class LicenseService:
    """
    Resolves the license text written into footers.

    The text is read once per run and shared by every file transformation.
    """

    @classmethod
    def resolve(cls, options: RunOptions, settings: AppSettings) -> Optional[str]:
        """
        Return the license text for a run.

        An explicit ``license_path`` must be readable and non-empty. Otherwise the
        target's directory and its parents are searched; None means nothing was found,
        which is only fatal once some file actually needs a footer.

        Raises:
            DiscoveryError: If the license file cannot be used
        """
        if options.license_path:
            if not os.path.isfile(options.license_path):
                raise DiscoveryError(f"License file not found: {options.license_path}")
            text = cls.read_license(options.license_path)
            if text is None:
                raise DiscoveryError(f"License file is empty: {options.license_path}")
            logger.info(f"Using license file {sanitize_for_log(options.license_path)}")
            return text

        found = cls.find_license_file(options.path, settings)
        if found is None:
            logger.info(f"No license file found above {sanitize_for_log(options.path)}")
            return None

        text = cls.read_license(found)
        if text is None:
            logger.warning(f"Ignoring empty license file {sanitize_for_log(found)}")
            return None
        logger.info(f"Using license file {sanitize_for_log(found)}")
        return text

    @classmethod
    def find_license_file(cls, start_path: str, settings: AppSettings) -> Optional[str]:
        """
        Search start_path (or its parent, for a file) and each ancestor for a license file.

        Names come from settings in priority order and are matched case-insensitively;
        an exact-case match wins over a case variant in the same directory.
        """
        current_dir = os.path.abspath(start_path)
        if not os.path.isdir(current_dir):
            current_dir = os.path.dirname(current_dir)

        for _ in range(settings.license.max_search_depth):
            match = cls._match_in_directory(current_dir, settings.license.file_names)
            if match:
                return match
            parent = os.path.dirname(current_dir)
            if parent == current_dir:
                break
            current_dir = parent
        return None

    @staticmethod
    def _match_in_directory(directory: str, file_names) -> Optional[str]:
        try:
            entries = [e for e in os.listdir(directory) if os.path.isfile(os.path.join(directory, e))]
        except OSError as e:
            logger.debug(f"Cannot list {sanitize_for_log(directory)}: {e}")
            return None

        by_lower = {}
        for entry in sorted(entries):
            by_lower.setdefault(entry.lower(), entry)

        for name in file_names:
            if name in entries:
                return os.path.join(directory, name)
            variant = by_lower.get(name.lower())
            if variant:
                return os.path.join(directory, variant)
        return None

    @staticmethod
    def read_license(path: str) -> Optional[str]:
        """
        Read and normalize a license file: outer blank lines dropped, trailing spaces removed.

        Returns None for a file with no text.

        Raises:
            DiscoveryError: If the file cannot be read as UTF-8 text
        """
        try:
            raw = read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise DiscoveryError(f"Cannot read license file {path}: {e}") from e
        return normalize_license_text(raw)


def normalize_license_text(raw: str) -> Optional[str]:
    raw = raw.lstrip("\ufeff")
    lines = [line.rstrip() for line in raw.splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) if lines else None
