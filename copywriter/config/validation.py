# =============================================================================
# File: validation.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import os
from typing import List, Optional

from pydantic import ValidationError

from copywriter.exceptions.custom_exceptions import ConfigurationError
from copywriter.logger import get_logger
from copywriter.models.run_options import RunOptions
from copywriter.utils.log_sanitizer import sanitize_for_log

logger = get_logger("config_validation")


def build_run_options(
    author: Optional[str],
    path: Optional[str],
    license_path: Optional[str] = None,
    dry_run: bool = False,
    replace_footer: bool = False,
    verbose: bool = False,
) -> RunOptions:
    """
    Build and validate the options for one run.

    Raises:
        ConfigurationError: Listing every problem found, before any file is touched.
    """
    errors: List[str] = []

    errors.extend(_validate_required(author, path))
    if errors:
        _fail(errors)

    try:
        options = RunOptions(
            author=author,
            path=path,
            license_path=license_path,
            dry_run=dry_run,
            replace_footer=replace_footer,
            verbose=verbose,
        )
    except ValidationError as e:
        _fail([f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()])

    errors.extend(_validate_path(options.path))
    if errors:
        _fail(errors)

    logger.debug(
        f"Run options: author={sanitize_for_log(options.author)}, path={sanitize_for_log(options.path)}, "
        f"license={sanitize_for_log(options.license_path)}, dry_run={options.dry_run}"
    )
    return options


def _validate_required(author: Optional[str], path: Optional[str]) -> List[str]:
    """Validate that required arguments are present."""
    errors = []
    if not author or not author.strip():
        errors.append("Author is required (--author NAME)")
    if not path or not path.strip():
        errors.append("Path is required")
    return errors


def _validate_path(path: str) -> List[str]:
    """Validate the target path."""
    errors = []
    if not os.path.exists(path):
        errors.append(f"Path does not exist or is not accessible: {path}")
    elif not (os.path.isfile(path) or os.path.isdir(path)):
        errors.append(f"Path is neither a file nor a directory: {path}")
    return errors


def _fail(errors: List[str]) -> None:
    error_message = "Configuration validation failed:\n" + "\n".join(
        f"- {error}" for error in errors
    )
    logger.debug(sanitize_for_log(error_message.replace("\n", " "), max_length=500))
    raise ConfigurationError(error_message)
