# =============================================================================
# File: main.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from copywriter import __version__
from copywriter.config.config_loader import ConfigLoader
from copywriter.config.validation import build_run_options
from copywriter.exceptions.custom_exceptions import (
    ConfigurationError,
    CopywriterError,
    DiscoveryError,
)
from copywriter.logger import get_logger, set_level
from copywriter.models.run_options import RunOptions
from copywriter.models.run_summary import FileAction, RunSummary
from copywriter.services.license_service import LicenseService
from copywriter.services.tree_walker import TreeWalker
from copywriter.utils.error_formatter import format_summary_line

logger = get_logger("main")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_DISCOVERY_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="copywriter",
        description="Updates copyright headers and license footers in source code files.",
    )
    parser.add_argument("path", help="File or directory to process")
    parser.add_argument(
        "-a", "--author", metavar="NAME", required=True, help="Sets the copyright author name"
    )
    parser.add_argument(
        "-l",
        "--license",
        metavar="FILE",
        help="Path to license file (default: searches for LICENSE in the target and its parents)",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be done without making changes"
    )
    parser.add_argument(
        "--replace-footer",
        action="store_true",
        help="Rewrite existing license footers whose text differs from the license file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also list unchanged and skipped files"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_report(summary: RunSummary, options: RunOptions, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for report in summary.reports:
        if report.action == FileAction.ERROR:
            print(f"error: {report.path}: {report.message}", file=out)
        elif report.action in (FileAction.UPDATED, FileAction.WOULD_UPDATE):
            print(f"{report.action.value}: {report.path}", file=out)
            if report.diff:
                print(report.diff, file=out)
        elif options.verbose:
            suffix = f" ({report.message})" if report.message else ""
            print(f"{report.action.value}: {report.path}{suffix}", file=out)

    print(
        format_summary_line(
            summary.updated,
            summary.unchanged,
            summary.skipped,
            len(summary.errors),
            dry_run=options.dry_run,
        ),
        file=out,
    )


def run(options: RunOptions) -> RunSummary:
    """Resolve the license and process the target. Fatal errors propagate."""
    settings = ConfigLoader.get_app_settings()
    if settings.app.debug:
        set_level(logging.DEBUG)
    logger.debug(f"{settings.app.name} {__version__} processing {options.path}")
    license_text = LicenseService.resolve(options, settings)
    return TreeWalker(settings).process(options.path, options, license_text)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        options = build_run_options(
            author=args.author,
            path=args.path,
            license_path=args.license,
            dry_run=args.dry_run,
            replace_footer=args.replace_footer,
            verbose=args.verbose,
        )
        summary = run(options)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except DiscoveryError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_DISCOVERY_ERROR
    except CopywriterError as e:
        logger.exception("Run aborted")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print_report(summary, options)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
