#!/usr/bin/env python3
"""
Example showing the programmatic workflow: preview changes with a dry run,
then apply them, then confirm a second run is a no-op.
"""

import logging
import tempfile
from pathlib import Path

from copywriter.config.config_loader import ConfigLoader
from copywriter.models.run_options import RunOptions
from copywriter.services.license_service import LicenseService
from copywriter.services.tree_walker import TreeWalker

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

AUTHOR = "Example Author"


def build_sample_tree(root: Path) -> None:
    (root / "src").mkdir()
    (root / "LICENSE").write_text("MIT License\n\nPermission is hereby granted.\n", encoding="utf-8")
    (root / "src" / "tool.py").write_text("#!/usr/bin/env python3\nprint('hi')\n", encoding="utf-8")
    (root / "src" / "lib.go").write_text("package lib\n", encoding="utf-8")
    (root / "src" / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")


def run_once(root: Path, dry_run: bool) -> None:
    settings = ConfigLoader.get_app_settings()
    options = RunOptions(author=AUTHOR, path=str(root / "src"), dry_run=dry_run)
    license_text = LicenseService.resolve(options, settings)
    summary = TreeWalker(settings).process(options.path, options, license_text)

    label = "Dry run" if dry_run else "Live run"
    print(f"\n{label}: updated={summary.updated} unchanged={summary.unchanged} skipped={summary.skipped}")
    for report in summary.reports:
        print(f"  {report.action.value}: {report.path}")
        if report.diff:
            print(report.diff)


def main():
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        build_sample_tree(root)
        run_once(root, dry_run=True)
        run_once(root, dry_run=False)
        run_once(root, dry_run=False)
        print("\nResulting tool.py:\n")
        print((root / "src" / "tool.py").read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
