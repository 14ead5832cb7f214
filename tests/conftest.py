# =============================================================================
# File: conftest.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

# Shared fixtures for the copywriter test suite.
import pytest

from copywriter.config.config_loader import ConfigLoader
from copywriter.models.run_options import RunOptions

AUTHOR = "Ada Lovelace"
LICENSE_TEXT = "MIT License\n\nPermission is granted."


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Every test starts from freshly loaded settings."""
    ConfigLoader._ConfigLoader__appsettings = None
    yield
    ConfigLoader._ConfigLoader__appsettings = None


@pytest.fixture
def license_text():
    return LICENSE_TEXT


@pytest.fixture
def make_options():
    def _make(path, **kwargs):
        return RunOptions(author=kwargs.pop("author", AUTHOR), path=str(path), **kwargs)

    return _make


@pytest.fixture
def source_tree(tmp_path):
    """A project with three recognized source files and one unrecognized file."""
    root = tmp_path / "project"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "src" / "app.py").write_text("print('hello')\n", encoding="utf-8")
    (root / "src" / "util.c").write_text("int add(int a, int b) { return a + b; }\n", encoding="utf-8")
    (root / "src" / "lib" / "core.rs").write_text("fn main() {}\n", encoding="utf-8")
    (root / "src" / "notes.txt").write_text("plain notes\n", encoding="utf-8")
    return root


def snapshot(root):
    """Map of every file under root to its bytes."""
    return {p: p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}
