# =============================================================================
# File: appsettings.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================
from typing import List

from pydantic import BaseModel, Field, field_validator


class AppConfig(BaseModel):
    name: str = Field(default="Copywriter")
    debug: bool = Field(default=False)


class WalkerConfig(BaseModel):
    skip_dirs: List[str] = Field(
        default_factory=lambda: [
            ".git",
            ".hg",
            ".svn",
            "node_modules",
            "target",
            "__pycache__",
            ".venv",
            "venv",
            ".tox",
        ],
        description="Directory names never descended into during a tree walk.",
    )
    max_file_size: int = Field(
        default=1_000_000,
        description="Files larger than this many bytes are skipped.",
    )
    follow_symlinks: bool = Field(default=False)

    @field_validator("max_file_size")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_file_size must be a positive integer")
        return v


class LicenseConfig(BaseModel):
    file_names: List[str] = Field(
        default_factory=lambda: ["LICENSE", "LICENSE.md", "LICENSE.txt", "LICENCE", "COPYING"],
        description="Candidate license file names, matched case-insensitively, in priority order.",
    )
    max_search_depth: int = Field(
        default=100,
        description="How many parent directories are searched for a license file.",
    )

    @field_validator("file_names")
    @classmethod
    def validate_file_names(cls, v: List[str]) -> List[str]:
        names = [name.strip() for name in v if name and name.strip()]
        if not names:
            raise ValueError("file_names must contain at least one name")
        return names

    @field_validator("max_search_depth")
    @classmethod
    def validate_depth(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_search_depth must be a positive integer")
        return v


class OutputConfig(BaseModel):
    diff_context_lines: int = Field(
        default=3,
        description="Context lines shown around each change in dry-run diffs.",
    )

    @field_validator("diff_context_lines")
    @classmethod
    def validate_context(cls, v: int) -> int:
        if v < 0:
            raise ValueError("diff_context_lines cannot be negative")
        return v


class AppSettings(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    walker: WalkerConfig = Field(default_factory=WalkerConfig)
    license: LicenseConfig = Field(default_factory=LicenseConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
