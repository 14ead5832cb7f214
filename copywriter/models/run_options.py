# =============================================================================
# File: run_options.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RunOptions(BaseModel):
    author: str = Field(..., description="Copyright holder written into headers.")
    path: str = Field(..., description="File or directory to process.")
    license_path: Optional[str] = Field(default=None, description="Explicit license file.")
    dry_run: bool = Field(default=False)
    replace_footer: bool = Field(default=False)
    verbose: bool = Field(default=False)

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Author cannot be empty")
        if "\n" in v or "\r" in v:
            raise ValueError("Author must be a single line")
        return v

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Path cannot be empty")
        return v
