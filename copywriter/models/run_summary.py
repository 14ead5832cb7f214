# =============================================================================
# File: run_summary.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class FileAction(str, Enum):
    UPDATED = "updated"
    WOULD_UPDATE = "would update"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    ERROR = "error"


class FileReport(BaseModel):
    path: str
    action: FileAction
    message: Optional[str] = None
    diff: Optional[str] = None


class RunSummary(BaseModel):
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0
    errors: List[FileReport] = Field(default_factory=list)
    reports: List[FileReport] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def record(self, report: FileReport) -> None:
        self.reports.append(report)
        if report.action in (FileAction.UPDATED, FileAction.WOULD_UPDATE):
            self.updated += 1
        elif report.action == FileAction.UNCHANGED:
            self.unchanged += 1
        elif report.action == FileAction.SKIPPED:
            self.skipped += 1
        else:
            self.errors.append(report)
