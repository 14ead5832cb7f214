# =============================================================================
# File: transform_result.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TransformAction(str, Enum):
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    WOULD_UPDATE = "would_update"


class SectionAction(str, Enum):
    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    UPDATED = "updated"


class TransformResult(BaseModel):
    action: TransformAction
    header_action: SectionAction = Field(default=SectionAction.UNCHANGED)
    footer_action: SectionAction = Field(default=SectionAction.UNCHANGED)
    new_content: Optional[str] = None
    diff: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.action != TransformAction.UNCHANGED
