# =============================================================================
# File: detection.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, Field


class HeaderMatch(BaseModel):
    """Copyright header found at the top of a file body. Offsets are character offsets."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    year_start: Optional[int] = None
    year_end: Optional[int] = None
    holder: Optional[str] = None
    # Span of the year token inside the body, when a year was found
    years_start_pos: Optional[int] = None
    years_end_pos: Optional[int] = None

    @property
    def has_year(self) -> bool:
        return self.year_start is not None

    @property
    def latest_year(self) -> Optional[int]:
        return self.year_end if self.year_end is not None else self.year_start


class FooterMatch(BaseModel):
    """License footer found at the end of a file body."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    text: str
