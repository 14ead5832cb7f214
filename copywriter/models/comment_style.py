# =============================================================================
# File: comment_style.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommentKind(str, Enum):
    LINE = "line"
    BLOCK = "block"


class CommentStyle(BaseModel):
    """
    Comment delimiters for one language.

    A LINE style prefixes every line with ``token``; a BLOCK style wraps the
    text once between ``open`` and ``close``.
    """

    model_config = ConfigDict(frozen=True)

    kind: CommentKind
    token: Optional[str] = Field(default=None, description="Line comment token, e.g. '#'.")
    open: Optional[str] = Field(default=None, description="Block comment opener, e.g. '/*'.")
    close: Optional[str] = Field(default=None, description="Block comment closer, e.g. '*/'.")

    @model_validator(mode="after")
    def check_delimiters(self) -> "CommentStyle":
        if self.kind == CommentKind.LINE and not self.token:
            raise ValueError("Line comment style requires a token")
        if self.kind == CommentKind.BLOCK and not (self.open and self.close):
            raise ValueError("Block comment style requires open and close delimiters")
        return self

    @classmethod
    def line(cls, token: str) -> "CommentStyle":
        return cls(kind=CommentKind.LINE, token=token)

    @classmethod
    def block(cls, open: str, close: str) -> "CommentStyle":
        return cls(kind=CommentKind.BLOCK, open=open, close=close)

    @property
    def is_line(self) -> bool:
        return self.kind == CommentKind.LINE
