# =============================================================================
# File: __init__.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from .comment_style import CommentKind, CommentStyle
from .detection import FooterMatch, HeaderMatch
from .header_spec import HeaderSpec, YearRange
from .run_options import RunOptions
from .run_summary import FileAction, FileReport, RunSummary
from .transform_result import SectionAction, TransformAction, TransformResult
