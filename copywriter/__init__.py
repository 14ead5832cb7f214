# =============================================================================
# File: __init__.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

__version__ = "1.0.0"
