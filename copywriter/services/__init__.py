# =============================================================================
# File: __init__.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

# services package init
from . import license_service, transformer_service, tree_walker

__all__ = ["license_service", "transformer_service", "tree_walker"]
