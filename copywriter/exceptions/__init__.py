# =============================================================================
# File: __init__.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from .custom_exceptions import (
    ConfigurationError,
    CopywriterError,
    DiscoveryError,
    FileProcessingError,
    MissingLicenseError,
)
