# =============================================================================
# File: custom_exceptions.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""
Custom exception classes for Copywriter.
Fatal setup errors abort a run before any file is touched; per-file errors are
collected by the tree walker and the run continues.
"""


class CopywriterError(Exception):
    """
    Base exception class for all Copywriter-related errors.

    This is the root exception for the application. All custom exceptions should inherit from this.
    """


class ConfigurationError(CopywriterError):
    """
    Raised when required arguments or settings are missing or invalid.
    """

    pass


class DiscoveryError(CopywriterError):
    """
    Raised when no usable license text can be resolved for the run.
    """

    pass


class MissingLicenseError(DiscoveryError):
    """
    Raised when a footer has to be inserted but no license text is available.
    """

    pass


class FileProcessingError(CopywriterError):
    """
    Raised when a single file cannot be read or written.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
