"""Custom exceptions for diff operations."""

from typing import Any


class DiffError(Exception):
    """Base exception for diff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DiffComputeError(DiffError):
    """Raised when the inputs cannot be split or diffed."""


class DiffParseError(DiffError):
    """Raised when rendered diff text cannot be parsed."""


class DiffApplicationError(DiffError):
    """Raised when an edit script does not fit the lines it is applied to."""
