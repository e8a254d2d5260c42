"""Custom exceptions for NOTICE checks."""

from typing import Any


class NoticeError(Exception):
    """Base exception for NOTICE checks."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MissingReferenceFileError(NoticeError):
    """Raised when the checked-in NOTICE file does not exist."""


class NoticeIOError(NoticeError):
    """Raised when the checked-in NOTICE file cannot be read."""


class NoticeConfigError(NoticeError):
    """Raised when the check configuration is invalid."""


class ContentMismatchError(NoticeError):
    """Raised when the checked-in NOTICE file differs from the expected contents."""

    def __init__(
        self,
        message: str,
        notice_file: str,
        expected_file: str,
        diff_text: str = "",
        error_details: dict[str, Any] | None = None
    ):
        """
        Initialize the exception.

        Args:
            message: Error message naming both files
            notice_file: Path of the checked-in NOTICE file
            expected_file: Path the expected contents were written to
            diff_text: Rendered diff from expected to existing contents
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message, error_details)
        self.notice_file = notice_file
        self.expected_file = expected_file
        self.diff_text = diff_text
