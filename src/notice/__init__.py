"""
NOTICE file checking.

Verifies that a checked-in NOTICE file matches freshly generated contents
and reports a readable diff when it does not.
"""

from notice.notice_checker import NoticeChecker
from notice.notice_comparator import NoticeComparator
from notice.notice_config import NoticeCheckConfig
from notice.notice_exceptions import (
    ContentMismatchError,
    MissingReferenceFileError,
    NoticeConfigError,
    NoticeError,
    NoticeIOError,
)
from notice.notice_types import ComparisonResult, ComparisonStatus, NoticeCheckResult

__all__ = [
    # Exceptions
    'NoticeError',
    'MissingReferenceFileError',
    'NoticeIOError',
    'NoticeConfigError',
    'ContentMismatchError',
    # Types
    'ComparisonStatus',
    'ComparisonResult',
    'NoticeCheckResult',
    'NoticeCheckConfig',
    # Core classes
    'NoticeComparator',
    'NoticeChecker',
]
