"""Shared dataclasses for NOTICE checks."""

from dataclasses import dataclass
from enum import Enum


class ComparisonStatus(Enum):
    """Outcome of comparing expected and existing NOTICE contents."""

    IDENTICAL = "identical"
    DIFFERENT = "different"


@dataclass
class ComparisonResult:
    """Result of comparing expected contents against a NOTICE file."""

    status: ComparisonStatus
    existing_contents: str | None = None  # Only set when the contents differ

    @property
    def is_identical(self) -> bool:
        """Check if the compared contents were identical."""
        return self.status == ComparisonStatus.IDENTICAL


@dataclass
class NoticeCheckResult:
    """Result of a NOTICE check that found the file up to date."""

    notice_file: str
    message: str
