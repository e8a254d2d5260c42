"""Shared dataclasses for diff operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class DeltaType(Enum):
    """Kind of a delta, valued by its tag in rendered diff headers."""

    DELETE = 'd'
    INSERT = 'a'
    CHANGE = 'c'


@dataclass
class Chunk:
    """A contiguous run of lines within one side of a diff."""

    position: int  # Starting line in the sequence (0-indexed)
    lines: List[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of lines in the chunk."""
        return len(self.lines)

    @property
    def last(self) -> int:
        """Index one past the last line of the chunk."""
        return self.position + len(self.lines)


@dataclass
class Delta:
    """A single localized difference between two line sequences."""

    type: DeltaType
    original: Chunk  # Lines taken from the original (expected) side
    revised: Chunk  # Lines taken from the revised (existing) side


@dataclass
class EditScript:
    """Ordered deltas transforming an original line sequence into a revised one."""

    deltas: List[Delta] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.deltas)

    def __iter__(self):
        return iter(self.deltas)

    @property
    def is_empty(self) -> bool:
        """Check if the script describes no changes."""
        return not self.deltas


@dataclass
class DiffApplicationResult:
    """Result of applying an edit script."""

    success: bool
    message: str
    deltas_applied: int = 0
    error_details: dict | None = None
