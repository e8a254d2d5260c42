"""
Line diff computation, rendering, parsing, and application.

This package computes edit scripts between line sequences and renders them
in the classic normal diff format (``1c1``, ``< old``, ``> new``).
"""

from diff.diff_applier import DiffApplier
from diff.diff_computer import DiffComputer, split_lines, strip_line_ending
from diff.diff_exceptions import (
    DiffApplicationError,
    DiffComputeError,
    DiffError,
    DiffParseError,
)
from diff.diff_parser import DiffParser
from diff.diff_renderer import DiffRenderer
from diff.diff_types import (
    Chunk,
    Delta,
    DeltaType,
    DiffApplicationResult,
    EditScript,
)

__all__ = [
    # Exceptions
    'DiffError',
    'DiffComputeError',
    'DiffParseError',
    'DiffApplicationError',
    # Types
    'DeltaType',
    'Chunk',
    'Delta',
    'EditScript',
    'DiffApplicationResult',
    # Core classes
    'DiffComputer',
    'DiffRenderer',
    'DiffParser',
    'DiffApplier',
    # Helpers
    'split_lines',
    'strip_line_ending',
]
