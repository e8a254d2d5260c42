"""Shared fixtures and utilities for diff tests."""

import pytest
from typing import List

from diff.diff_applier import DiffApplier
from diff.diff_computer import DiffComputer
from diff.diff_parser import DiffParser
from diff.diff_renderer import DiffRenderer


@pytest.fixture
def computer():
    """Create a diff computer for testing."""
    return DiffComputer()


@pytest.fixture
def renderer():
    """Create a diff renderer for testing."""
    return DiffRenderer()


@pytest.fixture
def parser():
    """Create a diff parser for testing."""
    return DiffParser()


@pytest.fixture
def applier():
    """Create a diff applier for testing."""
    return DiffApplier()


class DiffTestHelpers:
    """Helper utilities for diff testing."""

    @staticmethod
    def lines_to_text(lines: List[str]) -> str:
        """Join lines into newline-terminated text."""
        return ''.join(f'{line}\n' for line in lines)

    @staticmethod
    def text_to_lines(text: str) -> List[str]:
        """Split text into lines without terminators."""
        return text.splitlines()


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return DiffTestHelpers
