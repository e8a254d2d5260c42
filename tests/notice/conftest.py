"""Shared fixtures for NOTICE check tests."""

import logging

import pytest

from notice.notice_config import NoticeCheckConfig


@pytest.fixture
def notice_config(tmp_path):
    """Create a configuration rooted in a temporary directory."""
    return NoticeCheckConfig(
        notice_file=str(tmp_path / "NOTICE"),
        build_dir=str(tmp_path / "build")
    )


@pytest.fixture
def write_notice(notice_config):
    """Factory writing the checked-in NOTICE file."""
    def _write(contents: str, encoding: str = "utf-8"):
        with open(notice_config.notice_file, 'w', encoding=encoding, newline='') as f:
            f.write(contents)
    return _write


@pytest.fixture
def restore_logging():
    """Restore root logger handlers replaced by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()

    root.handlers[:] = handlers
    root.setLevel(level)
