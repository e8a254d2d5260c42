"""
NOTICE check orchestration.
"""

import logging
from pathlib import Path

from diff import DiffRenderer
from notice.notice_comparator import NoticeComparator
from notice.notice_config import NoticeCheckConfig
from notice.notice_exceptions import ContentMismatchError, MissingReferenceFileError
from notice.notice_types import NoticeCheckResult


class NoticeChecker:
    """Checks a checked-in NOTICE file against freshly generated contents."""

    def __init__(self, config: NoticeCheckConfig):
        """
        Initialize the checker.

        Args:
            config: Check configuration

        Raises:
            NoticeConfigError: If the configured encoding is not known
        """
        self.config = config
        self._comparator = NoticeComparator(config.encoding)
        self._renderer = DiffRenderer()
        self._logger = logging.getLogger("NoticeChecker")

    def check(self, expected: str) -> NoticeCheckResult:
        """
        Check that the NOTICE file matches the expected contents.

        The NOTICE file itself is never modified. On mismatch the expected
        contents are written to the configured expected file for inspection.

        Args:
            expected: Generated NOTICE contents

        Returns:
            NoticeCheckResult if the NOTICE file is up to date

        Raises:
            MissingReferenceFileError: If the NOTICE file does not exist
            NoticeIOError: If the NOTICE file cannot be read
            ContentMismatchError: If the NOTICE file differs from the expected contents
        """
        notice_path = self.config.notice_path
        if not notice_path.exists():
            raise MissingReferenceFileError(
                f"No NOTICE file exists at: {notice_path}",
                {'path': str(notice_path)}
            )

        result = self._comparator.compare(expected, notice_path)
        if result.is_identical:
            message = "NOTICE file is up to date"
            self._logger.info(message)
            return NoticeCheckResult(notice_file=str(notice_path), message=message)

        existing = result.existing_contents or ""
        diff_text = self._renderer.render(expected, existing)

        expected_path = self.config.expected_path
        self._write_expected(expected_path, expected)

        msg = f"Existing NOTICE file '{notice_path}' doesn't match expected NOTICE file: {expected_path}"
        self._logger.error("%s\n%s", msg, diff_text)
        raise ContentMismatchError(
            msg,
            notice_file=str(notice_path),
            expected_file=str(expected_path),
            diff_text=diff_text
        )

    def _write_expected(self, path: Path, contents: str) -> None:
        """Write the expected contents, logging rather than raising on failure."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=self.config.encoding, newline='') as f:
                f.write(contents)

        except (OSError, UnicodeEncodeError) as e:
            self._logger.warning("Failed to write expected NOTICE file to: %s", path, exc_info=e)
