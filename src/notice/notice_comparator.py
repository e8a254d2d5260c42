"""Comparison of expected NOTICE contents against a file on disk."""

import codecs
import logging
import os

from notice.notice_exceptions import MissingReferenceFileError, NoticeConfigError, NoticeIOError
from notice.notice_types import ComparisonResult, ComparisonStatus


class NoticeComparator:
    """Compares expected document contents with an existing file."""

    def __init__(self, encoding: str = "UTF-8"):
        """
        Initialize the comparator.

        Args:
            encoding: Character encoding used to decode the existing file

        Raises:
            NoticeConfigError: If the encoding is not known
        """
        try:
            codecs.lookup(encoding)

        except LookupError as e:
            raise NoticeConfigError(f"Unknown encoding '{encoding}'", {'encoding': encoding}) from e

        self._encoding = encoding
        self._logger = logging.getLogger("NoticeComparator")

    @property
    def encoding(self) -> str:
        """Encoding used to read existing files."""
        return self._encoding

    def compare(self, expected: str, existing_path: str | os.PathLike) -> ComparisonResult:
        """
        Compare expected contents with the contents of an existing file.

        Args:
            expected: Expected document contents
            existing_path: Path of the existing document

        Returns:
            ComparisonResult, carrying the existing contents when they differ

        Raises:
            MissingReferenceFileError: If the existing file does not exist
            NoticeIOError: If the existing file cannot be read or decoded
        """
        if not os.path.exists(existing_path):
            raise MissingReferenceFileError(
                f"No NOTICE file exists at: {existing_path}",
                {'path': str(existing_path)}
            )

        existing = self._read(existing_path)

        if existing == expected:
            self._logger.debug("Contents of %s match the expected contents", existing_path)
            return ComparisonResult(ComparisonStatus.IDENTICAL)

        self._logger.debug("Contents of %s differ from the expected contents", existing_path)
        return ComparisonResult(ComparisonStatus.DIFFERENT, existing)

    def _read(self, path: str | os.PathLike) -> str:
        """
        Read a file's full contents without translating line endings.

        Raises:
            NoticeIOError: If the file cannot be read or decoded
        """
        try:
            with open(path, 'r', encoding=self._encoding, newline='') as f:
                return f.read()

        except (OSError, UnicodeDecodeError) as e:
            raise NoticeIOError(
                f"Failed to read existing NOTICE file from: {path}",
                {'path': str(path), 'encoding': self._encoding, 'reason': str(e)}
            ) from e
