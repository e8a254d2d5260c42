"""Normal diff parsing."""

import re
from typing import List

from diff.diff_exceptions import DiffParseError
from diff.diff_types import Chunk, Delta, DeltaType, EditScript


_HEADER_PATTERN = re.compile(r'^(\d+)([adc])(\d+)$')


class DiffParser:
    """Parser for the normal diff text produced by DiffRenderer."""

    def parse(self, diff_text: str) -> EditScript:
        """
        Parse rendered diff text into an edit script.

        Lines in the returned chunks carry no line terminators.

        Args:
            diff_text: Rendered diff text

        Returns:
            Parsed edit script; empty for empty text

        Raises:
            DiffParseError: If parsing fails
        """
        lines = diff_text.split('\n')
        if lines and lines[-1] == '':
            lines.pop()

        deltas: List[Delta] = []
        i = 0
        while i < len(lines):
            delta, consumed = self._parse_delta(lines, i)
            deltas.append(delta)
            i += consumed

        return EditScript(deltas)

    def _parse_delta(self, lines: List[str], start_idx: int) -> tuple[Delta, int]:
        """
        Parse a single delta starting at the given index.

        Args:
            lines: All lines from the diff
            start_idx: Index of the header line

        Returns:
            Tuple of the parsed delta and the number of lines it spans

        Raises:
            DiffParseError: If delta parsing fails
        """
        header = lines[start_idx]
        match = _HEADER_PATTERN.match(header)
        if not match:
            raise DiffParseError(
                f"Invalid delta header format: {header}",
                {'line_number': start_idx + 1, 'line_content': header,
                 'expected_format': '<originalPos><a|c|d><revisedPos>'}
            )

        original_pos = int(match.group(1))
        delta_type = DeltaType(match.group(2))
        revised_pos = int(match.group(3))

        removed: List[str] = []
        added: List[str] = []
        i = start_idx + 1

        while i < len(lines):
            line = lines[i]
            if _HEADER_PATTERN.match(line):
                break

            if line == '<' or line.startswith('< '):
                if added or delta_type == DeltaType.INSERT:
                    raise DiffParseError(
                        f"Unexpected removed line in '{header}' delta: {line}",
                        {'line_number': i + 1, 'line_content': line}
                    )

                removed.append(line[2:])

            elif line == '>' or line.startswith('> '):
                if delta_type == DeltaType.DELETE:
                    raise DiffParseError(
                        f"Unexpected added line in '{header}' delta: {line}",
                        {'line_number': i + 1, 'line_content': line}
                    )

                added.append(line[2:])

            else:
                raise DiffParseError(
                    f"Invalid diff line: {line}",
                    {'line_number': i + 1, 'line_content': line}
                )

            i += 1

        if delta_type != DeltaType.INSERT and not removed:
            raise DiffParseError(f"Delta '{header}' has no removed lines", {'line_number': start_idx + 1})

        if delta_type != DeltaType.DELETE and not added:
            raise DiffParseError(f"Delta '{header}' has no added lines", {'line_number': start_idx + 1})

        delta = Delta(delta_type, Chunk(original_pos, removed), Chunk(revised_pos, added))
        return delta, i - start_idx
