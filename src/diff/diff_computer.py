"""Line splitting and edit script computation."""

import re
from typing import Dict, List, Sequence

from diff.diff_exceptions import DiffComputeError
from diff.diff_types import Chunk, Delta, DeltaType, EditScript


# A line is terminated by CRLF, a lone CR or a lone LF; a final fragment
# without a terminator is still a line.
_LINE_PATTERN = re.compile(r'[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z')

_EQUAL = ' '
_DELETE = '-'
_INSERT = '+'


def split_lines(text: str) -> List[str]:
    """
    Split text into lines, keeping each line's terminator.

    Args:
        text: Text to split

    Returns:
        List of lines; empty for empty text

    Raises:
        DiffComputeError: If text is not a string
    """
    if not isinstance(text, str):
        raise DiffComputeError(
            f"Cannot split lines from {type(text).__name__}",
            {'phase': 'splitting', 'input_type': type(text).__name__}
        )

    return _LINE_PATTERN.findall(text)


def strip_line_ending(line: str) -> str:
    """Remove the line terminator, if any, from a single line."""
    return line.rstrip('\r\n')


class DiffComputer:
    """
    Computes minimal line-level edit scripts between two line sequences.

    Uses Myers' O((N+M)D) greedy algorithm, so the number of deleted plus
    inserted lines is always len(original) + len(revised) - 2 * LCS.
    """

    def compute(self, original: Sequence[str], revised: Sequence[str]) -> EditScript:
        """
        Compute the edit script transforming original into revised.

        The same inputs always produce the same script.

        Args:
            original: Lines of the original document
            revised: Lines of the revised document

        Returns:
            EditScript with deltas in position order

        Raises:
            DiffComputeError: If the sequences cannot be compared
        """
        try:
            ops = self._edit_operations(original, revised)

        except TypeError as e:
            raise DiffComputeError(
                f"Failed to compute diff: {e}",
                {'phase': 'computing', 'reason': str(e)}
            ) from e

        return EditScript(self._group_deltas(ops, original, revised))

    def compute_text(self, original_text: str, revised_text: str) -> EditScript:
        """
        Split two texts into lines and compute the edit script between them.

        Args:
            original_text: Original document contents
            revised_text: Revised document contents

        Returns:
            EditScript whose chunks hold lines with their terminators

        Raises:
            DiffComputeError: If either text cannot be split or diffed
        """
        return self.compute(split_lines(original_text), split_lines(revised_text))

    def _edit_operations(self, a: Sequence[str], b: Sequence[str]) -> List[str]:
        """
        Find a shortest edit path from a to b.

        Args:
            a: Original lines
            b: Revised lines

        Returns:
            Operations in forward order, one per line step: _EQUAL, _DELETE or _INSERT
        """
        n = len(a)
        m = len(b)

        # v[k] is the furthest x reached on diagonal k = x - y. trace[d] holds
        # v as it was before step d, which is what backtracking needs.
        v: Dict[int, int] = {1: 0}
        trace: List[Dict[int, int]] = []

        for d in range(n + m + 1):
            trace.append(dict(v))
            done = False
            for k in range(-d, d + 1, 2):
                # Ties between the neighbouring diagonals go to the deletion
                if k == -d or (k != d and v[k - 1] < v[k + 1]):
                    x = v[k + 1]

                else:
                    x = v[k - 1] + 1

                y = x - k
                while x < n and y < m and a[x] == b[y]:
                    x += 1
                    y += 1

                v[k] = x
                if x >= n and y >= m:
                    done = True
                    break

            if done:
                break

        return self._backtrack(trace, n, m)

    def _backtrack(self, trace: List[Dict[int, int]], n: int, m: int) -> List[str]:
        """
        Walk the recorded frontiers back from (n, m) to recover the path.

        Args:
            trace: Frontier snapshots, one per edit distance step
            n: Length of the original sequence
            m: Length of the revised sequence

        Returns:
            Operations in forward order
        """
        ops: List[str] = []
        x = n
        y = m

        for d in range(len(trace) - 1, -1, -1):
            v = trace[d]
            k = x - y
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                prev_k = k + 1

            else:
                prev_k = k - 1

            prev_x = v[prev_k]
            prev_y = prev_x - prev_k

            while x > prev_x and y > prev_y:
                ops.append(_EQUAL)
                x -= 1
                y -= 1

            if d > 0:
                ops.append(_INSERT if x == prev_x else _DELETE)

            x = prev_x
            y = prev_y

        ops.reverse()
        return ops

    def _group_deltas(self, ops: List[str], original: Sequence[str], revised: Sequence[str]) -> List[Delta]:
        """
        Merge each run of adjacent deletions and insertions into one delta.

        Args:
            ops: Operations in forward order
            original: Original lines
            revised: Revised lines

        Returns:
            Deltas in position order
        """
        deltas: List[Delta] = []
        i = 0
        j = 0
        idx = 0

        while idx < len(ops):
            if ops[idx] == _EQUAL:
                i += 1
                j += 1
                idx += 1
                continue

            start_i = i
            start_j = j
            while idx < len(ops) and ops[idx] != _EQUAL:
                if ops[idx] == _DELETE:
                    i += 1

                else:
                    j += 1

                idx += 1

            if i == start_i:
                delta_type = DeltaType.INSERT

            elif j == start_j:
                delta_type = DeltaType.DELETE

            else:
                delta_type = DeltaType.CHANGE

            deltas.append(Delta(
                type=delta_type,
                original=Chunk(start_i, list(original[start_i:i])),
                revised=Chunk(start_j, list(revised[start_j:j]))
            ))

        return deltas
