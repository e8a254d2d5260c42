"""Edit script application."""

from typing import List, Sequence

from diff.diff_exceptions import DiffApplicationError
from diff.diff_types import Delta, DiffApplicationResult, EditScript


class DiffApplier:
    """Applies edit scripts to line sequences."""

    def apply_script(
        self,
        script: EditScript,
        document: List[str],
        dry_run: bool = False
    ) -> DiffApplicationResult:
        """
        Apply an edit script to a list of lines, in place.

        This operation is atomic - either all deltas apply successfully or none do.

        Args:
            script: Edit script to apply
            document: Lines to modify
            dry_run: If True, validate but don't apply changes

        Returns:
            DiffApplicationResult with operation status

        Raises:
            DiffApplicationError: If a delta does not match the document
        """
        # Phase 1: Verify every delta against the document
        for idx, delta in enumerate(script.deltas):
            self._verify_delta(idx, len(script.deltas), delta, document)

        # Phase 2: Sort deltas bottom to top and check for overlaps
        ordered = sorted(script.deltas, key=lambda d: d.original.position, reverse=True)
        self._check_for_overlaps(ordered)

        if dry_run:
            return DiffApplicationResult(
                success=True,
                message=f'Edit script validation successful: {len(ordered)} delta(s) can be applied',
                deltas_applied=len(ordered)
            )

        # Phase 3: Apply from the bottom up so earlier positions stay valid
        for delta in ordered:
            start = delta.original.position
            document[start:delta.original.last] = delta.revised.lines

        return DiffApplicationResult(
            success=True,
            message=f'Successfully applied {len(ordered)} delta(s)',
            deltas_applied=len(ordered)
        )

    def patch(self, script: EditScript, lines: Sequence[str]) -> List[str]:
        """
        Return a copy of lines with the edit script applied.

        Args:
            script: Edit script to apply
            lines: Original lines (left untouched)

        Returns:
            The revised lines

        Raises:
            DiffApplicationError: If a delta does not match the lines
        """
        document = list(lines)
        self.apply_script(script, document)
        return document

    def _verify_delta(self, idx: int, total: int, delta: Delta, document: List[str]) -> None:
        """
        Check that a delta's original lines are present where it expects them.

        Raises:
            DiffApplicationError: If the lines differ or fall outside the document
        """
        start = delta.original.position
        actual = document[start:delta.original.last] if start >= 0 else []
        if 0 <= start <= len(document) and actual == delta.original.lines:
            return

        error_details = {
            'phase': 'verification',
            'failed_delta': idx + 1,
            'total_deltas': total,
            'reason': 'Original lines do not match the document',
            'expected_location': start,
            'expected_lines': delta.original.lines,
            'actual_lines': actual,
            'suggestion': 'The edit script was computed against different content. '
                'Recompute it from the current document.'
        }

        raise DiffApplicationError(
            f'Delta {idx + 1} does not match the document at line {start}',
            error_details
        )

    def _check_for_overlaps(self, ordered: List[Delta]) -> None:
        """
        Check if any deltas would overlap when applied.

        Args:
            ordered: Deltas sorted by original position, highest first

        Raises:
            DiffApplicationError: If overlaps found
        """
        for i in range(len(ordered) - 1):
            later = ordered[i]
            earlier = ordered[i + 1]

            # Two insertions at the same position would be ambiguous too
            if earlier.original.last > later.original.position or (
                earlier.original.position == later.original.position
            ):
                error_details = {
                    'phase': 'validation',
                    'reason': 'Overlapping deltas detected',
                    'delta1_range': [later.original.position, later.original.last],
                    'delta2_range': [earlier.original.position, earlier.original.last],
                    'suggestion': 'Deltas affect overlapping line ranges. Recompute the edit script.'
                }

                raise DiffApplicationError('Deltas would overlap when applied', error_details)
