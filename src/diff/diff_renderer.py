"""Normal diff rendering."""

import logging
from typing import List

from diff.diff_computer import DiffComputer, strip_line_ending
from diff.diff_exceptions import DiffError
from diff.diff_types import DeltaType, EditScript


class DiffRenderer:
    """
    Renders line differences as normal diff text.

    Each delta is written as a header line ``<originalPos><tag><revisedPos>``
    (zero-based positions, tag ``d``, ``a`` or ``c``) followed by the removed
    lines prefixed with ``< `` and the added lines prefixed with ``> ``.
    """

    def __init__(self) -> None:
        self._computer = DiffComputer()
        self._logger = logging.getLogger("DiffRenderer")

    def render(self, expected: str, existing: str) -> str:
        """
        Render the differences between two documents.

        Rendering is best effort: if the documents cannot be diffed a warning
        is logged and an empty string is returned.

        Args:
            expected: Original document contents
            existing: Revised document contents

        Returns:
            Rendered diff text, empty if the documents have identical lines
        """
        try:
            script = self._computer.compute_text(expected, existing)

        except DiffError as e:
            self._logger.warning("Failed to generate diff between expected and existing documents: %s", e)
            return ""

        return self.render_script(script)

    def render_script(self, script: EditScript) -> str:
        """
        Render an already computed edit script.

        Args:
            script: Edit script to render

        Returns:
            Rendered diff text
        """
        out: List[str] = []
        for delta in script.deltas:
            out.append(f"{delta.original.position}{delta.type.value}{delta.revised.position}\n")

            if delta.type != DeltaType.INSERT:
                for line in delta.original.lines:
                    out.append(f"< {strip_line_ending(line)}\n")

            if delta.type != DeltaType.DELETE:
                for line in delta.revised.lines:
                    out.append(f"> {strip_line_ending(line)}\n")

        return "".join(out)
