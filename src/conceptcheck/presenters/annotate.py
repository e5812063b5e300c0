from __future__ import annotations

from dataclasses import dataclass

from ..models import CheckResult
from .base import EMPTY_NOTICE


@dataclass
class AnnotatePresenter:
    """Re-render the spec with a gutter column marking matched lines.

    Several matches can resolve to the same line (duplicate steps all locate
    to the first occurrence), so gutter marks are keyed by line index and each
    carries a tooltip listing the steps behind it.
    """

    gutter_mark: str = ">"
    show_empty: bool = False

    def render(self, result: CheckResult) -> str:
        if result.is_empty:
            return EMPTY_NOTICE if self.show_empty else ""

        tooltips: dict[int, list[str]] = {}
        for m in result.matches:
            if m.line is None:
                continue
            steps = tooltips.setdefault(m.line, [])
            if m.step not in steps:
                steps.append(m.step)

        width = len(str(len(result.spec_lines)))
        out: list[str] = []
        for i, line in enumerate(result.spec_lines):
            mark = self.gutter_mark if i in tooltips else " "
            row = f"{mark} {i + 1:>{width}} | {line}"
            if i in tooltips:
                row += "    <- concept: " + ", ".join(tooltips[i])
            out.append(row.rstrip())

        unlocated = [m.step for m in result.matches if m.line is None]
        if unlocated:
            out.append("")
            out.append("Matched but not located: " + ", ".join(unlocated))
        return "\n".join(out)
