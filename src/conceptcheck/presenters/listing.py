from __future__ import annotations

from dataclasses import dataclass

from ..models import CheckResult
from .base import EMPTY_NOTICE


@dataclass
class ListPresenter:
    """One message per matched step, in spec order."""

    show_empty: bool = False

    def render(self, result: CheckResult) -> str:
        if result.is_empty:
            return EMPTY_NOTICE if self.show_empty else ""
        lines: list[str] = []
        for m in result.matches:
            where = f"line {m.line + 1}" if m.line is not None else "not located"
            lines.append(f"{m.step} ({where})")
        return "\n".join(lines)
