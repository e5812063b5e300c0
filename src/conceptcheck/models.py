from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NamedTuple


_re_line_break = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Document:
    """Ordered lines of one text file plus an opaque source handle."""

    source: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>") -> "Document":
        # Keep the trailing empty line so indices line up with an editor's.
        return cls(source=source, lines=tuple(_re_line_break.split(text)))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class SpecStep(NamedTuple):
    line: int
    value: str


class StepMatch(NamedTuple):
    step: str
    line: int | None


@dataclass
class CheckResult:
    spec_source: str
    matches: list[StepMatch] = field(default_factory=list)
    steps: list[SpecStep] = field(default_factory=list)
    concepts: list[str] = field(default_factory=list)
    concept_sources: list[str] = field(default_factory=list)
    spec_lines: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.matches


@dataclass
class CheckSummary:
    n_steps: int
    n_matched: int
    n_located: int
    coverage: float
