from __future__ import annotations

import json
from dataclasses import dataclass

from ..match import summarize
from ..models import CheckResult


@dataclass
class JsonPresenter:
    """Always renders; an empty match list is still a result."""

    indent: int = 2

    def render(self, result: CheckResult) -> str:
        payload = {
            "spec": result.spec_source,
            "concept_files": result.concept_sources,
            "matches": [{"step": m.step, "line": m.line} for m in result.matches],
            "summary": summarize(result).__dict__,
        }
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)
