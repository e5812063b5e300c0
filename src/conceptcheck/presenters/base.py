from __future__ import annotations

from typing import Protocol

from ..models import CheckResult


EMPTY_NOTICE = "No spec steps matched a concept."


class Presenter(Protocol):
    def render(self, result: CheckResult) -> str: ...
