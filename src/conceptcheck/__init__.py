"""Cross-reference spec steps against concept tags.

The core (extract/match) is pure text processing on already-read documents.
File discovery, presentation and the CLI are thin adapters around it, so the
same matching logic can sit behind any front end.
"""
from __future__ import annotations

from .extract import extract_concepts, extract_steps
from .match import check, find_line, match_steps, summarize
from .models import CheckResult, CheckSummary, Document, SpecStep, StepMatch

__all__ = [
    "CheckResult",
    "CheckSummary",
    "Document",
    "SpecStep",
    "StepMatch",
    "check",
    "extract_concepts",
    "extract_steps",
    "find_line",
    "match_steps",
    "summarize",
]
