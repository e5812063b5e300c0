from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .extract import CONCEPT_MARKER, STEP_MARKER, as_document, extract_concepts, extract_steps, marker_value
from .models import CheckResult, CheckSummary, Document, SpecStep, StepMatch

logger = logging.getLogger("conceptcheck.match")


def match_steps(steps: Iterable[SpecStep | str], concepts: Iterable[str]) -> list[str]:
    """Steps (in order, duplicates kept) whose exact value is a concept tag."""
    known = set(concepts)
    out: list[str] = []
    for s in steps:
        value = s.value if isinstance(s, SpecStep) else s
        if value in known:
            out.append(value)
    return out


def find_line(
    doc: Document | str,
    step: str,
    *,
    strict: bool = True,
    marker: str = STEP_MARKER,
) -> int | None:
    """Index of the first spec line carrying ``step``, or None.

    Strict mode requires the trimmed line to be exactly ``"<marker> <step>"``
    (one space), so ``"*   foo"`` is not found for ``foo`` even though the
    extractor reads it as ``foo``. Non-strict mode compares extracted values.
    """
    target = f"{marker} {step}"
    for i, line in enumerate(as_document(doc).lines):
        if strict:
            if line.strip() == target:
                return i
        elif marker_value(line, marker) == step:
            return i
    return None


def check(
    spec: Document | str,
    concept_docs: Sequence[Document | str],
    *,
    strict_locator: bool = True,
    step_marker: str = STEP_MARKER,
    concept_marker: str = CONCEPT_MARKER,
) -> CheckResult:
    spec_doc = as_document(spec)
    concept_docs = [as_document(d) for d in concept_docs]

    steps = extract_steps(spec_doc, marker=step_marker)
    concepts = extract_concepts(concept_docs, marker=concept_marker)
    matched = match_steps(steps, concepts)

    matches = [
        StepMatch(step=m, line=find_line(spec_doc, m, strict=strict_locator, marker=step_marker))
        for m in matched
    ]
    logger.debug(
        "%s: %d steps, %d concept tags from %d files, %d matched",
        spec_doc.source,
        len(steps),
        len(concepts),
        len(concept_docs),
        len(matches),
    )
    return CheckResult(
        spec_source=spec_doc.source,
        matches=matches,
        steps=steps,
        concepts=concepts,
        concept_sources=[d.source for d in concept_docs],
        spec_lines=spec_doc.lines,
    )


def summarize(result: CheckResult) -> CheckSummary:
    n_steps = len(result.steps)
    n_matched = len(result.matches)
    n_located = sum(1 for m in result.matches if m.line is not None)
    return CheckSummary(
        n_steps=n_steps,
        n_matched=n_matched,
        n_located=n_located,
        coverage=n_matched / n_steps if n_steps else 0.0,
    )
