from __future__ import annotations

from typing import Iterable

from .models import Document, SpecStep


STEP_MARKER = "*"
CONCEPT_MARKER = "#"


def as_document(doc: Document | str) -> Document:
    if isinstance(doc, Document):
        return doc
    return Document.from_text(doc)


def marker_value(line: str, marker: str) -> str | None:
    """Return the trimmed text after ``marker``, or None if the line isn't marked.

    The marker only counts once surrounding whitespace is trimmed; a bare
    marker yields an empty string.
    """
    s = line.strip()
    if not s.startswith(marker):
        return None
    return s[len(marker):].strip()


def extract_steps(doc: Document | str, marker: str = STEP_MARKER) -> list[SpecStep]:
    steps: list[SpecStep] = []
    for i, line in enumerate(as_document(doc).lines):
        value = marker_value(line, marker)
        if value is None:
            continue
        steps.append(SpecStep(line=i, value=value))
    return steps


def extract_concepts(docs: Iterable[Document | str], marker: str = CONCEPT_MARKER) -> list[str]:
    """Concept tags from every document, in document order then line order.

    Duplicates are kept; callers that only test membership build a set.
    """
    out: list[str] = []
    for doc in docs:
        for line in as_document(doc).lines:
            value = marker_value(line, marker)
            if value is not None:
                out.append(value)
    return out
