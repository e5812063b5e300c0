from __future__ import annotations

import logging
from pathlib import Path

from .config import CheckProfile
from .match import check
from .models import CheckResult, Document

logger = logging.getLogger("conceptcheck.discover")


def find_files(root: Path, extension: str) -> list[Path]:
    """All files under ``root`` (recursively) with the given extension.

    Sorted so concept order, and therefore output, is reproducible.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Search root %s is not a directory", root)
        return []
    ext = "." + extension.lstrip(".")
    return sorted(p for p in root.rglob(f"*{ext}") if p.is_file() and p.suffix == ext)


def read_document(path: Path, encoding: str = "utf-8") -> Document:
    # Undecodable bytes become U+FFFD rather than aborting the whole check.
    text = Path(path).read_bytes().decode(encoding, errors="replace")
    return Document.from_text(text, source=str(path))


def is_spec_file(path: Path, profile: CheckProfile) -> bool:
    return Path(path).suffix == "." + profile.spec_extension


def load_concepts(root: Path, profile: CheckProfile) -> list[Document]:
    docs: list[Document] = []
    for p in find_files(root, profile.concept_extension):
        try:
            docs.append(read_document(p, profile.encoding))
        except OSError as e:
            logger.warning("Skipping unreadable concept file %s: %s", p, e)
    return docs


def run_check(spec_path: Path, root: Path | None, profile: CheckProfile | None = None) -> CheckResult:
    """Read the spec and every concept file under ``root``, then match.

    A missing or non-spec input is a no-op: the result is simply empty.
    """
    profile = profile or CheckProfile()
    spec_path = Path(spec_path)
    root = Path(root) if root is not None else spec_path.parent

    if not spec_path.is_file():
        logger.info("Spec file %s not found; nothing to check", spec_path)
        return CheckResult(spec_source=str(spec_path))
    if not is_spec_file(spec_path, profile):
        logger.info("%s is not a .%s file; nothing to check", spec_path, profile.spec_extension)
        return CheckResult(spec_source=str(spec_path))

    try:
        spec = read_document(spec_path, profile.encoding)
    except OSError as e:
        logger.warning("Cannot read spec file %s: %s", spec_path, e)
        return CheckResult(spec_source=str(spec_path))

    concept_docs = load_concepts(root, profile)
    if not concept_docs:
        logger.info("No .%s files under %s", profile.concept_extension, root)

    return check(
        spec,
        concept_docs,
        strict_locator=profile.strict_locator,
        step_marker=profile.step_marker,
        concept_marker=profile.concept_marker,
    )
