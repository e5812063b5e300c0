"""
Shared fixtures: in-memory documents and a small project tree on disk.
"""

from pathlib import Path

import pytest

from conceptcheck.models import Document


SPEC_TEXT = """# Login flow
* open the login page
* enter credentials
*   submit the form
notes about the flow
* check the dashboard
"""

CONCEPT_A = """# open the login page
  #enter credentials
not a tag
"""

CONCEPT_B = """# submit the form
# unrelated concept
"""


@pytest.fixture
def spec_doc():
    return Document.from_text(SPEC_TEXT, source="login.spec")


@pytest.fixture
def concept_docs():
    return [
        Document.from_text(CONCEPT_A, source="a.cpt"),
        Document.from_text(CONCEPT_B, source="b.cpt"),
    ]


@pytest.fixture
def project_tree(tmp_path) -> Path:
    """Project root with one spec and concept files spread over subdirectories."""
    (tmp_path / "specs").mkdir()
    (tmp_path / "concepts" / "nested").mkdir(parents=True)
    (tmp_path / "specs" / "login.spec").write_text(SPEC_TEXT, encoding="utf-8")
    (tmp_path / "concepts" / "a.cpt").write_text(CONCEPT_A, encoding="utf-8")
    (tmp_path / "concepts" / "nested" / "b.cpt").write_text(CONCEPT_B, encoding="utf-8")
    (tmp_path / "concepts" / "readme.txt").write_text("# open the login page\n", encoding="utf-8")
    return tmp_path
